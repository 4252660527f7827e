from pydantic import BaseModel, Field
from datetime import datetime

MIN_PASSWORD_LENGTH = 6


class AdminLogin(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AdminRegister(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)


class ChangePasswordIn(BaseModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)


# password_hash never leaves the server
class AdminResponse(BaseModel):
    id: int
    username: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class LoginResponse(BaseModel):
    admin: AdminResponse
    access_token: str
    token_type: str = "bearer"


class ChangePasswordResult(BaseModel):
    success: bool
