# app/endpoints/admin.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.errors import AuthFailure
from core.security import create_access_token, get_current_admin
from database.session import get_db
from models.admin import Admin
from schemas.admin import (
    AdminLogin,
    AdminRegister,
    AdminResponse,
    ChangePasswordIn,
    ChangePasswordResult,
    LoginResponse,
)
from service import admin_auth

router = APIRouter(prefix="/admins", tags=["Admin"])


@router.post("/login", response_model=LoginResponse)
def admin_login(payload: AdminLogin, db: Session = Depends(get_db)):
    admin = admin_auth.login(db, payload.username, payload.password)
    if admin is None:
        raise AuthFailure("invalid username or password")
    return LoginResponse(
        admin=AdminResponse.model_validate(admin),
        access_token=create_access_token(admin.id),
    )


@router.get("/me", response_model=AdminResponse)
def read_me(current: Admin = Depends(get_current_admin)):
    return current


@router.post("/change_password", response_model=ChangePasswordResult)
def change_password(
    payload: ChangePasswordIn,
    current: Admin = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    # credential mismatch is reported as success=false
    ok = admin_auth.change_password(db, current.id, payload.current_password, payload.new_password)
    return ChangePasswordResult(success=ok)


@router.post(
    "/",
    response_model=AdminResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)],
)
def register_admin(payload: AdminRegister, db: Session = Depends(get_db)):
    return admin_auth.register_admin(db, payload.username, payload.password)
