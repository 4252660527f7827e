from pydantic import BaseModel, Field, model_validator
from datetime import datetime
from typing import Optional

from models.incoming_mail import MailStatus, Department

# columns that may never be cleared through an update
NON_NULLABLE_FIELDS = (
    "registration_number",
    "sender_name",
    "opd_name",
    "letter_number",
    "letter_subject",
    "receiver_name",
    "incoming_date",
    "status",
    "department",
)


# shared fields
class IncomingMailBase(BaseModel):
    registration_number: str = Field(..., min_length=1)
    sender_name: str = Field(..., min_length=1)
    opd_name: str = Field(..., min_length=1)
    letter_number: str = Field(..., min_length=1)
    letter_subject: str = Field(..., min_length=1)
    receiver_name: str = Field(..., min_length=1)
    incoming_date: datetime
    status: MailStatus
    department: Department
    update_date: Optional[datetime] = None
    notes: Optional[str] = None


class IncomingMailCreate(IncomingMailBase):
    pass


# partial update: only the fields the caller sends are touched
class IncomingMailUpdate(BaseModel):
    registration_number: Optional[str] = Field(None, min_length=1)
    sender_name: Optional[str] = Field(None, min_length=1)
    opd_name: Optional[str] = Field(None, min_length=1)
    letter_number: Optional[str] = Field(None, min_length=1)
    letter_subject: Optional[str] = Field(None, min_length=1)
    receiver_name: Optional[str] = Field(None, min_length=1)
    incoming_date: Optional[datetime] = None
    status: Optional[MailStatus] = None
    department: Optional[Department] = None
    update_date: Optional[datetime] = None
    notes: Optional[str] = None

    @model_validator(mode="after")
    def _reject_null_required(self):
        cleared = [f for f in NON_NULLABLE_FIELDS if f in self.model_fields_set and getattr(self, f) is None]
        if cleared:
            raise ValueError(f"fields cannot be null: {', '.join(cleared)}")
        return self


class IncomingMailResponse(IncomingMailBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class DeleteResult(BaseModel):
    success: bool
