# service/tracking.py
from __future__ import annotations
from typing import Optional

from sqlalchemy.orm import Session

from crud import incoming_mail as mail_crud
from schemas.tracking import DocumentStatus


def track_document(db: Session, registration_number: str) -> Optional[DocumentStatus]:
    mail = mail_crud.get_by_registration_number(db, registration_number)
    if mail is None:
        return None
    return DocumentStatus(
        registration_number=mail.registration_number,
        last_status=mail.status,
        handling_department=mail.department,
        last_update_date=mail.update_date,
        progress_notes=mail.notes,
    )
