# crud/incoming_mail.py

from __future__ import annotations
import logging
from typing import Optional, List, Dict, Any
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.errors import UniquenessViolation
from database.base import MAX_BIGINT, in_id_range
from models.incoming_mail import IncomingMail
from service.mail_lifecycle import apply_update_policy

log = logging.getLogger("emot.mail")

DEFAULT_LIMIT = 10


def _ordered():
    # newest first; id breaks ties so paging never repeats or skips rows
    return select(IncomingMail).order_by(IncomingMail.created_at.desc(), IncomingMail.id.desc())


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _commit_unique(db: Session, registration_number: Optional[str]) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        if registration_number and get_by_registration_number(db, registration_number) is not None:
            log.warning("registration number already used: %s", registration_number)
            raise UniquenessViolation("registration_number", "registration number already used")
        raise


# ====== read ======
def get(db: Session, mail_id: int) -> Optional[IncomingMail]:
    # ids outside BIGINT can never match a row
    if not in_id_range(mail_id):
        return None
    return db.get(IncomingMail, mail_id)


def get_by_registration_number(db: Session, registration_number: str) -> Optional[IncomingMail]:
    return db.execute(
        select(IncomingMail).where(IncomingMail.registration_number == registration_number)
    ).scalar_one_or_none()


def list_all(db: Session) -> List[IncomingMail]:
    return db.execute(_ordered()).scalars().all()


def list_recent(db: Session, limit: int = DEFAULT_LIMIT) -> List[IncomingMail]:
    return db.execute(_ordered().limit(min(limit, MAX_BIGINT))).scalars().all()


def search_by_sender(
    db: Session,
    sender_name: Optional[str] = None,
    *,
    limit: int = DEFAULT_LIMIT,
    offset: int = 0,
) -> List[IncomingMail]:
    stmt = _ordered()
    if sender_name:
        stmt = stmt.where(IncomingMail.sender_name.ilike(f"%{_escape_like(sender_name)}%", escape="\\"))
    stmt = stmt.offset(min(offset, MAX_BIGINT)).limit(min(limit, MAX_BIGINT))
    return db.execute(stmt).scalars().all()


# ====== write ======
def create(db: Session, data: Dict[str, Any]) -> IncomingMail:
    data = dict(data)
    # empty optional fields are stored as NULL
    for key in ("notes", "update_date"):
        if not data.get(key):
            data[key] = None
    obj = IncomingMail(**data)
    db.add(obj)
    _commit_unique(db, data.get("registration_number"))
    db.refresh(obj)
    log.info("mail created id=%s registration_number=%s", obj.id, obj.registration_number)
    return obj


# partial update, see service.mail_lifecycle for update_date
def update(db: Session, mail_id: int, data: Dict[str, Any]) -> Optional[IncomingMail]:
    obj = get(db, mail_id)
    if not obj:
        return None

    for k, v in apply_update_policy(data).items():
        setattr(obj, k, v)

    db.add(obj)
    _commit_unique(db, data.get("registration_number"))
    db.refresh(obj)
    log.info("mail updated id=%s fields=%s", obj.id, sorted(data))
    return obj


def delete(db: Session, mail_id: int) -> bool:
    obj = get(db, mail_id)
    if not obj:
        return False
    registration_number = obj.registration_number
    db.delete(obj)
    db.commit()
    log.info("mail deleted id=%s registration_number=%s", mail_id, registration_number)
    return True
