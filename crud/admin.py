from typing import Optional
from datetime import datetime, timezone
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.errors import UniquenessViolation
from database.base import in_id_range
from models.admin import Admin
# crud/admin.py


def get(db: Session, admin_id: int) -> Optional[Admin]:
    if not in_id_range(admin_id):
        return None
    return db.get(Admin, admin_id)


# exact, case-sensitive match
def get_by_username(db: Session, username: str) -> Optional[Admin]:
    return db.execute(
        select(Admin).where(Admin.username == username)
    ).scalar_one_or_none()


def exists_any(db: Session) -> bool:
    return db.execute(select(Admin.id).limit(1)).first() is not None


def count(db: Session) -> int:
    return db.scalar(select(func.count()).select_from(Admin)) or 0


def create(db: Session, username: str, password_hash: str) -> Admin:
    obj = Admin(username=username, password_hash=password_hash)
    db.add(obj)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        if get_by_username(db, username) is not None:
            raise UniquenessViolation("username", "username already used")
        raise
    db.refresh(obj)
    return obj


def set_password_hash(db: Session, admin: Admin, password_hash: str) -> Admin:
    admin.password_hash = password_hash
    admin.updated_at = datetime.now(timezone.utc)
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin
