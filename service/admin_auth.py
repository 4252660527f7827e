# service/admin_auth.py
"""Administrator login, password change and bootstrap seeding."""
from __future__ import annotations
import logging
from typing import Optional

from sqlalchemy.orm import Session

import core.config as config
from core import security
from core.errors import UniquenessViolation
from crud import admin as admin_crud
from models.admin import Admin

log = logging.getLogger("emot.auth")


def login(db: Session, username: str, password: str) -> Optional[Admin]:
    """Return the admin on success, ``None`` on any credential mismatch.

    Unknown usernames still pay for one hash check so both failure paths
    look the same from the outside.
    """
    admin = admin_crud.get_by_username(db, username)
    if admin is None:
        security.burn_verification(password)
        log.info("login failed username=%s", username)
        return None

    if not security.verify_password(password, admin.password_hash):
        log.info("login failed username=%s", username)
        return None

    if security.needs_rehash(admin.password_hash):
        old_scheme = security.scheme_of(admin.password_hash)
        admin = admin_crud.set_password_hash(db, admin, security.hash_password(password))
        log.info("credential of admin id=%s migrated from %s to %s", admin.id, old_scheme, security.CURRENT_SCHEME)

    return admin


def change_password(db: Session, admin_id: int, current_password: str, new_password: str) -> bool:
    admin = admin_crud.get(db, admin_id)
    if admin is None:
        return False
    if not security.verify_password(current_password, admin.password_hash):
        log.info("password change rejected for admin id=%s", admin_id)
        return False

    admin_crud.set_password_hash(db, admin, security.hash_password(new_password))
    log.info("password changed for admin id=%s", admin_id)
    return True


def register_admin(db: Session, username: str, password: str) -> Admin:
    admin = admin_crud.create(db, username, security.hash_password(password))
    log.info("admin registered id=%s username=%s", admin.id, admin.username)
    return admin


def seed_default_admin(db: Session) -> bool:
    """Create the bootstrap admin when the table is empty. Safe to call repeatedly."""
    if admin_crud.exists_any(db):
        log.info("admin users already exist, skipping default admin creation")
        return True

    try:
        admin_crud.create(
            db,
            config.DEFAULT_ADMIN_USERNAME,
            security.hash_password(config.DEFAULT_ADMIN_PASSWORD),
        )
    except UniquenessViolation:
        # another process seeded first
        log.info("default admin created concurrently, nothing to do")
        return True

    log.warning(
        "default admin '%s' created, change its password after first login",
        config.DEFAULT_ADMIN_USERNAME,
    )
    return True
