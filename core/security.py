# core/security.py
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import hashlib
import hmac

import bcrypt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

import core.config as config
from core.errors import AuthFailure
from crud import admin as admin_crud
from database.session import get_db

# Stored credentials carry an explicit scheme tag: "<scheme>$<payload>".
CURRENT_SCHEME = "bcrypt"
LEGACY_SCRYPT_SCHEME = "scrypt"

# Node crypto.scrypt defaults used by the legacy seed data
_SCRYPT_N = 16384
_SCRYPT_R = 8
_SCRYPT_P = 1
_SCRYPT_DKLEN = 64

bearer = HTTPBearer(auto_error=False)


def _bcrypt_bytes(plain: str) -> bytes:
    # bcrypt only looks at the first 72 bytes
    return plain.encode("utf-8")[:72]


def hash_password(plain: str) -> str:
    hashed = bcrypt.hashpw(_bcrypt_bytes(plain), bcrypt.gensalt(rounds=config.BCRYPT_ROUNDS))
    return f"{CURRENT_SCHEME}${hashed.decode('utf-8')}"


def hash_password_legacy_scrypt(plain: str, salt: str) -> str:
    derived = hashlib.scrypt(
        plain.encode("utf-8"),
        salt=salt.encode("utf-8"),
        n=_SCRYPT_N,
        r=_SCRYPT_R,
        p=_SCRYPT_P,
        dklen=_SCRYPT_DKLEN,
    )
    return f"{LEGACY_SCRYPT_SCHEME}${salt}${derived.hex()}"


def scheme_of(stored: str) -> Optional[str]:
    scheme, sep, _ = (stored or "").partition("$")
    return scheme if sep else None


def verify_password(plain: str, stored: str) -> bool:
    scheme = scheme_of(stored)
    payload = stored.split("$", 1)[1] if scheme else ""

    if scheme == CURRENT_SCHEME:
        try:
            return bcrypt.checkpw(_bcrypt_bytes(plain), payload.encode("utf-8"))
        except ValueError:
            return False

    if scheme == LEGACY_SCRYPT_SCHEME:
        salt, sep, _ = payload.partition("$")
        if not sep or not salt:
            return False
        computed = hash_password_legacy_scrypt(plain, salt)
        return hmac.compare_digest(computed.encode("utf-8"), stored.encode("utf-8"))

    return False


def needs_rehash(stored: str) -> bool:
    return scheme_of(stored) != CURRENT_SCHEME


# verified against when the username is unknown, so both failure paths cost one bcrypt check
_DUMMY_HASH = hash_password("emot-dummy-password")


def burn_verification(plain: str) -> None:
    verify_password(plain, _DUMMY_HASH)


def create_access_token(admin_id: int, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode: Dict[str, Any] = {"sub": str(admin_id), "type": "access", "exp": expire}
    return jwt.encode(to_encode, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> int:
    """Return the admin id carried by a valid access token."""
    try:
        payload = jwt.decode(token, config.JWT_SECRET_KEY, algorithms=[config.JWT_ALGORITHM])
    except JWTError:
        raise AuthFailure("could not validate credentials")

    if payload.get("type") != "access":
        raise AuthFailure("invalid token type")
    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise AuthFailure("could not validate credentials")


def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    db: Session = Depends(get_db),
):
    if credentials is None:
        raise AuthFailure("not authenticated")
    admin = admin_crud.get(db, decode_access_token(credentials.credentials))
    if admin is None:
        raise AuthFailure("could not validate credentials")
    return admin
