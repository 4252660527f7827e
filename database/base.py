from datetime import datetime, timezone
from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import declarative_base
import core.config as config
import os

Base = declarative_base()

# sqlite only autoincrements INTEGER PRIMARY KEY
Id = BigInteger().with_variant(Integer(), "sqlite")

# largest value a BIGINT column / LIMIT / OFFSET bind accepts
MAX_BIGINT = 2**63 - 1


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def in_id_range(value: int) -> bool:
    return 0 < value <= MAX_BIGINT


database = config.DB
user = config.DB_USER
pw = config.DB_PASSWORD
server = config.DB_SERVER
port = config.DB_PORT
name = config.DB_NAME


def resolve_database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    if not all([user, server, name]):
        raise RuntimeError(
            "database connection is not configured: set DATABASE_URL or DB_USER/DB_SERVER/DB_NAME"
        )
    return f"{database}://{user}:{pw}@{server}:{port}/{name}"


DATABASE_URL = resolve_database_url()
