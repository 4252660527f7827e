# models/admin.py
from sqlalchemy import Column, String, DateTime, func, Index
from database.base import Base, Id, utcnow


class Admin(Base):
    __tablename__ = "admins"

    id = Column(Id, primary_key=True, autoincrement=True)
    username = Column(String, unique=True, nullable=False)
    password_hash = Column(String, nullable=False)  # "<scheme>$<payload>", see core.security

    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow, nullable=False
    )

    __table_args__ = (
        Index("idx_admins_created", "created_at"),
    )


__all__ = ["Admin"]
