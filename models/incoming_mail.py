# models/incoming_mail.py
import enum

from sqlalchemy import Column, String, Text, DateTime, Enum, func, Index
from database.base import Base, Id, utcnow


class MailStatus(str, enum.Enum):
    RECEIVED = "Diterima"
    IN_PROGRESS = "Diproses"
    COMPLETED = "Selesai"
    REJECTED = "Ditolak"


class Department(str, enum.Enum):
    MUTATION = "Bidang Mutasi"
    PERSONNEL = "Bidang Kepegawaian"
    DEVELOPMENT = "Bidang Pengembangan"
    ADMINISTRATION = "Bidang Administrasi"


def _enum_values(cls):
    return [m.value for m in cls]


class IncomingMail(Base):
    __tablename__ = "incoming_mails"

    id = Column(Id, primary_key=True, autoincrement=True)
    registration_number = Column(String, unique=True, nullable=False)

    sender_name = Column(String, nullable=False)
    opd_name = Column(String, nullable=False)  # originating agency
    letter_number = Column(String, nullable=False)
    letter_subject = Column(String, nullable=False)
    receiver_name = Column(String, nullable=False)
    incoming_date = Column(DateTime(timezone=True), nullable=False)

    status = Column(
        Enum(MailStatus, name="letter_status", values_callable=_enum_values, create_constraint=True),
        nullable=False,
    )
    department = Column(
        Enum(Department, name="department", values_callable=_enum_values, create_constraint=True),
        nullable=False,
    )

    update_date = Column(DateTime(timezone=True), nullable=True)  # last progress stamp
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow, nullable=False
    )

    __table_args__ = (
        Index("idx_incoming_mails_created", "created_at"),
        Index("idx_incoming_mails_status", "status"),
        Index("idx_incoming_mails_sender", "sender_name"),
    )


__all__ = ["IncomingMail", "MailStatus", "Department"]
