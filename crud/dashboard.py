# crud/dashboard.py
from __future__ import annotations
from typing import Dict
from sqlalchemy import select, func, case
from sqlalchemy.orm import Session

from models.incoming_mail import IncomingMail, MailStatus


def _count_where(condition):
    return func.coalesce(func.sum(case((condition, 1), else_=0)), 0)


def get_stats(db: Session) -> Dict[str, int]:
    # one pass, so the three counts come from the same snapshot
    row = db.execute(
        select(
            func.count(IncomingMail.id),
            _count_where(IncomingMail.status == MailStatus.IN_PROGRESS),
            _count_where(IncomingMail.status == MailStatus.COMPLETED),
        )
    ).one()
    total, processed, completed = row
    return {
        "total_mails": int(total or 0),
        "processed_mails": int(processed or 0),
        "completed_mails": int(completed or 0),
    }
