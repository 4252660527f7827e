# service/mail_lifecycle.py
"""Progress-stamp rules applied to every partial update of an incoming mail.

Touching ``status`` (even re-sending the current value) stamps ``update_date``
with the time of the call. A caller that sends ``update_date`` itself always
wins, and an explicit ``None`` clears the stamp. ``updated_at`` moves on every
update no matter which fields changed.
"""
from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, Optional


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def apply_update_policy(changes: Dict[str, Any], now: Optional[datetime] = None) -> Dict[str, Any]:
    now = now or now_utc()
    values = dict(changes)
    if "status" in values and "update_date" not in values:
        values["update_date"] = now
    values["updated_at"] = now
    return values
