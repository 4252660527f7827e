# models/__init__.py

from models import admin
from models import incoming_mail

__all__ = [
    "admin",
    "incoming_mail",
]
