from pydantic import BaseModel
from datetime import datetime
from typing import Optional

from models.incoming_mail import MailStatus, Department


# public view of a mail: no ids, names or audit timestamps
class DocumentStatus(BaseModel):
    registration_number: str
    last_status: MailStatus
    handling_department: Department
    last_update_date: Optional[datetime] = None
    progress_notes: Optional[str] = None
