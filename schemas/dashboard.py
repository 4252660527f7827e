from pydantic import BaseModel


class DashboardStats(BaseModel):
    total_mails: int
    processed_mails: int
    completed_mails: int
