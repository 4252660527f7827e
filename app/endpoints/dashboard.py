# app/endpoints/dashboard.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.security import get_current_admin
from crud import dashboard
from database.session import get_db
from schemas.dashboard import DashboardStats

router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
    dependencies=[Depends(get_current_admin)],
)


# total / in progress (Diproses) / completed (Selesai)
@router.get("/stats", response_model=DashboardStats)
def get_dashboard_stats(db: Session = Depends(get_db)):
    return DashboardStats(**dashboard.get_stats(db))
