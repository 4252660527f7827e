from fastapi import APIRouter, FastAPI
from app.endpoints import admin, dashboard, mail, system, tracking

router = APIRouter()

router.include_router(system.router)
router.include_router(tracking.router)
router.include_router(admin.router)
router.include_router(dashboard.router)
router.include_router(mail.router)

def register_routers(app: FastAPI) -> None:
    app.include_router(router)
