# app/endpoints/system.py
from datetime import datetime, timezone
from fastapi import APIRouter

router = APIRouter(tags=["System"])


@router.get("/health")
def healthcheck():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
