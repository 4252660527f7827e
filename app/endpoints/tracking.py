# app/endpoints/tracking.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.errors import NotFoundError
from database.session import get_db
from schemas.tracking import DocumentStatus
from service.tracking import track_document as track

router = APIRouter(prefix="/tracking", tags=["Public Tracking"])


# query parameter, registration numbers often contain "/"
@router.get("", response_model=DocumentStatus)
def track_document(
    registration_number: str = Query(..., min_length=1),
    db: Session = Depends(get_db),
):
    result = track(db, registration_number)
    if result is None:
        raise NotFoundError("document not found")
    return result
