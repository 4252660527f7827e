# app/endpoints/mail.py
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from core.errors import NotFoundError
from core.security import get_current_admin
from crud import incoming_mail as crud
from database.session import get_db
from schemas.incoming_mail import (
    IncomingMailCreate,
    IncomingMailUpdate,
    IncomingMailResponse,
    DeleteResult,
)

router = APIRouter(
    prefix="/mails",
    tags=["Incoming Mail"],
    dependencies=[Depends(get_current_admin)],
)


@router.get("/", response_model=list[IncomingMailResponse])
def get_all_mails(db: Session = Depends(get_db)):
    return crud.list_all(db)


@router.get("/recent", response_model=list[IncomingMailResponse])
def get_recent_mails(
    limit: int = Query(crud.DEFAULT_LIMIT, ge=1),
    db: Session = Depends(get_db),
):
    return crud.list_recent(db, limit=limit)


@router.get("/search", response_model=list[IncomingMailResponse])
def search_mails(
    sender_name: str | None = Query(None, description="case-insensitive substring of the sender name"),
    limit: int = Query(crud.DEFAULT_LIMIT, ge=1),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    return crud.search_by_sender(db, sender_name, limit=limit, offset=offset)


@router.get("/{mail_id}", response_model=IncomingMailResponse)
def get_mail_by_id(mail_id: int, db: Session = Depends(get_db)):
    obj = crud.get(db, mail_id)
    if not obj:
        raise NotFoundError("mail not found")
    return obj


@router.post("/", response_model=IncomingMailResponse, status_code=status.HTTP_201_CREATED)
def create_incoming_mail(payload: IncomingMailCreate, db: Session = Depends(get_db)):
    return crud.create(db, payload.model_dump())


@router.patch("/{mail_id}", response_model=IncomingMailResponse)
def update_incoming_mail(mail_id: int, payload: IncomingMailUpdate, db: Session = Depends(get_db)):
    obj = crud.update(db, mail_id, payload.model_dump(exclude_unset=True))
    if not obj:
        raise NotFoundError("mail not found")
    return obj


@router.delete("/{mail_id}", response_model=DeleteResult)
def delete_mail(mail_id: int, db: Session = Depends(get_db)):
    # a missing id is a failed delete, not an error
    return DeleteResult(success=crud.delete(db, mail_id))
