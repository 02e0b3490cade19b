from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.core.db.session import get_db
from app.core.security.auth import Identity
from app.core.security.dependencies import get_identity, require_role
from app.modules.mentors import service
from app.modules.mentors.schemas import MentorCreate, MentorOut, MentorUpdate
from app.shared.enums import Role

router = APIRouter(prefix="/brain-trust-mentors", tags=["brain-trust"])


def _limit(limit: int = Query(100, ge=1, le=500)) -> int:
    return limit


def _offset(offset: int = Query(0, ge=0, le=100_000)) -> int:
    return offset


@router.get("", response_model=list[MentorOut])
def list_mentors(
    db: Session = Depends(get_db),
    _identity: Identity = Depends(get_identity),
    limit: int = Depends(_limit),
    offset: int = Depends(_offset),
) -> list[MentorOut]:
    return service.list_mentors(db, limit=limit, offset=offset)


@router.get("/{mentor_id}", response_model=MentorOut)
def get_mentor(
    mentor_id: uuid.UUID,
    db: Session = Depends(get_db),
    _identity: Identity = Depends(get_identity),
) -> MentorOut:
    return service.get_mentor(db, mentor_id)


@router.post("", response_model=MentorOut, status_code=status.HTTP_201_CREATED)
def create_mentor(
    payload: MentorCreate,
    db: Session = Depends(get_db),
    _admin: Identity = Depends(require_role(Role.ADMIN)),
) -> MentorOut:
    return service.create_mentor(db, data=payload)


@router.put("/{mentor_id}", response_model=MentorOut)
def update_mentor(
    mentor_id: uuid.UUID,
    payload: MentorUpdate,
    db: Session = Depends(get_db),
    _admin: Identity = Depends(require_role(Role.ADMIN)),
) -> MentorOut:
    return service.update_mentor(db, service.get_mentor(db, mentor_id), payload)


@router.delete("/{mentor_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_mentor(
    mentor_id: uuid.UUID,
    db: Session = Depends(get_db),
    _admin: Identity = Depends(require_role(Role.ADMIN)),
) -> Response:
    service.delete_mentor(db, service.get_mentor(db, mentor_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
