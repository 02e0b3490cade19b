from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.db.session import get_db
from app.core.security.auth import Identity
from app.core.security.dependencies import require_admin_or_own_company
from app.modules.companies.service import get_company
from app.modules.fundraising import service
from app.modules.fundraising.schemas import FundraisingCreate, FundraisingOut, FundraisingUpdate

router = APIRouter(tags=["fundraising"])


def _round_company_id(round_id: uuid.UUID, db: Session = Depends(get_db)) -> uuid.UUID:
    return service.get_round(db, round_id).company_id


@router.get("/companies/{company_id}/fundraising", response_model=list[FundraisingOut])
def list_rounds(
    company_id: uuid.UUID,
    db: Session = Depends(get_db),
    _identity: Identity = Depends(require_admin_or_own_company()),
) -> list[FundraisingOut]:
    get_company(db, company_id)
    return service.list_rounds(db, company_id)


@router.post(
    "/companies/{company_id}/fundraising",
    response_model=FundraisingOut,
    status_code=status.HTTP_201_CREATED,
)
def create_round(
    company_id: uuid.UUID,
    payload: FundraisingCreate,
    db: Session = Depends(get_db),
    _identity: Identity = Depends(require_admin_or_own_company()),
) -> FundraisingOut:
    return service.create_round(db, company_id=company_id, data=payload)


@router.put("/fundraising/{round_id}", response_model=FundraisingOut)
def update_round(
    round_id: uuid.UUID,
    payload: FundraisingUpdate,
    db: Session = Depends(get_db),
    _identity: Identity = Depends(require_admin_or_own_company(_round_company_id)),
) -> FundraisingOut:
    return service.update_round(db, service.get_round(db, round_id), payload)


@router.delete("/fundraising/{round_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_round(
    round_id: uuid.UUID,
    db: Session = Depends(get_db),
    _identity: Identity = Depends(require_admin_or_own_company(_round_company_id)),
) -> Response:
    service.delete_round(db, service.get_round(db, round_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
