from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.db.session import get_db
from app.core.security.auth import Identity
from app.core.security.dependencies import require_admin_or_own_company
from app.modules.companies.service import get_company
from app.modules.founders import service
from app.modules.founders.schemas import FounderOut, FounderUpdate

router = APIRouter(tags=["founders"])


def _founder_company_id(founder_id: uuid.UUID, db: Session = Depends(get_db)) -> uuid.UUID | None:
    return service.get_founder(db, founder_id).company_id


@router.get("/companies/{company_id}/founder", response_model=FounderOut | None)
def get_company_founder(
    company_id: uuid.UUID,
    db: Session = Depends(get_db),
    _identity: Identity = Depends(require_admin_or_own_company()),
) -> FounderOut | None:
    get_company(db, company_id)
    return service.first_founder_for_company(db, company_id)


@router.get("/founders/{founder_id}", response_model=FounderOut)
def get_founder(
    founder_id: uuid.UUID,
    db: Session = Depends(get_db),
    _identity: Identity = Depends(require_admin_or_own_company(_founder_company_id)),
) -> FounderOut:
    return service.get_founder(db, founder_id)


@router.put("/founders/{founder_id}", response_model=FounderOut)
def update_founder(
    founder_id: uuid.UUID,
    payload: FounderUpdate,
    db: Session = Depends(get_db),
    _identity: Identity = Depends(require_admin_or_own_company(_founder_company_id)),
) -> FounderOut:
    founder = service.get_founder(db, founder_id)
    return service.update_founder(db, founder, payload)
