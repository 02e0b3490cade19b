from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.db.session import get_db
from app.core.security.auth import Identity
from app.core.security.dependencies import require_admin_or_own_company
from app.modules.companies.service import get_company
from app.modules.revenue import service
from app.modules.revenue.schemas import RevenueCreate, RevenueOut, RevenueUpdate

router = APIRouter(tags=["revenue"])


def _revenue_company_id(revenue_id: uuid.UUID, db: Session = Depends(get_db)) -> uuid.UUID:
    return service.get_revenue(db, revenue_id).company_id


@router.get("/companies/{company_id}/revenue", response_model=list[RevenueOut])
def list_revenue(
    company_id: uuid.UUID,
    db: Session = Depends(get_db),
    _identity: Identity = Depends(require_admin_or_own_company()),
) -> list[RevenueOut]:
    get_company(db, company_id)
    return service.list_revenue(db, company_id)


@router.post("/companies/{company_id}/revenue", response_model=RevenueOut, status_code=status.HTTP_201_CREATED)
def create_revenue(
    company_id: uuid.UUID,
    payload: RevenueCreate,
    db: Session = Depends(get_db),
    _identity: Identity = Depends(require_admin_or_own_company()),
) -> RevenueOut:
    return service.create_revenue(db, company_id=company_id, data=payload)


@router.put("/revenue/{revenue_id}", response_model=RevenueOut)
def update_revenue(
    revenue_id: uuid.UUID,
    payload: RevenueUpdate,
    db: Session = Depends(get_db),
    _identity: Identity = Depends(require_admin_or_own_company(_revenue_company_id)),
) -> RevenueOut:
    return service.update_revenue(db, service.get_revenue(db, revenue_id), payload)


@router.delete("/revenue/{revenue_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_revenue(
    revenue_id: uuid.UUID,
    db: Session = Depends(get_db),
    _identity: Identity = Depends(require_admin_or_own_company(_revenue_company_id)),
) -> Response:
    service.delete_revenue(db, service.get_revenue(db, revenue_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
