from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.core.db.session import get_db
from app.core.security.auth import Identity
from app.core.security.dependencies import require_admin_or_own_company, require_role
from app.modules.companies import service
from app.modules.companies.reconciler import reconcile_company
from app.modules.companies.schemas import (
    CompanyCreatedOut,
    CompanyCreateRequest,
    CompanyOut,
    CompanyPatch,
    CompanyUpdate,
    CompanyView,
    MyCompanyOut,
)
from app.modules.founders.schemas import FounderOut
from app.shared.enums import Role

router = APIRouter(tags=["companies"])


def _limit(limit: int = Query(100, ge=1, le=500)) -> int:
    return limit


def _offset(offset: int = Query(0, ge=0, le=100_000)) -> int:
    return offset


@router.get("/companies", response_model=list[CompanyOut])
def list_companies(
    db: Session = Depends(get_db),
    _admin: Identity = Depends(require_role(Role.ADMIN)),
    limit: int = Depends(_limit),
    offset: int = Depends(_offset),
) -> list[CompanyOut]:
    return service.list_companies(db, limit=limit, offset=offset)


@router.get("/companies/{company_id}", response_model=CompanyView)
def get_company(
    company_id: uuid.UUID,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_admin_or_own_company()),
) -> CompanyView:
    return service.build_company_view(db, company_id, include_admin_snapshot=identity.is_admin)


@router.post("/companies", response_model=CompanyCreatedOut, status_code=status.HTTP_201_CREATED)
def create_company(
    payload: CompanyCreateRequest,
    db: Session = Depends(get_db),
    _admin: Identity = Depends(require_role(Role.ADMIN)),
) -> CompanyCreatedOut:
    company, founder = service.create_company(db, data=payload)
    return CompanyCreatedOut(company=CompanyOut.model_validate(company), founder=FounderOut.model_validate(founder))


@router.put("/companies/{company_id}", response_model=CompanyOut)
def update_company(
    company_id: uuid.UUID,
    payload: CompanyUpdate,
    db: Session = Depends(get_db),
    _identity: Identity = Depends(require_admin_or_own_company()),
) -> CompanyOut:
    company = service.get_company(db, company_id)
    return service.update_company(db, company, payload)


@router.patch("/companies/{company_id}", response_model=CompanyView)
def patch_company(
    company_id: uuid.UUID,
    payload: CompanyPatch,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_admin_or_own_company()),
) -> CompanyView:
    return reconcile_company(db, company_id, payload, identity=identity)


@router.delete("/companies/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_company(
    company_id: uuid.UUID,
    db: Session = Depends(get_db),
    _admin: Identity = Depends(require_role(Role.ADMIN)),
) -> Response:
    service.delete_company(db, service.get_company(db, company_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/my-company", response_model=MyCompanyOut)
def my_company(
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_role(Role.PORTFOLIO_COMPANY)),
) -> MyCompanyOut:
    return service.get_my_company(db, identity)
