from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.middleware.context import get_logger
from app.core.security.auth import Identity
from app.modules.admin_snapshots.schemas import AdminSnapshotOut
from app.modules.admin_snapshots.service import get_snapshot_for_company
from app.modules.companies.models import PortfolioCompany
from app.modules.companies.schemas import (
    CompanyCreateRequest,
    CompanyOut,
    CompanyUpdate,
    CompanyView,
    MyCompanyOut,
)
from app.modules.founders import service as founders_service
from app.modules.founders.models import Founder
from app.modules.founders.schemas import FounderOut
from app.modules.fundraising.schemas import FundraisingOut
from app.modules.fundraising.service import list_rounds
from app.modules.revenue.schemas import RevenueOut
from app.modules.revenue.service import list_revenue
from app.shared.exceptions import NotFound, ValidationError
from app.shared.utils import apply_partial, get_or_raise

logger = get_logger()


def list_companies(db: Session, *, limit: int, offset: int) -> list[PortfolioCompany]:
    stmt = (
        select(PortfolioCompany)
        .order_by(PortfolioCompany.legal_name.asc(), PortfolioCompany.id.asc())
        .offset(offset)
        .limit(limit)
    )
    return list(db.execute(stmt).scalars().all())


def get_company(db: Session, company_id: uuid.UUID) -> PortfolioCompany:
    return get_or_raise(db, PortfolioCompany, company_id, "Company not found")


def create_company(db: Session, *, data: CompanyCreateRequest) -> tuple[PortfolioCompany, Founder]:
    company = PortfolioCompany(**data.model_dump(exclude={"founder"}))
    db.add(company)
    db.flush()

    founder = founders_service.create_founder(db, company_id=company.id, data=data.founder, commit=False)

    db.commit()
    db.refresh(company)
    db.refresh(founder)
    logger.info("company.created", company_id=str(company.id), founder_id=str(founder.id))
    return company, founder


def update_company(
    db: Session, company: PortfolioCompany, data: CompanyUpdate, *, commit: bool = True
) -> PortfolioCompany:
    apply_partial(company, data)
    db.flush()
    logger.info("company.updated", company_id=str(company.id), fields=sorted(data.model_fields_set))

    if commit:
        db.commit()
        db.refresh(company)
    return company


def delete_company(db: Session, company: PortfolioCompany) -> None:
    # Single-row delete; child rows are left to the database's referential actions.
    company_id = company.id
    db.delete(company)
    db.commit()
    logger.info("company.deleted", company_id=str(company_id))


def build_company_view(db: Session, company_id: uuid.UUID, *, include_admin_snapshot: bool) -> CompanyView:
    """
    Assemble the composite company view: the company, its first founder, all
    fundraising rounds, all revenue records and (for admins) the admin snapshot.

    Each part is read separately; this function is the one place that decides
    what the assembled view contains.
    """
    company = get_company(db, company_id)
    founder = founders_service.first_founder_for_company(db, company_id)
    rounds = list_rounds(db, company_id)
    revenue = list_revenue(db, company_id)
    snapshot = get_snapshot_for_company(db, company_id) if include_admin_snapshot else None

    return CompanyView(
        **CompanyOut.model_validate(company).model_dump(),
        founder=FounderOut.model_validate(founder) if founder is not None else None,
        fundraising=[FundraisingOut.model_validate(r) for r in rounds],
        revenue=[RevenueOut.model_validate(r) for r in revenue],
        admin_snapshot=AdminSnapshotOut.model_validate(snapshot) if snapshot is not None else None,
    )


def get_my_company(db: Session, identity: Identity) -> MyCompanyOut:
    if identity.founder_id is None:
        raise ValidationError("No associated founder")

    founder = db.get(Founder, identity.founder_id)
    if founder is None or founder.company_id is None:
        raise NotFound("No associated company")

    view = build_company_view(db, founder.company_id, include_admin_snapshot=identity.is_admin)
    return MyCompanyOut(company=view, founder=FounderOut.model_validate(founder))
