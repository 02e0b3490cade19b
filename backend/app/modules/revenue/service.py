from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.middleware.context import get_logger
from app.modules.companies.models import PortfolioCompany
from app.modules.revenue.models import RevenueRecord
from app.modules.revenue.schemas import RevenueCreate, RevenueUpdate
from app.shared.exceptions import NotFound
from app.shared.utils import apply_partial, get_or_raise

logger = get_logger()


def list_revenue(db: Session, company_id: uuid.UUID) -> list[RevenueRecord]:
    stmt = (
        select(RevenueRecord)
        .where(RevenueRecord.company_id == company_id)
        .order_by(RevenueRecord.year.asc(), RevenueRecord.created_at.asc())
    )
    return list(db.execute(stmt).scalars().all())


def get_revenue(db: Session, revenue_id: uuid.UUID) -> RevenueRecord:
    return get_or_raise(db, RevenueRecord, revenue_id, "Revenue record not found")


def get_company_revenue(db: Session, company_id: uuid.UUID, revenue_id: uuid.UUID) -> RevenueRecord:
    record = get_revenue(db, revenue_id)
    if record.company_id != company_id:
        raise NotFound("Revenue record not found")
    return record


def create_revenue(db: Session, *, company_id: uuid.UUID, data: RevenueCreate, commit: bool = True) -> RevenueRecord:
    get_or_raise(db, PortfolioCompany, company_id, "Company not found")

    record = RevenueRecord(company_id=company_id, **data.model_dump())
    db.add(record)
    db.flush()
    logger.info("revenue.created", revenue_id=str(record.id), company_id=str(company_id), year=record.year)

    if commit:
        db.commit()
        db.refresh(record)
    return record


def update_revenue(db: Session, record: RevenueRecord, data: RevenueUpdate, *, commit: bool = True) -> RevenueRecord:
    apply_partial(record, data)
    db.flush()
    logger.info("revenue.updated", revenue_id=str(record.id))

    if commit:
        db.commit()
        db.refresh(record)
    return record


def delete_revenue(db: Session, record: RevenueRecord) -> None:
    revenue_id = record.id
    db.delete(record)
    db.commit()
    logger.info("revenue.deleted", revenue_id=str(revenue_id))
