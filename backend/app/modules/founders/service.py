from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.middleware.context import get_logger
from app.modules.founders.models import Founder
from app.modules.founders.schemas import FounderCreate, FounderUpdate
from app.shared.utils import apply_partial, get_or_raise

logger = get_logger()


def get_founder(db: Session, founder_id: uuid.UUID) -> Founder:
    return get_or_raise(db, Founder, founder_id, "Founder not found")


def list_founders_for_company(db: Session, company_id: uuid.UUID) -> list[Founder]:
    stmt = (
        select(Founder)
        .where(Founder.company_id == company_id)
        .order_by(Founder.created_at.asc(), Founder.id.asc())
    )
    return list(db.execute(stmt).scalars().all())


def first_founder_for_company(db: Session, company_id: uuid.UUID) -> Founder | None:
    # Stored one-to-many, treated as one-to-one: the oldest founder is "the" founder.
    founders = list_founders_for_company(db, company_id)
    return founders[0] if founders else None


def create_founder(
    db: Session, *, company_id: uuid.UUID | None, data: FounderCreate, commit: bool = True
) -> Founder:
    founder = Founder(company_id=company_id, **data.model_dump())
    db.add(founder)
    db.flush()
    logger.info("founder.created", founder_id=str(founder.id), company_id=str(company_id))

    if commit:
        db.commit()
        db.refresh(founder)
    return founder


def update_founder(db: Session, founder: Founder, data: FounderUpdate, *, commit: bool = True) -> Founder:
    apply_partial(founder, data)
    db.flush()
    logger.info("founder.updated", founder_id=str(founder.id), fields=sorted(data.model_fields_set))

    if commit:
        db.commit()
        db.refresh(founder)
    return founder
