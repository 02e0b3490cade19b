from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.middleware.context import get_logger
from app.modules.companies.models import PortfolioCompany
from app.modules.fundraising.models import FundraisingRound
from app.modules.fundraising.schemas import FundraisingCreate, FundraisingUpdate
from app.shared.exceptions import NotFound
from app.shared.utils import apply_partial, get_or_raise

logger = get_logger()


def list_rounds(db: Session, company_id: uuid.UUID) -> list[FundraisingRound]:
    stmt = (
        select(FundraisingRound)
        .where(FundraisingRound.company_id == company_id)
        .order_by(FundraisingRound.round_year.asc(), FundraisingRound.created_at.asc())
    )
    return list(db.execute(stmt).scalars().all())


def get_round(db: Session, round_id: uuid.UUID) -> FundraisingRound:
    return get_or_raise(db, FundraisingRound, round_id, "Fundraising round not found")


def get_company_round(db: Session, company_id: uuid.UUID, round_id: uuid.UUID) -> FundraisingRound:
    fundraising_round = get_round(db, round_id)
    if fundraising_round.company_id != company_id:
        raise NotFound("Fundraising round not found")
    return fundraising_round


def create_round(
    db: Session, *, company_id: uuid.UUID, data: FundraisingCreate, commit: bool = True
) -> FundraisingRound:
    get_or_raise(db, PortfolioCompany, company_id, "Company not found")

    fundraising_round = FundraisingRound(company_id=company_id, **data.model_dump())
    db.add(fundraising_round)
    db.flush()
    logger.info("fundraising.created", round_id=str(fundraising_round.id), company_id=str(company_id))

    if commit:
        db.commit()
        db.refresh(fundraising_round)
    return fundraising_round


def update_round(
    db: Session, fundraising_round: FundraisingRound, data: FundraisingUpdate, *, commit: bool = True
) -> FundraisingRound:
    apply_partial(fundraising_round, data)
    db.flush()
    logger.info("fundraising.updated", round_id=str(fundraising_round.id))

    if commit:
        db.commit()
        db.refresh(fundraising_round)
    return fundraising_round


def delete_round(db: Session, fundraising_round: FundraisingRound) -> None:
    round_id = fundraising_round.id
    db.delete(fundraising_round)
    db.commit()
    logger.info("fundraising.deleted", round_id=str(round_id))
