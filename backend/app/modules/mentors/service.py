from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.middleware.context import get_logger
from app.modules.mentors.models import BrainTrustMentor
from app.modules.mentors.schemas import MentorCreate, MentorUpdate
from app.shared.utils import apply_partial, get_or_raise

logger = get_logger()


def list_mentors(db: Session, *, limit: int, offset: int) -> list[BrainTrustMentor]:
    stmt = select(BrainTrustMentor).order_by(BrainTrustMentor.name.asc()).offset(offset).limit(limit)
    return list(db.execute(stmt).scalars().all())


def get_mentor(db: Session, mentor_id: uuid.UUID) -> BrainTrustMentor:
    return get_or_raise(db, BrainTrustMentor, mentor_id, "Brain trust mentor not found")


def create_mentor(db: Session, *, data: MentorCreate) -> BrainTrustMentor:
    mentor = BrainTrustMentor(**data.model_dump())
    db.add(mentor)
    db.commit()
    db.refresh(mentor)
    logger.info("mentor.created", mentor_id=str(mentor.id))
    return mentor


def update_mentor(db: Session, mentor: BrainTrustMentor, data: MentorUpdate) -> BrainTrustMentor:
    apply_partial(mentor, data)
    db.commit()
    db.refresh(mentor)
    logger.info("mentor.updated", mentor_id=str(mentor.id))
    return mentor


def delete_mentor(db: Session, mentor: BrainTrustMentor) -> None:
    mentor_id = mentor.id
    db.delete(mentor)
    db.commit()
    logger.info("mentor.deleted", mentor_id=str(mentor_id))
