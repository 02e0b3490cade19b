from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.middleware.context import get_logger
from app.modules.admin_snapshots.models import AdminSnapshot
from app.modules.admin_snapshots.schemas import AdminSnapshotCreate, AdminSnapshotUpdate
from app.modules.companies.models import PortfolioCompany
from app.shared.utils import apply_partial, get_or_raise

logger = get_logger()


def get_snapshot_for_company(db: Session, company_id: uuid.UUID) -> AdminSnapshot | None:
    stmt = (
        select(AdminSnapshot)
        .where(AdminSnapshot.company_id == company_id)
        .order_by(AdminSnapshot.created_at.asc(), AdminSnapshot.id.asc())
        .limit(1)
    )
    return db.execute(stmt).scalars().first()


def create_snapshot(
    db: Session, *, company_id: uuid.UUID, data: AdminSnapshotCreate, commit: bool = True
) -> AdminSnapshot:
    get_or_raise(db, PortfolioCompany, company_id, "Company not found")

    snapshot = AdminSnapshot(company_id=company_id, **data.model_dump())
    db.add(snapshot)
    db.flush()
    logger.info("admin_snapshot.created", snapshot_id=str(snapshot.id), company_id=str(company_id))

    if commit:
        db.commit()
        db.refresh(snapshot)
    return snapshot


def update_snapshot(
    db: Session, snapshot: AdminSnapshot, data: AdminSnapshotUpdate, *, commit: bool = True
) -> AdminSnapshot:
    apply_partial(snapshot, data)
    db.flush()
    logger.info("admin_snapshot.updated", snapshot_id=str(snapshot.id), fields=sorted(data.model_fields_set))

    if commit:
        db.commit()
        db.refresh(snapshot)
    return snapshot
