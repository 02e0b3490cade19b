"""Apply a composite company edit (``PATCH /api/companies/{id}``).

A payload can touch the company row, its founder, its fundraising rounds, its
revenue records and its admin snapshot. Each part has its own policy:

* company fields: partial update
* ``founder``: update the company's first founder, or create one
* ``fundraising`` / ``revenue`` items: an item with ``id`` updates that row
  (which must belong to the company); an item without ``id`` appends a new row.
  Rows missing from the array are never deleted.
* ``adminSnapshot``: update the existing snapshot, or create one (admin only)

All parts share the request's transaction: any failure rolls back the parts
already applied.
"""

from __future__ import annotations

import uuid

from sqlalchemy.orm import Session

from app.core.middleware.context import get_logger
from app.core.security.auth import Identity
from app.modules.admin_snapshots import service as snapshots_service
from app.modules.admin_snapshots.schemas import AdminSnapshotCreate, AdminSnapshotUpdate
from app.modules.companies.models import PortfolioCompany
from app.modules.companies.schemas import CompanyPatch, CompanyView
from app.modules.companies.service import build_company_view, get_company, update_company
from app.modules.founders import service as founders_service
from app.modules.founders.schemas import FounderCreate, FounderUpdate
from app.modules.fundraising import service as fundraising_service
from app.modules.fundraising.schemas import FundraisingPatchItem
from app.modules.revenue import service as revenue_service
from app.modules.revenue.schemas import RevenuePatchItem
from app.shared.exceptions import Forbidden, ValidationError

logger = get_logger()


def _reconcile_founder(db: Session, company: PortfolioCompany, data: FounderUpdate) -> None:
    founder = founders_service.first_founder_for_company(db, company.id)
    if founder is not None:
        founders_service.update_founder(db, founder, data, commit=False)
        return

    if data.first_name is None or data.last_name is None:
        raise ValidationError(
            "Invalid input",
            errors=[{"field": "founder", "message": "firstName and lastName are required to create a founder"}],
        )
    founders_service.create_founder(
        db,
        company_id=company.id,
        data=FounderCreate.model_validate(data.model_dump(exclude_unset=True, exclude_none=True)),
        commit=False,
    )


def _reconcile_round(db: Session, company: PortfolioCompany, item: FundraisingPatchItem) -> None:
    if item.id is None:
        fundraising_service.create_round(db, company_id=company.id, data=item.as_create(), commit=False)
        return
    existing = fundraising_service.get_company_round(db, company.id, item.id)
    fundraising_service.update_round(db, existing, item.changes(), commit=False)


def _reconcile_revenue(db: Session, company: PortfolioCompany, item: RevenuePatchItem) -> None:
    if item.id is None:
        revenue_service.create_revenue(db, company_id=company.id, data=item.as_create(), commit=False)
        return
    existing = revenue_service.get_company_revenue(db, company.id, item.id)
    revenue_service.update_revenue(db, existing, item.changes(), commit=False)


def _reconcile_snapshot(db: Session, company: PortfolioCompany, data: AdminSnapshotUpdate) -> None:
    snapshot = snapshots_service.get_snapshot_for_company(db, company.id)
    if snapshot is not None:
        snapshots_service.update_snapshot(db, snapshot, data, commit=False)
        return

    missing = data.missing_terms()
    if missing:
        raise ValidationError(
            "Invalid input",
            errors=[
                {"field": f"adminSnapshot.{alias}", "message": "required to create an admin snapshot"}
                for alias in missing
            ],
        )
    snapshots_service.create_snapshot(
        db,
        company_id=company.id,
        data=AdminSnapshotCreate.model_validate(data.model_dump(exclude_unset=True, exclude_none=True)),
        commit=False,
    )


def reconcile_company(db: Session, company_id: uuid.UUID, payload: CompanyPatch, *, identity: Identity) -> CompanyView:
    company = get_company(db, company_id)

    if payload.admin_snapshot is not None and not identity.is_admin:
        raise Forbidden("Insufficient permissions")

    sent = payload.model_fields_set
    try:
        company_changes = payload.company_changes()
        if company_changes.model_fields_set:
            update_company(db, company, company_changes, commit=False)

        if "founder" in sent and payload.founder is not None:
            _reconcile_founder(db, company, payload.founder)

        for item in payload.fundraising or []:
            _reconcile_round(db, company, item)

        for item in payload.revenue or []:
            _reconcile_revenue(db, company, item)

        if "admin_snapshot" in sent and payload.admin_snapshot is not None:
            _reconcile_snapshot(db, company, payload.admin_snapshot)

        db.commit()
    except Exception:
        db.rollback()
        logger.warning("company.reconcile_failed", company_id=str(company_id), parts=sorted(sent))
        raise

    logger.info(
        "company.reconciled",
        company_id=str(company_id),
        parts=sorted(sent),
        fundraising_items=len(payload.fundraising or []),
        revenue_items=len(payload.revenue or []),
    )
    return build_company_view(db, company_id, include_admin_snapshot=identity.is_admin)
