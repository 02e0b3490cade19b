from __future__ import annotations

import datetime as dt
import uuid

from pydantic import Field, model_validator

from app.shared.schemas import ApiModel, reject_explicit_nulls


class RevenueCreate(ApiModel):
    year: int = Field(ge=1900, le=2100)
    arr: float | None = None
    revenue_q1: float | None = None
    revenue_q2: float | None = None
    revenue_q3: float | None = None
    revenue_q4: float | None = None
    projected_revenue: float | None = None
    actual_revenue: float | None = None


class RevenueUpdate(ApiModel):
    year: int | None = Field(default=None, ge=1900, le=2100)
    arr: float | None = None
    revenue_q1: float | None = None
    revenue_q2: float | None = None
    revenue_q3: float | None = None
    revenue_q4: float | None = None
    projected_revenue: float | None = None
    actual_revenue: float | None = None

    @model_validator(mode="after")
    def _required_not_null(self) -> "RevenueUpdate":
        reject_explicit_nulls(self, ("year",))
        return self


class RevenuePatchItem(RevenueUpdate):
    """Element of a company PATCH: with ``id`` it updates that record, without it appends one."""

    id: uuid.UUID | None = None

    @model_validator(mode="after")
    def _new_record_has_year(self) -> "RevenuePatchItem":
        if self.id is None and self.year is None:
            raise ValueError("new revenue record requires year")
        return self

    def changes(self) -> RevenueUpdate:
        return RevenueUpdate.model_validate(self.model_dump(exclude_unset=True, exclude={"id"}))

    def as_create(self) -> RevenueCreate:
        return RevenueCreate.model_validate(self.model_dump(exclude_unset=True, exclude={"id"}))


class RevenueOut(ApiModel):
    id: uuid.UUID
    company_id: uuid.UUID
    year: int
    arr: float | None
    revenue_q1: float | None
    revenue_q2: float | None
    revenue_q3: float | None
    revenue_q4: float | None
    projected_revenue: float | None
    actual_revenue: float | None
    created_at: dt.datetime
    updated_at: dt.datetime
