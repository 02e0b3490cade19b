from __future__ import annotations

import datetime as dt
import uuid

from pydantic import Field, model_validator

from app.modules.admin_snapshots.schemas import AdminSnapshotOut, AdminSnapshotUpdate
from app.modules.founders.schemas import FounderCreate, FounderOut, FounderUpdate
from app.modules.fundraising.schemas import FundraisingOut, FundraisingPatchItem
from app.modules.revenue.schemas import RevenueOut, RevenuePatchItem
from app.shared.enums import IndustryType
from app.shared.schemas import ApiModel, reject_explicit_nulls

NESTED_PARTS = {"founder", "fundraising", "revenue", "admin_snapshot"}


class CompanyCreate(ApiModel):
    legal_name: str = Field(min_length=1, max_length=300)
    aka: str | None = Field(default=None, max_length=300)
    country_reg: str = Field(min_length=1, max_length=120)
    county_ops: str = Field(min_length=1, max_length=120)
    website: str | None = Field(default=None, max_length=500)
    industry_type: IndustryType
    industry_detail: str | None = None
    vintage_year: int = Field(ge=1900, le=2100)
    current_valuation: float | None = None
    cash_inflow: float | None = None
    cash_outflow: float | None = None
    runway_months: float | None = None
    monthly_burn: float | None = None
    team_size: int | None = Field(default=None, ge=0)


class CompanyCreateRequest(CompanyCreate):
    founder: FounderCreate


class CompanyUpdate(ApiModel):
    legal_name: str | None = Field(default=None, min_length=1, max_length=300)
    aka: str | None = Field(default=None, max_length=300)
    country_reg: str | None = Field(default=None, min_length=1, max_length=120)
    county_ops: str | None = Field(default=None, min_length=1, max_length=120)
    website: str | None = Field(default=None, max_length=500)
    industry_type: IndustryType | None = None
    industry_detail: str | None = None
    vintage_year: int | None = Field(default=None, ge=1900, le=2100)
    current_valuation: float | None = None
    cash_inflow: float | None = None
    cash_outflow: float | None = None
    runway_months: float | None = None
    monthly_burn: float | None = None
    team_size: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _required_not_null(self) -> "CompanyUpdate":
        reject_explicit_nulls(self, ("legal_name", "country_reg", "county_ops", "industry_type", "vintage_year"))
        return self


class CompanyPatch(CompanyUpdate):
    """Composite edit: company fields plus any of the nested parts."""

    founder: FounderUpdate | None = None
    fundraising: list[FundraisingPatchItem] | None = None
    revenue: list[RevenuePatchItem] | None = None
    admin_snapshot: AdminSnapshotUpdate | None = None

    def company_changes(self) -> CompanyUpdate:
        return CompanyUpdate.model_validate(self.model_dump(exclude_unset=True, exclude=NESTED_PARTS))


class CompanyOut(ApiModel):
    id: uuid.UUID
    legal_name: str
    aka: str | None
    country_reg: str
    county_ops: str
    website: str | None
    industry_type: IndustryType
    industry_detail: str | None
    vintage_year: int
    current_valuation: float | None
    cash_inflow: float | None
    cash_outflow: float | None
    runway_months: float | None
    monthly_burn: float | None
    team_size: int | None
    created_at: dt.datetime
    updated_at: dt.datetime


class CompanyView(CompanyOut):
    founder: FounderOut | None = None
    fundraising: list[FundraisingOut] = Field(default_factory=list)
    revenue: list[RevenueOut] = Field(default_factory=list)
    admin_snapshot: AdminSnapshotOut | None = None


class CompanyCreatedOut(ApiModel):
    company: CompanyOut
    founder: FounderOut


class MyCompanyOut(ApiModel):
    company: CompanyView
    founder: FounderOut
