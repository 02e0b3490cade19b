from __future__ import annotations

import datetime as dt
import uuid

from pydantic import Field, model_validator

from app.shared.enums import CompanyStatus, UpdateFrequency
from app.shared.schemas import ApiModel, reject_explicit_nulls

REQUIRED_TERMS = ("investment_usd", "investment_year", "valuation_at_investment_usd", "equity_percent")


class _AdminSnapshotDetails(ApiModel):
    c_note_agreement_date: dt.datetime | None = None
    c_note_maturity_date: dt.datetime | None = None
    penny_warrant_expiry: dt.datetime | None = None
    million_warrant_expiry: dt.datetime | None = None
    last_check_in_date: dt.datetime | None = None

    note_action: str | None = None
    observation_score: int | None = Field(default=None, ge=1, le=10)
    pitched_series_a: bool | None = None
    series_a_notes: str | None = None
    significant_growth: bool | None = None
    fastest_growing_pitch: bool | None = None
    irr_company_basis: float | None = None
    work_in_progress: str | None = None
    venture_partner: str | None = Field(default=None, max_length=200)
    dataroom_url: str | None = Field(default=None, max_length=500)
    founder_experience: str | None = None
    warm_intro_source: str | None = None
    exit_potential: str | None = None
    risk_flags: str | None = None
    board_members: str | None = None
    safes_outstanding: str | None = None
    esop_pool_size: str | None = None
    accelerator_attended: str | None = None
    admin_notes: str | None = None


class AdminSnapshotCreate(_AdminSnapshotDetails):
    status: CompanyStatus = CompanyStatus.ACTIVE
    update_frequency: UpdateFrequency = UpdateFrequency.MONTHLY
    investment_usd: float = Field(ge=0, alias="investmentUSD")
    investment_year: int = Field(ge=1900, le=2100)
    valuation_at_investment_usd: float = Field(ge=0, alias="valuationAtInvestmentUSD")
    equity_percent: float = Field(ge=0, le=100)


class AdminSnapshotUpdate(_AdminSnapshotDetails):
    status: CompanyStatus | None = None
    update_frequency: UpdateFrequency | None = None
    investment_usd: float | None = Field(default=None, ge=0, alias="investmentUSD")
    investment_year: int | None = Field(default=None, ge=1900, le=2100)
    valuation_at_investment_usd: float | None = Field(default=None, ge=0, alias="valuationAtInvestmentUSD")
    equity_percent: float | None = Field(default=None, ge=0, le=100)

    @model_validator(mode="after")
    def _required_not_null(self) -> "AdminSnapshotUpdate":
        reject_explicit_nulls(self, REQUIRED_TERMS + ("status", "update_frequency"))
        return self

    def missing_terms(self) -> list[str]:
        """Wire names of the investment terms a new snapshot would still need."""
        return [
            type(self).model_fields[name].alias or name for name in REQUIRED_TERMS if getattr(self, name) is None
        ]


class AdminSnapshotOut(_AdminSnapshotDetails):
    id: uuid.UUID
    company_id: uuid.UUID
    status: CompanyStatus
    update_frequency: UpdateFrequency
    investment_usd: float = Field(alias="investmentUSD")
    investment_year: int
    valuation_at_investment_usd: float = Field(alias="valuationAtInvestmentUSD")
    equity_percent: float
    created_at: dt.datetime
    updated_at: dt.datetime
