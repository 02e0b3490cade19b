from __future__ import annotations

import datetime as dt
import uuid

from pydantic import Field, model_validator

from app.shared.enums import RoundType
from app.shared.schemas import ApiModel, reject_explicit_nulls


class FundraisingCreate(ApiModel):
    round_year: int = Field(ge=1900, le=2100)
    amount_usd: float = Field(ge=0, alias="amountUSD")
    round_type: RoundType
    co_investors: str | None = None
    notes: str | None = None


class FundraisingUpdate(ApiModel):
    round_year: int | None = Field(default=None, ge=1900, le=2100)
    amount_usd: float | None = Field(default=None, ge=0, alias="amountUSD")
    round_type: RoundType | None = None
    co_investors: str | None = None
    notes: str | None = None

    @model_validator(mode="after")
    def _required_not_null(self) -> "FundraisingUpdate":
        reject_explicit_nulls(self, ("round_year", "amount_usd", "round_type"))
        return self


class FundraisingPatchItem(FundraisingUpdate):
    """Element of a company PATCH: with ``id`` it updates that round, without it appends one."""

    id: uuid.UUID | None = None

    @model_validator(mode="after")
    def _new_round_is_complete(self) -> "FundraisingPatchItem":
        if self.id is None:
            missing = [name for name in ("round_year", "amount_usd", "round_type") if getattr(self, name) is None]
            if missing:
                raise ValueError(f"new fundraising round requires {', '.join(missing)}")
        return self

    def changes(self) -> FundraisingUpdate:
        return FundraisingUpdate.model_validate(self.model_dump(exclude_unset=True, exclude={"id"}))

    def as_create(self) -> FundraisingCreate:
        return FundraisingCreate.model_validate(self.model_dump(exclude_unset=True, exclude={"id"}))


class FundraisingOut(ApiModel):
    id: uuid.UUID
    company_id: uuid.UUID
    round_year: int
    amount_usd: float = Field(alias="amountUSD")
    round_type: RoundType
    co_investors: str | None
    notes: str | None
    created_at: dt.datetime
    updated_at: dt.datetime
