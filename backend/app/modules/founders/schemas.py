from __future__ import annotations

import datetime as dt
import uuid

from pydantic import Field, model_validator

from app.shared.schemas import ApiModel, reject_explicit_nulls


class FounderCreate(ApiModel):
    first_name: str = Field(min_length=1, max_length=120)
    last_name: str = Field(min_length=1, max_length=120)
    phone: str | None = Field(default=None, max_length=64)
    linked_in_url: str | None = Field(default=None, max_length=500)
    is_woman_founder: bool = False


class FounderUpdate(ApiModel):
    # company_id is deliberately absent: moving a founder changes who may see a company.
    first_name: str | None = Field(default=None, min_length=1, max_length=120)
    last_name: str | None = Field(default=None, min_length=1, max_length=120)
    phone: str | None = Field(default=None, max_length=64)
    linked_in_url: str | None = Field(default=None, max_length=500)
    is_woman_founder: bool | None = None

    @model_validator(mode="after")
    def _required_not_null(self) -> "FounderUpdate":
        reject_explicit_nulls(self, ("first_name", "last_name", "is_woman_founder"))
        return self


class FounderOut(ApiModel):
    id: uuid.UUID
    first_name: str
    last_name: str
    phone: str | None
    linked_in_url: str | None
    is_woman_founder: bool
    company_id: uuid.UUID | None
    created_at: dt.datetime
    updated_at: dt.datetime
