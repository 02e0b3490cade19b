from __future__ import annotations

import datetime as dt
import uuid

from pydantic import Field, model_validator

from app.shared.schemas import ApiModel, reject_explicit_nulls


class MentorCreate(ApiModel):
    name: str = Field(min_length=1, max_length=200)
    headshot: str | None = Field(default=None, max_length=500)
    phone: str | None = Field(default=None, max_length=64)
    linked_in_url: str | None = Field(default=None, max_length=500)
    description: str | None = None


class MentorUpdate(ApiModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    headshot: str | None = Field(default=None, max_length=500)
    phone: str | None = Field(default=None, max_length=64)
    linked_in_url: str | None = Field(default=None, max_length=500)
    description: str | None = None

    @model_validator(mode="after")
    def _name_not_null(self) -> "MentorUpdate":
        reject_explicit_nulls(self, ("name",))
        return self


class MentorOut(ApiModel):
    id: uuid.UUID
    name: str
    headshot: str | None
    phone: str | None
    linked_in_url: str | None
    description: str | None
    created_at: dt.datetime
    updated_at: dt.datetime
