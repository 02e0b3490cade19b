from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """camelCase on the wire, snake_case in Python; either is accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def reject_explicit_nulls(model: BaseModel, fields: tuple[str, ...]) -> None:
    """Partial updates may omit required columns but may not null them out."""
    nulls = [name for name in fields if name in model.model_fields_set and getattr(model, name) is None]
    if nulls:
        raise ValueError(f"{', '.join(nulls)} cannot be null")
