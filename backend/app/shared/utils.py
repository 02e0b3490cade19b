from __future__ import annotations

import datetime as dt
import uuid
from typing import Any, TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.shared.exceptions import NotFound

T = TypeVar("T")


def utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def get_or_raise(db: Session, model: type[T], entity_id: uuid.UUID, message: str) -> T:
    obj = db.get(model, entity_id)
    if obj is None:
        raise NotFound(message)
    return obj


def apply_partial(obj: Any, data: BaseModel) -> Any:
    """Assign only the fields the client sent and stamp ``updated_at``."""
    for key, value in data.model_dump(exclude_unset=True).items():
        setattr(obj, key, value)
    obj.updated_at = utcnow()
    return obj
