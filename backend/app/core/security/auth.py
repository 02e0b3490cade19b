from __future__ import annotations

import datetime as dt
import uuid
from dataclasses import dataclass
from typing import Any

import jwt
from sqlalchemy.orm import Session
from starlette.requests import Request

from app.core.config import settings
from app.core.db.models import User
from app.shared.enums import Role
from app.shared.exceptions import InvalidToken, Unauthenticated
from app.shared.utils import utcnow


@dataclass(frozen=True)
class Identity:
    user_id: uuid.UUID
    email: str
    role: Role
    founder_id: uuid.UUID | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


def issue_access_token(user: User, *, now: dt.datetime | None = None) -> str:
    issued_at = now or utcnow()
    claims = {
        "id": str(user.id),
        "email": user.email,
        "role": Role(user.role).value,
        "iat": issued_at,
        "exp": issued_at + dt.timedelta(hours=settings.access_token_ttl_hours),
    }
    return jwt.encode(claims, settings.jwt_secret.get_secret_value(), algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    try:
        return jwt.decode(
            token,
            settings.jwt_secret.get_secret_value(),
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "id"]},
        )
    except jwt.PyJWTError as exc:
        raise InvalidToken("Invalid token") from exc


def _get_bearer_token(request: Request) -> str | None:
    auth = request.headers.get("Authorization")
    if not auth:
        return None
    if not auth.lower().startswith("bearer "):
        return None
    token = auth.split(" ", 1)[1].strip()
    return token or None


def identity_for_user(user: User) -> Identity:
    return Identity(user_id=user.id, email=user.email, role=Role(user.role), founder_id=user.founder_id)


def identity_from_request(request: Request, db: Session) -> Identity:
    token = _get_bearer_token(request)
    if not token:
        raise Unauthenticated("Access token required")

    claims = decode_access_token(token)
    try:
        user_id = uuid.UUID(str(claims["id"]))
    except ValueError as exc:
        raise InvalidToken("Invalid token") from exc

    # Role and founder link come from the live row, not the token.
    user = db.get(User, user_id)
    if user is None:
        raise InvalidToken("Invalid token")
    return identity_for_user(user)
