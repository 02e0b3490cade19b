from __future__ import annotations

import uuid

from pydantic import EmailStr, Field, field_validator

from app.core.security.passwords import check_password_bytes
from app.shared.enums import Role
from app.shared.schemas import ApiModel


class LoginRequest(ApiModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=256)


class RegisterRequest(ApiModel):
    email: EmailStr
    password: str = Field(min_length=8, max_length=72)
    role: Role = Role.PORTFOLIO_COMPANY
    founder_id: uuid.UUID | None = None

    @field_validator("password")
    @classmethod
    def _password_fits_bcrypt(cls, value: str) -> str:
        return check_password_bytes(value)


class UserOut(ApiModel):
    id: uuid.UUID
    email: str
    role: Role
    founder_id: uuid.UUID | None


class TokenOut(ApiModel):
    token: str
    user: UserOut
