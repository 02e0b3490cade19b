from __future__ import annotations

import uuid

from sqlalchemy import Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.db.base import Base, IdMixin, TimestampMixin
from app.shared.enums import Role


class User(Base, IdMixin, TimestampMixin):
    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(320), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255))
    role: Mapped[Role] = mapped_column(
        Enum(Role, name="role_enum"),
        default=Role.PORTFOLIO_COMPANY,
        nullable=False,
        index=True,
    )
    founder_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("founders.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
