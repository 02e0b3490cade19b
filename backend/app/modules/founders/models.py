from __future__ import annotations

import uuid

from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.db.base import Base, IdMixin, TimestampMixin


class Founder(Base, IdMixin, TimestampMixin):
    __tablename__ = "founders"

    first_name: Mapped[str] = mapped_column(String(120))
    last_name: Mapped[str] = mapped_column(String(120))
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    linked_in_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    is_woman_founder: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Nullable until the founder is assigned to a company.
    company_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("portfolio_companies.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
