from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.db.base import Base, IdMixin, TimestampMixin


class BrainTrustMentor(Base, IdMixin, TimestampMixin):
    __tablename__ = "brain_trust_mentors"

    name: Mapped[str] = mapped_column(String(200), index=True)
    headshot: Mapped[str | None] = mapped_column(String(500), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    linked_in_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
