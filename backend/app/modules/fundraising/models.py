from __future__ import annotations

import uuid

from sqlalchemy import Enum, Float, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.db.base import Base, IdMixin, TimestampMixin
from app.shared.enums import RoundType


class FundraisingRound(Base, IdMixin, TimestampMixin):
    __tablename__ = "fundraising_rounds"

    company_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("portfolio_companies.id", ondelete="CASCADE"), index=True)
    round_year: Mapped[int] = mapped_column(Integer, index=True)
    amount_usd: Mapped[float] = mapped_column(Float)
    round_type: Mapped[RoundType] = mapped_column(Enum(RoundType, name="round_type_enum"))
    co_investors: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
