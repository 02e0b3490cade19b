from __future__ import annotations

import uuid

from sqlalchemy import Float, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from app.core.db.base import Base, IdMixin, TimestampMixin


class RevenueRecord(Base, IdMixin, TimestampMixin):
    """Fiscal-year revenue figures. Several rows for one (company, year) are allowed."""

    __tablename__ = "company_revenue"

    company_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("portfolio_companies.id", ondelete="CASCADE"), index=True)
    year: Mapped[int] = mapped_column(Integer, index=True)
    arr: Mapped[float | None] = mapped_column(Float, nullable=True)
    revenue_q1: Mapped[float | None] = mapped_column(Float, nullable=True)
    revenue_q2: Mapped[float | None] = mapped_column(Float, nullable=True)
    revenue_q3: Mapped[float | None] = mapped_column(Float, nullable=True)
    revenue_q4: Mapped[float | None] = mapped_column(Float, nullable=True)
    projected_revenue: Mapped[float | None] = mapped_column(Float, nullable=True)
    actual_revenue: Mapped[float | None] = mapped_column(Float, nullable=True)
