from __future__ import annotations

import datetime as dt
import uuid

from sqlalchemy import Boolean, DateTime, Enum, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.db.base import Base, IdMixin, TimestampMixin
from app.shared.enums import CompanyStatus, UpdateFrequency


class AdminSnapshot(Base, IdMixin, TimestampMixin):
    """
    Internal administrative record layered onto a company.

    At most one per company. That is maintained by the services choosing
    update over create, not by a unique constraint.
    """

    __tablename__ = "admin_snapshots"

    company_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("portfolio_companies.id", ondelete="CASCADE"), index=True)
    status: Mapped[CompanyStatus] = mapped_column(
        Enum(CompanyStatus, name="company_status_enum"),
        default=CompanyStatus.ACTIVE,
        nullable=False,
        index=True,
    )

    investment_usd: Mapped[float] = mapped_column(Float)
    investment_year: Mapped[int] = mapped_column(Integer)
    valuation_at_investment_usd: Mapped[float] = mapped_column(Float)
    equity_percent: Mapped[float] = mapped_column(Float)

    c_note_agreement_date: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    c_note_maturity_date: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    penny_warrant_expiry: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    million_warrant_expiry: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    last_check_in_date: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    note_action: Mapped[str | None] = mapped_column(Text, nullable=True)
    observation_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    pitched_series_a: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    series_a_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    significant_growth: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    fastest_growing_pitch: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    irr_company_basis: Mapped[float | None] = mapped_column(Float, nullable=True)
    work_in_progress: Mapped[str | None] = mapped_column(Text, nullable=True)
    venture_partner: Mapped[str | None] = mapped_column(String(200), nullable=True)
    dataroom_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    founder_experience: Mapped[str | None] = mapped_column(Text, nullable=True)
    warm_intro_source: Mapped[str | None] = mapped_column(Text, nullable=True)
    exit_potential: Mapped[str | None] = mapped_column(Text, nullable=True)
    risk_flags: Mapped[str | None] = mapped_column(Text, nullable=True)
    board_members: Mapped[str | None] = mapped_column(Text, nullable=True)
    safes_outstanding: Mapped[str | None] = mapped_column(Text, nullable=True)
    esop_pool_size: Mapped[str | None] = mapped_column(Text, nullable=True)
    update_frequency: Mapped[UpdateFrequency] = mapped_column(
        Enum(UpdateFrequency, name="update_frequency_enum"),
        default=UpdateFrequency.MONTHLY,
        nullable=False,
    )
    accelerator_attended: Mapped[str | None] = mapped_column(Text, nullable=True)
    admin_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
