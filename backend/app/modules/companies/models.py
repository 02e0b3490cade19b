from __future__ import annotations

from sqlalchemy import Enum, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.db.base import Base, IdMixin, TimestampMixin
from app.shared.enums import IndustryType


class PortfolioCompany(Base, IdMixin, TimestampMixin):
    """
    Portfolio company row.

    Founder, fundraising, revenue and admin snapshot rows point here by
    ``company_id``; they are looked up explicitly rather than through ORM
    relationships (see ``service.build_company_view``).
    """

    __tablename__ = "portfolio_companies"

    legal_name: Mapped[str] = mapped_column(String(300), index=True)
    aka: Mapped[str | None] = mapped_column(String(300), nullable=True)
    country_reg: Mapped[str] = mapped_column(String(120))
    county_ops: Mapped[str] = mapped_column(String(120))
    website: Mapped[str | None] = mapped_column(String(500), nullable=True)
    industry_type: Mapped[IndustryType] = mapped_column(Enum(IndustryType, name="industry_type_enum"), index=True)
    industry_detail: Mapped[str | None] = mapped_column(Text, nullable=True)
    vintage_year: Mapped[int] = mapped_column(Integer, index=True)

    current_valuation: Mapped[float | None] = mapped_column(Float, nullable=True)
    cash_inflow: Mapped[float | None] = mapped_column(Float, nullable=True)
    cash_outflow: Mapped[float | None] = mapped_column(Float, nullable=True)
    runway_months: Mapped[float | None] = mapped_column(Float, nullable=True)
    monthly_burn: Mapped[float | None] = mapped_column(Float, nullable=True)
    team_size: Mapped[int | None] = mapped_column(Integer, nullable=True)
