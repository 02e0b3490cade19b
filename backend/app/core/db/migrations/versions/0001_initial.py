"""initial schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-17
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


ROLE = sa.Enum("ADMIN", "PORTFOLIO_COMPANY", name="role_enum")
INDUSTRY_TYPE = sa.Enum("SAAS", "HARDWARE", "BIOTECH", "FINTECH", "OTHER", name="industry_type_enum")
ROUND_TYPE = sa.Enum("SAFE", "CONVERTIBLE", "EQUITY", name="round_type_enum")
COMPANY_STATUS = sa.Enum("ACTIVE", "EXITED", "ON_HOLD", name="company_status_enum")
UPDATE_FREQUENCY = sa.Enum("MONTHLY", "QUARTERLY", "ADHOC", name="update_frequency_enum")


def _timestamp_columns() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def _company_fk(ondelete: str) -> sa.Column:
    return sa.Column(
        "company_id",
        sa.Uuid(),
        sa.ForeignKey("portfolio_companies.id", ondelete=ondelete),
        nullable=ondelete == "SET NULL",
    )


def upgrade() -> None:
    op.create_table(
        "portfolio_companies",
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        sa.Column("legal_name", sa.String(length=300), nullable=False),
        sa.Column("aka", sa.String(length=300), nullable=True),
        sa.Column("country_reg", sa.String(length=120), nullable=False),
        sa.Column("county_ops", sa.String(length=120), nullable=False),
        sa.Column("website", sa.String(length=500), nullable=True),
        sa.Column("industry_type", INDUSTRY_TYPE, nullable=False),
        sa.Column("industry_detail", sa.Text(), nullable=True),
        sa.Column("vintage_year", sa.Integer(), nullable=False),
        sa.Column("current_valuation", sa.Float(), nullable=True),
        sa.Column("cash_inflow", sa.Float(), nullable=True),
        sa.Column("cash_outflow", sa.Float(), nullable=True),
        sa.Column("runway_months", sa.Float(), nullable=True),
        sa.Column("monthly_burn", sa.Float(), nullable=True),
        sa.Column("team_size", sa.Integer(), nullable=True),
        *_timestamp_columns(),
    )
    op.create_index("ix_portfolio_companies_id", "portfolio_companies", ["id"])
    op.create_index("ix_portfolio_companies_legal_name", "portfolio_companies", ["legal_name"])
    op.create_index("ix_portfolio_companies_industry_type", "portfolio_companies", ["industry_type"])
    op.create_index("ix_portfolio_companies_vintage_year", "portfolio_companies", ["vintage_year"])

    op.create_table(
        "founders",
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        sa.Column("first_name", sa.String(length=120), nullable=False),
        sa.Column("last_name", sa.String(length=120), nullable=False),
        sa.Column("phone", sa.String(length=64), nullable=True),
        sa.Column("linked_in_url", sa.String(length=500), nullable=True),
        sa.Column("is_woman_founder", sa.Boolean(), nullable=False, server_default=sa.false()),
        _company_fk("SET NULL"),
        *_timestamp_columns(),
    )
    op.create_index("ix_founders_id", "founders", ["id"])
    op.create_index("ix_founders_company_id", "founders", ["company_id"])

    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", ROLE, nullable=False, server_default="PORTFOLIO_COMPANY"),
        sa.Column("founder_id", sa.Uuid(), sa.ForeignKey("founders.id", ondelete="SET NULL"), nullable=True),
        *_timestamp_columns(),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_role", "users", ["role"])
    op.create_index("ix_users_founder_id", "users", ["founder_id"])

    op.create_table(
        "fundraising_rounds",
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        _company_fk("CASCADE"),
        sa.Column("round_year", sa.Integer(), nullable=False),
        sa.Column("amount_usd", sa.Float(), nullable=False),
        sa.Column("round_type", ROUND_TYPE, nullable=False),
        sa.Column("co_investors", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamp_columns(),
    )
    op.create_index("ix_fundraising_rounds_id", "fundraising_rounds", ["id"])
    op.create_index("ix_fundraising_rounds_company_id", "fundraising_rounds", ["company_id"])
    op.create_index("ix_fundraising_rounds_round_year", "fundraising_rounds", ["round_year"])

    op.create_table(
        "company_revenue",
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        _company_fk("CASCADE"),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("arr", sa.Float(), nullable=True),
        sa.Column("revenue_q1", sa.Float(), nullable=True),
        sa.Column("revenue_q2", sa.Float(), nullable=True),
        sa.Column("revenue_q3", sa.Float(), nullable=True),
        sa.Column("revenue_q4", sa.Float(), nullable=True),
        sa.Column("projected_revenue", sa.Float(), nullable=True),
        sa.Column("actual_revenue", sa.Float(), nullable=True),
        *_timestamp_columns(),
    )
    op.create_index("ix_company_revenue_id", "company_revenue", ["id"])
    op.create_index("ix_company_revenue_company_id", "company_revenue", ["company_id"])
    op.create_index("ix_company_revenue_year", "company_revenue", ["year"])

    op.create_table(
        "admin_snapshots",
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        _company_fk("CASCADE"),
        sa.Column("status", COMPANY_STATUS, nullable=False, server_default="ACTIVE"),
        sa.Column("investment_usd", sa.Float(), nullable=False),
        sa.Column("investment_year", sa.Integer(), nullable=False),
        sa.Column("valuation_at_investment_usd", sa.Float(), nullable=False),
        sa.Column("equity_percent", sa.Float(), nullable=False),
        sa.Column("c_note_agreement_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("c_note_maturity_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("penny_warrant_expiry", sa.DateTime(timezone=True), nullable=True),
        sa.Column("million_warrant_expiry", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_check_in_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("note_action", sa.Text(), nullable=True),
        sa.Column("observation_score", sa.Integer(), nullable=True),
        sa.Column("pitched_series_a", sa.Boolean(), nullable=True),
        sa.Column("series_a_notes", sa.Text(), nullable=True),
        sa.Column("significant_growth", sa.Boolean(), nullable=True),
        sa.Column("fastest_growing_pitch", sa.Boolean(), nullable=True),
        sa.Column("irr_company_basis", sa.Float(), nullable=True),
        sa.Column("work_in_progress", sa.Text(), nullable=True),
        sa.Column("venture_partner", sa.String(length=200), nullable=True),
        sa.Column("dataroom_url", sa.String(length=500), nullable=True),
        sa.Column("founder_experience", sa.Text(), nullable=True),
        sa.Column("warm_intro_source", sa.Text(), nullable=True),
        sa.Column("exit_potential", sa.Text(), nullable=True),
        sa.Column("risk_flags", sa.Text(), nullable=True),
        sa.Column("board_members", sa.Text(), nullable=True),
        sa.Column("safes_outstanding", sa.Text(), nullable=True),
        sa.Column("esop_pool_size", sa.Text(), nullable=True),
        sa.Column("update_frequency", UPDATE_FREQUENCY, nullable=False, server_default="MONTHLY"),
        sa.Column("accelerator_attended", sa.Text(), nullable=True),
        sa.Column("admin_notes", sa.Text(), nullable=True),
        *_timestamp_columns(),
    )
    op.create_index("ix_admin_snapshots_id", "admin_snapshots", ["id"])
    op.create_index("ix_admin_snapshots_company_id", "admin_snapshots", ["company_id"])
    op.create_index("ix_admin_snapshots_status", "admin_snapshots", ["status"])

    op.create_table(
        "brain_trust_mentors",
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("headshot", sa.String(length=500), nullable=True),
        sa.Column("phone", sa.String(length=64), nullable=True),
        sa.Column("linked_in_url", sa.String(length=500), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamp_columns(),
    )
    op.create_index("ix_brain_trust_mentors_id", "brain_trust_mentors", ["id"])
    op.create_index("ix_brain_trust_mentors_name", "brain_trust_mentors", ["name"])


def downgrade() -> None:
    op.drop_table("brain_trust_mentors")
    op.drop_table("admin_snapshots")
    op.drop_table("company_revenue")
    op.drop_table("fundraising_rounds")
    op.drop_table("users")
    op.drop_table("founders")
    op.drop_table("portfolio_companies")
    for enum in (UPDATE_FREQUENCY, COMPANY_STATUS, ROUND_TYPE, INDUSTRY_TYPE, ROLE):
        enum.drop(op.get_bind(), checkfirst=True)
