from __future__ import annotations

from enum import Enum


class Env(str, Enum):
    dev = "dev"
    prod = "prod"
    test = "test"


class Role(str, Enum):
    ADMIN = "ADMIN"
    PORTFOLIO_COMPANY = "PORTFOLIO_COMPANY"


class IndustryType(str, Enum):
    SAAS = "SAAS"
    HARDWARE = "HARDWARE"
    BIOTECH = "BIOTECH"
    FINTECH = "FINTECH"
    OTHER = "OTHER"


class RoundType(str, Enum):
    SAFE = "SAFE"
    CONVERTIBLE = "CONVERTIBLE"
    EQUITY = "EQUITY"


class CompanyStatus(str, Enum):
    ACTIVE = "ACTIVE"
    EXITED = "EXITED"
    ON_HOLD = "ON_HOLD"


class UpdateFrequency(str, Enum):
    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"
    ADHOC = "ADHOC"
