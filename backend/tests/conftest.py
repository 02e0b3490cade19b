from __future__ import annotations

import os
import sys
import uuid
from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool
from sqlalchemy.orm import Session, sessionmaker

# Make `backend/` importable regardless of pytest import mode.
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.core.config import settings
from app.core.db.base import Base
from app.core.db.models import User
from app.core.db.session import get_db, import_model_modules
from app.core.security.auth import issue_access_token
from app.core.security.passwords import hash_password
from app.main import create_app
from app.modules.companies.models import PortfolioCompany
from app.modules.founders.models import Founder
from app.shared.enums import Env, IndustryType, Role

# Ensure model modules are imported so Base.metadata is complete.
import_model_modules()

# Minimum bcrypt cost keeps password hashing fast under test.
settings.bcrypt_rounds = 4

TEST_PASSWORD = "correct-horse-battery"


@pytest.fixture()
def db_engine():
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture()
def db_session(db_engine) -> Generator[Session, None, None]:
    TestingSessionLocal = sessionmaker(bind=db_engine, autoflush=False, autocommit=False, class_=Session)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client(db_session: Session) -> TestClient:
    settings.env = Env.dev
    app = create_app()

    def _override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    return TestClient(app)


def bearer(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {issue_access_token(user)}"}


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    def _make(email: str, role: Role = Role.PORTFOLIO_COMPANY, founder_id: uuid.UUID | None = None) -> User:
        user = User(
            email=email,
            password_hash=hash_password(TEST_PASSWORD),
            role=role,
            founder_id=founder_id,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make


@pytest.fixture()
def make_company(db_session: Session) -> Callable[..., tuple[PortfolioCompany, Founder]]:
    def _make(legal_name: str) -> tuple[PortfolioCompany, Founder]:
        company = PortfolioCompany(
            legal_name=legal_name,
            country_reg="US",
            county_ops="US",
            industry_type=IndustryType.SAAS,
            vintage_year=2022,
        )
        db_session.add(company)
        db_session.flush()
        founder = Founder(first_name="Ada", last_name=legal_name, company_id=company.id)
        db_session.add(founder)
        db_session.commit()
        db_session.refresh(company)
        db_session.refresh(founder)
        return company, founder

    return _make


@pytest.fixture()
def admin(make_user) -> User:
    return make_user("admin@portfolio-admin.com", Role.ADMIN)


@pytest.fixture()
def admin_headers(client: TestClient, admin: User) -> dict[str, str]:
    return bearer(admin)


@pytest.fixture()
def acme(make_company) -> dict:
    company, founder = make_company("Acme Inc")
    return {"company_id": company.id, "founder_id": founder.id}


@pytest.fixture()
def acme_user(make_user, acme: dict) -> User:
    return make_user("founder@acme-example.com", Role.PORTFOLIO_COMPANY, founder_id=acme["founder_id"])


@pytest.fixture()
def acme_headers(client: TestClient, acme_user: User) -> dict[str, str]:
    return bearer(acme_user)
