from __future__ import annotations

import pydantic
import pytest
from sqlalchemy.orm import Session

from app.core.security.passwords import verify_password
from app.shared.enums import Role
from app.shared.exceptions import ValidationError
from scripts.create_admin import create_admin


def test_create_admin_is_idempotent(db_session: Session):
    user, created = create_admin(db_session, email="Ops@Portfolio-Admin.com", password="first-password")
    assert created is True
    assert user.email == "ops@portfolio-admin.com"
    assert Role(user.role) == Role.ADMIN
    assert verify_password("first-password", user.password_hash)

    again, created_again = create_admin(db_session, email="ops@portfolio-admin.com", password="other-password")
    assert created_again is False
    assert again.id == user.id
    # Existing credentials are left alone.
    assert verify_password("first-password", again.password_hash)


def test_create_admin_refuses_to_promote_existing_user(db_session: Session, make_user):
    make_user("founder@acme-example.com", Role.PORTFOLIO_COMPANY)
    with pytest.raises(ValidationError):
        create_admin(db_session, email="founder@acme-example.com", password="whatever-pass")


def test_create_admin_rejects_password_over_bcrypt_byte_limit(db_session: Session):
    with pytest.raises(pydantic.ValidationError):
        create_admin(db_session, email="ops@portfolio-admin.com", password="\U0001F600" * 20)
