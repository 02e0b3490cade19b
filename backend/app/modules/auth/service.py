from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.db.models import User
from app.core.middleware.context import get_logger
from app.core.security.auth import issue_access_token
from app.core.security.passwords import burn_verification, hash_password, verify_password
from app.modules.auth.schemas import RegisterRequest, TokenOut, UserOut
from app.modules.founders.models import Founder
from app.shared.enums import Role
from app.shared.exceptions import Unauthenticated, ValidationError
from app.shared.utils import get_or_raise

logger = get_logger()


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user_by_email(db: Session, email: str) -> User | None:
    stmt = select(User).where(User.email == _normalize_email(email))
    return db.execute(stmt).scalar_one_or_none()


def token_response(user: User) -> TokenOut:
    return TokenOut(token=issue_access_token(user), user=UserOut.model_validate(user))


def login(db: Session, *, email: str, password: str) -> TokenOut:
    user = get_user_by_email(db, email)
    if user is None:
        burn_verification(password)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("auth.login_failed", email=_normalize_email(email))
        raise Unauthenticated("Invalid credentials")

    logger.info("auth.login", user_id=str(user.id), role=Role(user.role).value)
    return token_response(user)


def register_user(db: Session, *, data: RegisterRequest) -> User:
    if get_user_by_email(db, data.email) is not None:
        raise ValidationError("User already exists")
    if data.founder_id is not None:
        get_or_raise(db, Founder, data.founder_id, "Founder not found")

    user = User(
        email=_normalize_email(data.email),
        password_hash=hash_password(data.password),
        role=data.role,
        founder_id=data.founder_id,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("auth.user_registered", user_id=str(user.id), role=data.role.value)
    return user


def ensure_admin(db: Session, *, email: str, password: str) -> tuple[User, bool]:
    """Create an ADMIN user unless one already exists with this email. Returns (user, created)."""
    existing = get_user_by_email(db, email)
    if existing is not None:
        if Role(existing.role) != Role.ADMIN:
            raise ValidationError("User already exists with a non-admin role")
        return existing, False

    user = register_user(db, data=RegisterRequest(email=email, password=password, role=Role.ADMIN))
    return user, True
