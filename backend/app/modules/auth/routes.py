from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.db.models import User
from app.core.db.session import get_db
from app.core.security.auth import Identity
from app.core.security.dependencies import get_identity, require_role
from app.modules.auth import service
from app.modules.auth.schemas import LoginRequest, RegisterRequest, TokenOut, UserOut
from app.shared.enums import Role
from app.shared.utils import get_or_raise

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenOut)
def login(payload: LoginRequest, db: Session = Depends(get_db)) -> TokenOut:
    return service.login(db, email=payload.email, password=payload.password)


@router.post("/register", response_model=TokenOut, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    db: Session = Depends(get_db),
    _admin: Identity = Depends(require_role(Role.ADMIN)),
) -> TokenOut:
    user = service.register_user(db, data=payload)
    return service.token_response(user)


@router.get("/me", response_model=UserOut)
def me(identity: Identity = Depends(get_identity), db: Session = Depends(get_db)) -> UserOut:
    return get_or_raise(db, User, identity.user_id, "User not found")
