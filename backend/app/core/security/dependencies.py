from __future__ import annotations

import uuid
from collections.abc import Callable

from fastapi import Depends, HTTPException, Path, Request, status
from sqlalchemy.orm import Session

from app.core.db.session import get_db
from app.core.middleware.context import get_logger, set_actor
from app.core.security.access import decide_company_access, decide_role
from app.core.security.auth import Identity, identity_from_request
from app.modules.founders.models import Founder
from app.shared.enums import Role
from app.shared.exceptions import InvalidToken, Unauthenticated

logger = get_logger()


def get_identity(request: Request, db: Session = Depends(get_db)) -> Identity:
    try:
        identity = identity_from_request(request, db)
    except (Unauthenticated, InvalidToken) as exc:
        logger.info("auth.rejected", reason=exc.message, path=request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=exc.message,
            headers={"WWW-Authenticate": "Bearer"},
        )

    set_actor(str(identity.user_id), identity.role.value)
    return identity


def get_company_id(company_id: uuid.UUID = Path(...)) -> uuid.UUID:
    return company_id


def founder_company_id(db: Session, founder_id: uuid.UUID) -> uuid.UUID | None:
    founder = db.get(Founder, founder_id)
    if founder is None:
        return None
    return founder.company_id


def require_role(required: Role) -> Callable[[Identity], Identity]:
    def _dep(identity: Identity = Depends(get_identity)) -> Identity:
        decision = decide_role(identity.role, required)
        if not decision.admitted:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=decision.reason)
        return identity

    return _dep


def require_admin_or_own_company(
    resolve_company_id: Callable[..., uuid.UUID | None] = get_company_id,
) -> Callable[..., Identity]:
    """
    Admit ADMIN, or a PORTFOLIO_COMPANY identity whose founder belongs to the
    company resolved by ``resolve_company_id`` (itself a FastAPI dependency).

    Authentication is declared first so a missing token wins over a missing
    resource.
    """

    def _dep(
        identity: Identity = Depends(get_identity),
        company_id: uuid.UUID | None = Depends(resolve_company_id),
        db: Session = Depends(get_db),
    ) -> Identity:
        decision = decide_company_access(
            identity.role,
            identity.founder_id,
            company_id,
            lambda founder_id: founder_company_id(db, founder_id),
        )
        if not decision.admitted:
            logger.warning("access.denied", reason=decision.reason, company_id=str(company_id))
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=decision.reason)
        return identity

    return _dep
