"""Company-scoped access decisions.

The guard is kept free of any HTTP or ORM types so it can be reasoned about
(and tested) on its own: callers gather the inputs, this module decides.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from dataclasses import dataclass

from app.shared.enums import Role

NO_FOUNDER = "No associated founder"
COMPANY_DENIED = "Access denied to this company"
INSUFFICIENT_ROLE = "Insufficient permissions"


@dataclass(frozen=True)
class AccessDecision:
    admitted: bool
    reason: str | None = None


ADMIT = AccessDecision(admitted=True)


def deny(reason: str) -> AccessDecision:
    return AccessDecision(admitted=False, reason=reason)


def decide_role(role: Role, required: Role) -> AccessDecision:
    if role == required:
        return ADMIT
    return deny(INSUFFICIENT_ROLE)


def decide_company_access(
    role: Role,
    founder_id: uuid.UUID | None,
    target_company_id: uuid.UUID | None,
    company_of_founder: Callable[[uuid.UUID], uuid.UUID | None],
) -> AccessDecision:
    """
    ADMIN is admitted for any company. PORTFOLIO_COMPANY is admitted only when
    its founder's company equals the target company.

    ``company_of_founder`` is only called for portfolio identities that carry a
    founder reference; it returns ``None`` for a missing or unassigned founder.
    """
    if role == Role.ADMIN:
        return ADMIT
    if role != Role.PORTFOLIO_COMPANY:
        return deny(INSUFFICIENT_ROLE)

    if founder_id is None:
        return deny(NO_FOUNDER)

    own_company_id = company_of_founder(founder_id)
    if own_company_id is None or target_company_id is None:
        return deny(COMPANY_DENIED)
    if own_company_id != target_company_id:
        return deny(COMPANY_DENIED)
    return ADMIT
