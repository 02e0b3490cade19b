from __future__ import annotations

import structlog
from structlog import contextvars


def set_request_id(request_id: str) -> None:
    contextvars.bind_contextvars(request_id=request_id)


def set_actor(actor_id: str, role: str) -> None:
    contextvars.bind_contextvars(actor_id=actor_id, actor_role=role)


def clear_context() -> None:
    contextvars.clear_contextvars()


def get_logger():
    return structlog.get_logger()
