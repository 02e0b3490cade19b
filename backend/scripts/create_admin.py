from __future__ import annotations

import argparse
import getpass
import os
import sys

import pydantic
from sqlalchemy.orm import Session, sessionmaker

# Ensure `backend/` is importable when running as a script.
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.core.db.models import User  # noqa: E402
from app.core.db.session import get_engine  # noqa: E402
from app.core.logging import configure_logging  # noqa: E402
from app.modules.auth.service import ensure_admin  # noqa: E402
from app.shared.exceptions import ValidationError  # noqa: E402


def create_admin(db: Session, *, email: str, password: str) -> tuple[User, bool]:
    """Idempotently create the ADMIN account used to register everyone else."""
    return ensure_admin(db, email=email, password=password)


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Create an ADMIN user (idempotent).")
    p.add_argument("--email", required=True, help="Admin email address")
    p.add_argument("--password", help="Admin password (prompted when omitted)")
    return p


def main() -> int:
    args = _build_arg_parser().parse_args()
    password = args.password or getpass.getpass("Admin password: ")

    configure_logging()
    SessionLocal = sessionmaker(bind=get_engine(), autoflush=False, autocommit=False, class_=Session)
    with SessionLocal() as db:
        try:
            user, created = create_admin(db, email=args.email, password=password)
        except (pydantic.ValidationError, ValidationError) as exc:
            print(f"ADMIN_USER_REJECTED {exc}", file=sys.stderr)
            return 2

    print(f"ADMIN_USER email={user.email} id={user.id} created={created}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
