from __future__ import annotations

from functools import lru_cache

import bcrypt

from app.core.config import settings

# bcrypt only looks at the first 72 bytes of its input and recent releases reject longer input.
MAX_PASSWORD_BYTES = 72


def check_password_bytes(password: str) -> str:
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes when UTF-8 encoded")
    return password


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash, or the candidate is over the byte limit.
        return False


@lru_cache(maxsize=4)
def _dummy_hash(rounds: int) -> str:
    return bcrypt.hashpw(b"unused-password", bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def burn_verification(password: str) -> None:
    """Spend one verification at the configured cost so unknown emails answer as slowly as wrong passwords."""
    verify_password(password, _dummy_hash(settings.bcrypt_rounds))
