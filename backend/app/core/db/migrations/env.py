from __future__ import annotations

import os
import sys
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool
from sqlalchemy.engine.url import make_url

# Ensure `app.*` is importable when running alembic from `backend/`.
sys.path.append(os.path.abspath(os.getcwd()))

from app.core.config import settings  # noqa: E402
from app.core.db.base import Base  # noqa: E402
from app.core.db.session import import_model_modules  # noqa: E402

# Import all models so Base.metadata is complete.
import_model_modules()

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def get_url() -> str:
    candidates: list[str] = []

    if settings.database_url:
        candidates.append(settings.database_url)

    env_database_url = os.getenv("DATABASE_URL")
    if env_database_url and env_database_url not in candidates:
        candidates.append(env_database_url)

    ini_url = config.get_main_option("sqlalchemy.url")
    if ini_url and ini_url not in candidates:
        candidates.append(ini_url)

    for raw in candidates:
        candidate = raw.strip()
        try:
            make_url(candidate)
            return candidate
        except Exception:
            print(
                f"[alembic] skipping unparseable database url candidate: prefix={candidate[:48]!r}",
                file=sys.stderr,
            )

    raise RuntimeError("No valid SQLAlchemy database URL candidate for Alembic")


def run_migrations_offline() -> None:
    url = get_url()
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = get_url()

    connectable = engine_from_config(configuration, prefix="sqlalchemy.", poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata, compare_type=True)

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
