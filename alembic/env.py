"""
Alembic Environment Configuration
──────────────────────────────────
- Reads DATABASE_URL from chirpy/config.py (which reads from .env)
- Imports ALL models via chirpy/models/__init__.py so Alembic can detect schema changes
- Runs in "offline" mode (generates SQL) or "online" mode (applies to DB)
"""

import os
import sys
from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool
from alembic import context

# ─── Make sure chirpy/ is importable ──────────────────────────────────────────
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# ─── Import settings & Base ────────────────────────────────────────────────────
from chirpy.config import settings
from chirpy.database import Base

import chirpy.models  # noqa: F401: side-effect import registers models on Base.metadata

# ─── Alembic config object ────────────────────────────────────────────────────
config = context.config

# Override sqlalchemy.url with value from our settings (reads from .env)
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


# ─── Offline Mode ─────────────────────────────────────────────────────────────
def run_migrations_offline() -> None:
    """Generate the SQL script without connecting to the database."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


# ─── Online Mode ──────────────────────────────────────────────────────────────
def run_migrations_online() -> None:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
        )

        with context.begin_transaction():
            context.run_migrations()


# ─── Entry Point ──────────────────────────────────────────────────────────────
if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
