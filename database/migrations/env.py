"""Alembic environment for the E-MOT schema (admins, incoming_mails)."""
import os, sys
from logging.config import fileConfig
from alembic import context
from sqlalchemy import engine_from_config, pool

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

from database.base import Base, DATABASE_URL
import models  # noqa: F401  registers Admin and IncomingMail on Base.metadata

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# migrate the same database the app uses, never a url from alembic.ini
config.set_main_option("sqlalchemy.url", DATABASE_URL)

target_metadata = Base.metadata

# sqlite has no ALTER COLUMN; letter_status/department changes need table rebuilds there
IS_SQLITE = DATABASE_URL.startswith("sqlite")


def _configure_kwargs() -> dict:
    return {
        "target_metadata": target_metadata,
        # enum label and column type edits show up in autogenerate
        "compare_type": True,
        "render_as_batch": IS_SQLITE,
    }


def run_migrations_offline():
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_kwargs(),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connectable = engine_from_config(
        config.get_section(config.config_ini_section),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, **_configure_kwargs())
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
