"""Alembic migration environment for the blogful tables.

``alembic upgrade head`` runs online through an async engine built from
``blogful.config.settings``; ``alembic upgrade head --sql`` prints the DDL.
"""

import asyncio
import logging
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

import blogful.models  # noqa: F401  (registers the tables on Base.metadata)
from blogful.config import settings
from blogful.database import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

logger = logging.getLogger("alembic.env")

# alembic.ini carries no credentials; the URL is always the app's own.
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)


def _configure_options() -> dict:
    url = config.get_main_option("sqlalchemy.url")
    return {
        "target_metadata": Base.metadata,
        "compare_type": True,
        # SQLite cannot ALTER most columns in place
        "render_as_batch": url.startswith("sqlite"),
        "process_revision_directives": _skip_empty_autogenerate,
    }


def _skip_empty_autogenerate(context_, revision, directives) -> None:
    """Do not write a revision file when autogenerate finds no changes."""
    if not getattr(config.cmd_opts, "autogenerate", False):
        return
    script = directives[0]
    if script.upgrade_ops.is_empty():
        directives[:] = []
        logger.info("No schema changes detected; no revision written")


def emit_sql() -> None:
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_options(),
    )
    with context.begin_transaction():
        context.run_migrations()


def _migrate(connection: Connection) -> None:
    context.configure(connection=connection, **_configure_options())
    with context.begin_transaction():
        context.run_migrations()


async def migrate_database() -> None:
    # NullPool: the engine lives for one command, no point pooling
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    emit_sql()
else:
    asyncio.run(migrate_database())
