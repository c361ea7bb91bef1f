"""Alembic environment for the device registry and attribute store schema."""

from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import Connection

from device_ping.core.config import get_settings
from device_ping.db import models  # noqa: F401
from device_ping.infrastructure.database import Base, dispose_engine, get_engine

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)


def _sync_url() -> str:
    # offline mode renders SQL only, so the async driver is swapped out
    return get_settings().database_url.replace("+aiosqlite", "")


def _configure_and_run(**options) -> None:
    context.configure(target_metadata=Base.metadata, **options)
    with context.begin_transaction():
        context.run_migrations()


def _run_with_connection(connection: Connection) -> None:
    _configure_and_run(connection=connection)


async def _run_online() -> None:
    async with get_engine().connect() as connection:
        await connection.run_sync(_run_with_connection)
    await dispose_engine()


if context.is_offline_mode():
    _configure_and_run(url=_sync_url(), literal_binds=True, dialect_opts={"paramstyle": "named"})
else:
    asyncio.run(_run_online())
