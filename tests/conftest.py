"""Shared fixtures for the device ping test-suite."""

import uuid

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from device_ping.db import models as orm
from device_ping.infrastructure.database.base import Base
from device_ping.modules.devices import Device

# 2024-12-06T10:30:00Z
NOW_MS = 1_733_481_000_000
TIMEOUT_MS = 60_000
TENANT_ID = "5f1e0b9a-9d2a-4c41-9f5b-2f0d6ad0b001"
OTHER_TENANT_ID = "5f1e0b9a-9d2a-4c41-9f5b-2f0d6ad0b002"
CUSTOMER_ID = "0c6a1e2d-7b7e-4e0b-8c1b-5d2a6f3e4c01"


def fixed_clock(now_ms: int = NOW_MS):
    return lambda: now_ms


@pytest.fixture
def device() -> Device:
    return Device(
        id=uuid.UUID("784f394c-42b6-435a-983c-b7beff2784f9"),
        tenant_id=TENANT_ID,
        customer_id=CUSTOMER_ID,
        name="Temperature Sensor 01",
        type="default",
        label=None,
        created_at=None,
    )


@pytest_asyncio.fixture
async def session():
    """In-memory SQLite session with the schema created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as db:
        yield db
    await engine.dispose()


@pytest_asyncio.fixture
async def stored_device(session: AsyncSession) -> orm.Device:
    model = orm.Device(
        id="784f394c-42b6-435a-983c-b7beff2784f9",
        tenant_id=TENANT_ID,
        customer_id=CUSTOMER_ID,
        name="Temperature Sensor 01",
        type="default",
    )
    session.add(model)
    await session.flush()
    return model
