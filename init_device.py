"""
Seed a demo device with activity attributes and print a bearer token for it.
"""
import argparse
import asyncio

from device_ping.core.security import CUSTOMER_USER, TENANT_ADMIN, create_access_token
from device_ping.db.models import generate_uuid
from device_ping.infrastructure.database import get_session, init_db
from device_ping.modules.attributes import AttributeKvEntry, AttributeScope, AttributesService
from device_ping.modules.devices import DeviceService
from device_ping.modules.ping import ACTIVE, LAST_ACTIVITY_TIME, current_millis


async def create_demo_device(name: str, tenant_id: str, customer_id: str | None, idle_seconds: int, active: bool | None):
    await init_db()

    async for db in get_session():
        device = await DeviceService.with_session(db).create_device(
            tenant_id=tenant_id,
            customer_id=customer_id,
            name=name,
        )

        now = current_millis()
        entries = [AttributeKvEntry.of(LAST_ACTIVITY_TIME, now - idle_seconds * 1000, now)]
        if active is not None:
            entries.append(AttributeKvEntry.of(ACTIVE, active, now))
        await AttributesService.with_session(db).save(str(device.id), AttributeScope.SERVER_SCOPE, entries)

        authority = CUSTOMER_USER if customer_id else TENANT_ADMIN
        token = create_access_token(generate_uuid(), tenant_id, authority, customer_id=customer_id)

        print("=" * 50)
        print(f"Device:    {device.name}")
        print(f"Device id: {device.id}")
        print(f"Tenant id: {tenant_id}")
        print(f"Authority: {authority}")
        print("=" * 50)
        print(f"Token: {token}")
        print("=" * 50)
        print(f"curl -H 'Authorization: Bearer {token}' http://localhost:8000/api/device/ping/{device.id}")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--name", default="Temperature Sensor 01")
    parser.add_argument("--tenant-id", default=generate_uuid())
    parser.add_argument("--customer-id", default=None)
    parser.add_argument("--idle-seconds", type=int, default=30, help="age of the last activity timestamp")
    parser.add_argument("--active", choices=["true", "false"], default=None)
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    active = None if args.active is None else args.active == "true"
    asyncio.run(create_demo_device(args.name, args.tenant_id, args.customer_id, args.idle_seconds, active))
