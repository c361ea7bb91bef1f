"""HTTP tests for the device ping endpoint."""

import uuid
from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from device_ping.core.security import CUSTOMER_USER, SYS_ADMIN, TENANT_ADMIN, create_access_token
from device_ping.db import models as orm
from device_ping.interfaces.http.deps import get_device_service, get_ping_service
from device_ping.main import create_app
from device_ping.modules.devices import DeviceService
from device_ping.modules.ping import ActivitySnapshot, DevicePingService, ReachabilityEvaluator

from .conftest import CUSTOMER_ID, NOW_MS, OTHER_TENANT_ID, TENANT_ID, TIMEOUT_MS, fixed_clock

DEVICE_ID = "784f394c-42b6-435a-983c-b7beff2784f9"
USER_ID = "a3d4c1f2-0000-4000-8000-000000000001"


class FakeDeviceRepository:
    def __init__(self, *devices: orm.Device) -> None:
        self._devices = {device.id: device for device in devices}

    async def get_by_id(self, device_id):
        return self._devices.get(device_id)

    async def create_device(self, **kwargs):
        raise NotImplementedError


class FakeFetcher:
    def __init__(self, snapshot: ActivitySnapshot) -> None:
        self.snapshot = snapshot
        self.calls = []

    async def fetch_snapshot(self, tenant_id, device_id):
        self.calls.append((tenant_id, device_id))
        return self.snapshot


@pytest.fixture
def fetcher():
    return FakeFetcher(ActivitySnapshot())


@pytest.fixture
def client(fetcher):
    app = create_app()
    device = orm.Device(
        id=DEVICE_ID,
        tenant_id=TENANT_ID,
        customer_id=CUSTOMER_ID,
        name="Temperature Sensor 01",
        type="default",
    )
    evaluator = ReachabilityEvaluator(TIMEOUT_MS, clock=fixed_clock())
    app.dependency_overrides[get_device_service] = lambda: DeviceService(FakeDeviceRepository(device))
    app.dependency_overrides[get_ping_service] = lambda: DevicePingService(fetcher, evaluator)
    return TestClient(app)


def _auth(authority=TENANT_ADMIN, tenant_id=TENANT_ID, customer_id=None, **kwargs):
    token = create_access_token(USER_ID, tenant_id, authority, customer_id=customer_id, **kwargs)
    return {"Authorization": f"Bearer {token}"}


class TestPingResponses:
    def test_recently_active(self, client, fetcher):
        fetcher.snapshot = ActivitySnapshot(last_activity_time=NOW_MS - 30_000)

        response = client.get(f"/api/device/ping/{DEVICE_ID}", headers=_auth())

        assert response.status_code == 200
        assert response.json() == {
            "deviceId": DEVICE_ID,
            "reachable": True,
            "lastSeen": "2024-12-06T10:29:30Z",
            "deviceName": "Temperature Sensor 01",
            "inactivitySeconds": 30,
        }
        assert fetcher.calls == [(TENANT_ID, uuid.UUID(DEVICE_ID))]

    def test_never_seen_but_active(self, client, fetcher):
        fetcher.snapshot = ActivitySnapshot(active=True)

        body = client.get(f"/api/device/ping/{DEVICE_ID}", headers=_auth()).json()

        assert body["reachable"] is True
        assert body["lastSeen"] is None
        assert body["inactivitySeconds"] is None

    def test_stale_and_inactive(self, client, fetcher):
        fetcher.snapshot = ActivitySnapshot(last_activity_time=NOW_MS - 120_000, active=False)

        body = client.get(f"/api/device/ping/{DEVICE_ID}", headers=_auth()).json()

        assert body["reachable"] is False
        assert body["inactivitySeconds"] == 120
        assert body["lastSeen"] == "2024-12-06T10:28:00Z"

    def test_nothing_known(self, client):
        body = client.get(f"/api/device/ping/{DEVICE_ID}", headers=_auth()).json()

        assert body == {
            "deviceId": DEVICE_ID,
            "reachable": False,
            "lastSeen": None,
            "deviceName": "Temperature Sensor 01",
            "inactivitySeconds": None,
        }

    def test_last_seen_drops_milliseconds(self, client, fetcher):
        fetcher.snapshot = ActivitySnapshot(last_activity_time=NOW_MS - 30_250)

        body = client.get(f"/api/device/ping/{DEVICE_ID}", headers=_auth()).json()

        assert body["lastSeen"] == "2024-12-06T10:29:29Z"
        assert body["inactivitySeconds"] == 30

    def test_device_id_is_canonicalised(self, client):
        response = client.get(f"/api/device/ping/{DEVICE_ID.upper()}", headers=_auth())

        assert response.status_code == 200
        assert response.json()["deviceId"] == DEVICE_ID


class TestAccessControl:
    def test_customer_user_of_owning_customer(self, client):
        response = client.get(
            f"/api/device/ping/{DEVICE_ID}",
            headers=_auth(CUSTOMER_USER, customer_id=CUSTOMER_ID),
        )

        assert response.status_code == 200

    def test_customer_user_of_other_customer(self, client):
        response = client.get(
            f"/api/device/ping/{DEVICE_ID}",
            headers=_auth(CUSTOMER_USER, customer_id=str(uuid.uuid4())),
        )

        assert response.status_code == 403

    def test_customer_user_without_customer(self, client):
        response = client.get(f"/api/device/ping/{DEVICE_ID}", headers=_auth(CUSTOMER_USER))

        assert response.status_code == 403

    def test_authority_not_allowed(self, client):
        response = client.get(f"/api/device/ping/{DEVICE_ID}", headers=_auth(SYS_ADMIN))

        assert response.status_code == 403

    def test_other_tenant(self, client, fetcher):
        response = client.get(f"/api/device/ping/{DEVICE_ID}", headers=_auth(tenant_id=OTHER_TENANT_ID))

        assert response.status_code == 404
        assert fetcher.calls == []

    def test_unknown_device(self, client):
        response = client.get(f"/api/device/ping/{uuid.uuid4()}", headers=_auth())

        assert response.status_code == 404

    def test_malformed_device_id(self, client):
        response = client.get("/api/device/ping/not-a-uuid", headers=_auth())

        assert response.status_code == 400

    @pytest.mark.parametrize(
        "raw",
        [
            DEVICE_ID.replace("-", ""),
            "{" + DEVICE_ID + "}",
            "urn:uuid:" + DEVICE_ID,
        ],
    )
    def test_non_canonical_device_id(self, client, raw):
        response = client.get(f"/api/device/ping/{raw}", headers=_auth())

        assert response.status_code == 400

    def test_missing_token(self, client):
        response = client.get(f"/api/device/ping/{DEVICE_ID}")

        assert response.status_code == 401

    def test_invalid_token(self, client):
        response = client.get(f"/api/device/ping/{DEVICE_ID}", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == 401

    def test_expired_token(self, client):
        headers = _auth(expires_delta=timedelta(seconds=-5))

        response = client.get(f"/api/device/ping/{DEVICE_ID}", headers=headers)

        assert response.status_code == 401


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
