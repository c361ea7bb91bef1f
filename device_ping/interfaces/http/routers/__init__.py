from fastapi import APIRouter

from device_ping.interfaces.http.routers import ping


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(ping.router, tags=["Device Ping"])
    return router


__all__ = [
    "create_api_router",
]
