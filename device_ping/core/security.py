"""JWT helpers and caller authorization dependencies."""
from datetime import datetime, timedelta, timezone
from typing import Awaitable, Callable, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from device_ping.core.config import get_settings
from device_ping.schemas import TokenData

SYS_ADMIN = "SYS_ADMIN"
TENANT_ADMIN = "TENANT_ADMIN"
CUSTOMER_USER = "CUSTOMER_USER"

security = HTTPBearer(auto_error=False)


def create_access_token(
    user_id: str,
    tenant_id: str,
    authority: str,
    customer_id: Optional[str] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    settings = get_settings()
    expire_delta = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": user_id,
        "tenant_id": tenant_id,
        "customer_id": customer_id,
        "authority": authority,
        "exp": datetime.now(timezone.utc) + expire_delta,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> TokenData:
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials") from exc

    user_id = payload.get("sub")
    tenant_id = payload.get("tenant_id")
    authority = payload.get("authority")
    if not all([user_id, tenant_id, authority]):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials")
    return TokenData(
        user_id=user_id,
        tenant_id=tenant_id,
        authority=authority,
        customer_id=payload.get("customer_id"),
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> TokenData:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return decode_access_token(credentials.credentials)


def require_authority(*authorities: str) -> Callable[..., Awaitable[TokenData]]:
    allowed = frozenset(authorities)

    async def _checker(user: TokenData = Depends(get_current_user)) -> TokenData:
        if user.authority not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You don't have permission to perform this operation!",
            )
        return user

    return _checker
