"""
Auth module: password hashing, JWT creation/validation and the identity
dependencies used by the routers.

Credentials are HS256-signed JWTs carrying the account id (``sub``), its role
and an expiry. ``resolve_account`` never raises: anything it cannot verify
resolves to "no identity" (``None``), and the ``get_current_account``
dependency turns that into a 401.
"""

import logging
import time
from typing import Optional
from fastapi import Depends, Request
from jose import jwt, JWTError
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession
from app.config import get_settings
from app.database import get_db
from app.exceptions import AuthError
from app.models.account import Account

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__ident="2b",
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_token(account: Account) -> str:
    """Create a signed, expiring JWT for the given Account."""
    settings = get_settings()
    payload = {
        "sub": str(account.id),
        "role": account.role,
        "exp": int(time.time()) + settings.access_token_expire_minutes * 60,
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[int]:
    """Return the account id carried by a valid token, or None."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None
    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        return None


async def resolve_account(db: AsyncSession, credential: Optional[str]) -> Optional[Account]:
    if not credential:
        return None
    account_id = decode_token(credential)
    if account_id is None:
        return None
    return await db.get(Account, account_id)


def _bearer_credential(request: Request) -> Optional[str]:
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith(BEARER_PREFIX):
        return None
    return auth_header[len(BEARER_PREFIX):].strip() or None


async def get_current_account(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> Account:
    """FastAPI dependency: the Account behind the bearer credential, else 401."""
    account = await resolve_account(db, _bearer_credential(request))
    if account is None:
        raise AuthError("Unauthorized")
    return account


async def require_hospital(account: Account = Depends(get_current_account)) -> Account:
    if not account.is_hospital:
        logger.info("Account %s with role %s denied hospital access", account.id, account.role)
        raise AuthError("Unauthorized")
    return account
