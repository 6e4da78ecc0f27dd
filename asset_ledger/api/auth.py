"""
Authentication dependencies

The core trusts whatever caller identity it is handed. Over HTTP that identity
is the `sub` claim of a verified bearer JWT.
"""

from datetime import datetime, timezone, timedelta
from typing import Optional

import jwt
from fastapi import Depends, Header, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..config import LedgerConfig
from ..errors import (
    InsufficientAllowance, InsufficientBalance, InsufficientStake, LedgerError,
    Unauthorized
)
from ..facade import AssetLedger


security = HTTPBearer(auto_error=False)


def get_asset_ledger(request: Request) -> AssetLedger:
    """Dependency returning the ledger instance bound to the app"""
    return request.app.state.ledger


def get_app_config(request: Request) -> LedgerConfig:
    return request.app.state.config


def get_caller(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    config: LedgerConfig = Depends(get_app_config),
    x_caller_identity: Optional[str] = Header(None)
) -> str:
    """Dependency that validates the bearer JWT and returns the caller identity"""
    if not config.auth_enabled:
        # Development mode: identity is taken from a plain header
        if not x_caller_identity:
            raise HTTPException(status_code=401, detail="Missing X-Caller-Identity header")
        return x_caller_identity

    if not credentials:
        raise HTTPException(status_code=401, detail="Not authenticated")
    try:
        payload = jwt.decode(
            credentials.credentials, config.jwt_secret, algorithms=[config.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=401, detail="Invalid token")

    caller = payload.get("sub")
    if not caller or not isinstance(caller, str):
        raise HTTPException(status_code=401, detail="Invalid token")
    return caller


def create_access_token(subject: str, config: LedgerConfig, expires_in: timedelta = timedelta(hours=1)) -> str:
    """Issue a signed token whose subject becomes the caller identity"""
    now = datetime.now(timezone.utc)
    payload = {"sub": subject, "iat": now, "exp": now + expires_in}
    return jwt.encode(payload, config.jwt_secret, algorithm=config.jwt_algorithm)


def to_http_error(error: LedgerError) -> HTTPException:
    """Map a ledger error to the HTTP status the API reports for it"""
    if isinstance(error, Unauthorized):
        status_code = 403
    elif isinstance(error, (InsufficientBalance, InsufficientAllowance, InsufficientStake)):
        status_code = 409
    else:
        status_code = 400
    return HTTPException(
        status_code=status_code,
        detail={"error": type(error).__name__, "message": str(error)}
    )
