from typing import Optional

import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from stocktrack.core.config import SESSION_COOKIE_NAME
from stocktrack.core.security import decode_token
from stocktrack.schemas.auth import SessionUser

security = HTTPBearer(auto_error=False)


def _unauthorized() -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


def get_session(
    request: Request,
    creds: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> SessionUser:
    """
    Resolves the caller's session from a Bearer token or the session cookie.
    Handlers receive the result as an explicit argument.
    """
    token = creds.credentials if creds else request.cookies.get(SESSION_COOKIE_NAME)
    if not token:
        raise _unauthorized()
    try:
        payload = decode_token(token)
    except jwt.PyJWTError:
        raise _unauthorized()
    if payload.get("type") != "access":
        raise _unauthorized()
    try:
        return SessionUser(
            id=int(payload["sub"]),
            name=payload.get("name", ""),
            email=payload.get("email", ""),
            role=payload.get("role", "user"),
        )
    except (KeyError, ValueError):
        raise _unauthorized()


def parse_id(raw: str, entity: str) -> int:
    """Path ids arrive as strings so a malformed one is a 400, not a 404 or 422."""
    try:
        return int(raw)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid {entity} ID")
