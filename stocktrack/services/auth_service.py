from typing import Optional

from starlette.concurrency import run_in_threadpool

from stocktrack.core.security import dummy_verify, verify_password
from stocktrack.schemas.auth import SessionUser
from stocktrack.services.user_service import get_user_by_email


async def authorize(email: str, password: str) -> Optional[SessionUser]:
    """
    Checks credentials and returns the identity to put in the session token.

    Unknown email and wrong password both return None, so callers cannot
    tell which one happened.
    """
    if not email or not password:
        return None

    user = await get_user_by_email(email)
    if not user:
        await run_in_threadpool(dummy_verify)
        return None

    # bcrypt runs in a worker thread
    if not await run_in_threadpool(verify_password, password, user.password_hash):
        return None

    return SessionUser(id=user.id, name=user.name, email=user.email, role=user.role)
