from typing import Optional

from starlette.concurrency import run_in_threadpool
from tortoise.exceptions import IntegrityError

from stocktrack.core.errors import UniqueConstraintViolation, is_unique_violation
from stocktrack.core.security import hash_password
from stocktrack.models.user import User, UserRole


async def get_user_by_email(email: str) -> Optional[User]:
    return await User.get_or_none(email=email)


async def create_user(email: str, password: str, name: str, role: str = UserRole.USER.value) -> User:
    """Hashes the password and inserts the user. Email must be unused."""
    password_hash = await run_in_threadpool(hash_password, password)
    try:
        return await User.create(
            email=email,
            password_hash=password_hash,
            name=name,
            role=role,
        )
    except IntegrityError as e:
        if is_unique_violation(e):
            raise UniqueConstraintViolation("email", email) from e
        raise
