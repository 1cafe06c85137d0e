from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Tuple
import jwt
from stocktrack.core.config import JWT_SECRET, JWT_ALGORITHM, SESSION_EXPIRES_SECONDS

pwd_ctx = CryptContext(schemes=['bcrypt'], deprecated='auto')

def hash_password(p: str) -> str: return pwd_ctx.hash(p)

def verify_password(p: str, h: str) -> bool: return pwd_ctx.verify(p, h)

def dummy_verify() -> None:
    # Burn the same time as a real check so unknown emails are not distinguishable
    pwd_ctx.dummy_verify()

def now_utc() -> datetime: return datetime.now(timezone.utc)

def create_session_token(user_id: int, name: str, email: str, role: str) -> Tuple[str, datetime]:
    issued = now_utc()
    exp = issued + timedelta(seconds=SESSION_EXPIRES_SECONDS)
    payload = {
        'sub': str(user_id),
        'name': name,
        'email': email,
        'role': role,
        'type': 'access',
        'iat': issued,
        'exp': exp,
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM), exp

def decode_token(token: str) -> Dict[str, Any]:
    return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
