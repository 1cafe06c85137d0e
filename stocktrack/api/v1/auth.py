import logging
from fastapi import APIRouter, Depends, HTTPException, Response, status
from stocktrack.api.deps import get_session
from stocktrack.core.config import SESSION_COOKIE_NAME, SESSION_COOKIE_SECURE, SESSION_EXPIRES_SECONDS
from stocktrack.core.errors import UniqueConstraintViolation
from stocktrack.core.security import create_session_token
from stocktrack.schemas.auth import LoginPayload, LoginResponse, RegisterPayload, SessionUser, UserResponse
from stocktrack.schemas.response import MessageResponse
from stocktrack.services.auth_service import authorize
from stocktrack.services.user_service import create_user

log = logging.getLogger("uvicorn")

router = APIRouter()  # main.py mounts at /api/auth


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterPayload):
    """Creates a regular user account. Roles cannot be chosen at registration."""
    try:
        user = await create_user(email=str(payload.email), password=payload.password, name=payload.name)
    except UniqueConstraintViolation:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")
    except Exception as e:
        raise HTTPException(status_code=500, detail="Registration failed") from e
    log.info(f"User {user.id} registered.")
    return UserResponse.model_validate(user)


@router.post("/login", response_model=LoginResponse)
async def login(payload: LoginPayload, response: Response):
    try:
        identity = await authorize(payload.email, payload.password)
    except Exception as e:
        raise HTTPException(status_code=500, detail="Login failed") from e
    if identity is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    token, _ = create_session_token(identity.id, identity.name, identity.email, identity.role)
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        max_age=SESSION_EXPIRES_SECONDS,
        httponly=True,
        samesite="lax",
        secure=SESSION_COOKIE_SECURE,
    )
    return LoginResponse(access_token=token, user=identity)


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response):
    response.delete_cookie(SESSION_COOKIE_NAME)
    return MessageResponse(message="Signed out")


@router.get("/session", response_model=SessionUser)
async def current_session(session: SessionUser = Depends(get_session)):
    return session
