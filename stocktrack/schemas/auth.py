from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class RegisterPayload(BaseModel):
    name: str = Field(..., max_length=255)
    email: EmailStr
    password: str

    @field_validator("name")
    @classmethod
    def name_length(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Name must be at least 2 characters long")
        return v

    @field_validator("password")
    @classmethod
    def password_length(cls, v: str) -> str:
        if len(v) < 6:
            raise ValueError("Password must be at least 6 characters long")
        return v


class LoginPayload(BaseModel):
    # Any string; a malformed email fails authorization like an unknown one
    email: str
    password: str


class SessionUser(BaseModel):
    """The authenticated user carried by the session token."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: str


class UserResponse(SessionUser):
    pass


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: SessionUser
