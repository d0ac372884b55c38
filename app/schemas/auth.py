"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from app.core.security import is_strong_password, is_valid_username

USERNAME_RULE_MESSAGE = "Username must be 3-20 alphanumeric characters."
PASSWORD_RULE_MESSAGE = (
    "Password must be at least 8 characters long, contain at least one uppercase "
    "letter, one lowercase letter, one number, and one special character."
)
INVALID_CREDENTIALS_MESSAGE = "Invalid username or password."


class RegisterRequest(BaseModel):
    """New account credentials. Each broken rule is reported by field."""

    username: str = Field(..., description="3-20 letters or digits")
    password: str = Field(..., description="Password meeting the strength rules")

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        if not is_valid_username(v):
            raise PydanticCustomError("invalid_username", USERNAME_RULE_MESSAGE)
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if not is_strong_password(v):
            raise PydanticCustomError("weak_password", PASSWORD_RULE_MESSAGE)
        return v


class LoginRequest(BaseModel):
    """
    Credentials for login. Shape failures use one generic message so the response
    never says which field was wrong.
    """

    username: str = Field(..., description="Username")
    password: str = Field(..., description="Password")

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        if not is_valid_username(v):
            raise PydanticCustomError("invalid_credentials", INVALID_CREDENTIALS_MESSAGE)
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if not is_strong_password(v):
            raise PydanticCustomError("invalid_credentials", INVALID_CREDENTIALS_MESSAGE)
        return v


class RegisterResponse(BaseModel):
    message: str = "User registered successfully"


class LoginResponse(BaseModel):
    """Session token returned after a successful login."""

    message: str = "Logged in successfully"
    token: str = Field(..., description="JWT session token; send as Authorization: Bearer <token>")
    user_id: int = Field(..., serialization_alias="userId")


class CurrentUser(BaseModel):
    """Authenticated identity decoded from the session token."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
