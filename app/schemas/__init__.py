"""Pydantic request/response schemas."""

from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from app.schemas.health import HealthResponse
from app.schemas.meal import CreatedResponse, MealCreate, MealResponse, MessageResponse
from app.schemas.menu_request import MenuRequestCreate, MenuRequestResponse
from app.schemas.review import ReviewCreate, ReviewResponse, TallyResponse
from app.schemas.upload import UploadResponse

__all__ = [
    "CreatedResponse",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MealCreate",
    "MealResponse",
    "MenuRequestCreate",
    "MenuRequestResponse",
    "MessageResponse",
    "RegisterRequest",
    "RegisterResponse",
    "ReviewCreate",
    "ReviewResponse",
    "TallyResponse",
    "UploadResponse",
]
