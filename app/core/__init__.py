"""Core: settings, database sessions, error taxonomy, token signing."""

from app.core.config import get_settings, settings
from app.core.database import get_db
from app.core.exceptions import (
    ConflictError,
    ForbiddenError,
    InternalError,
    InvalidInputError,
    NotFoundError,
    RateLimitedError,
    ServiceError,
    UnauthenticatedError,
)

__all__ = [
    "ConflictError",
    "ForbiddenError",
    "InternalError",
    "InvalidInputError",
    "NotFoundError",
    "RateLimitedError",
    "ServiceError",
    "UnauthenticatedError",
    "get_db",
    "get_settings",
    "settings",
]
