"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.meal import Meal
from app.models.menu_request import MenuRequest
from app.models.review import Review
from app.models.user import User

__all__ = ["Base", "Meal", "MenuRequest", "Review", "User"]
