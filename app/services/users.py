"""Credential store: user rows keyed by a unique username."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError
from app.models import User

logger = logging.getLogger(__name__)


def create_user(db: Session, username: str, password_hash: str) -> int:
    """
    Insert a user and return its id. Raises ConflictError if the username is taken
    (exact, case-sensitive match enforced by the unique index).
    """
    user = User(username=username, password_hash=password_hash)
    try:
        db.add(user)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("Username already exists.") from e
    return user.id


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()
