"""Registration and login on top of the credential store.

Shape rules are checked by the request schemas before these functions run.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, InvalidInputError
from app.core.security import TokenSigner, hash_password, verify_password
from app.schemas.auth import INVALID_CREDENTIALS_MESSAGE
from app.services.users import create_user, get_user_by_username

logger = logging.getLogger(__name__)


@lru_cache
def _dummy_password_hash() -> str:
    # Checked when the username does not exist, so a miss costs one bcrypt check too.
    return hash_password("dummy-password-for-timing")


@dataclass(frozen=True)
class LoginResult:
    user_id: int
    username: str
    token: str


def register_user(db: Session, username: str, password: str) -> None:
    """
    Hash the password and store the user.

    A duplicate username is logged and otherwise ignored: callers always report
    success so registration cannot be used to discover existing usernames.
    """
    password_hash = hash_password(password)
    try:
        user_id = create_user(db, username, password_hash)
    except ConflictError:
        logger.warning("Registration for existing username %r suppressed", username)
        return
    logger.info("Registered user id=%s username=%r", user_id, username)


def authenticate(
    db: Session, username: str, password: str, signer: TokenSigner
) -> LoginResult:
    """
    Check credentials and issue a session token.
    Raises InvalidInputError with the same message whether the user or the password is wrong.
    """
    user = get_user_by_username(db, username)
    if user is None:
        verify_password(password, _dummy_password_hash())
        logger.info("Login failed: unknown username %r", username)
        raise InvalidInputError(INVALID_CREDENTIALS_MESSAGE)
    if not verify_password(password, user.password_hash):
        logger.info("Login failed: wrong password for user id=%s", user.id)
        raise InvalidInputError(INVALID_CREDENTIALS_MESSAGE)
    token = signer.issue(user.id, user.username)
    return LoginResult(user_id=user.id, username=user.username, token=token)
