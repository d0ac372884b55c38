"""Password hashing and JWT session token issue/verification."""

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import bcrypt
import jwt

from app.core.config import get_settings

# Username and password bounds (bcrypt only reads the first 72 bytes).
USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 20
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128

USERNAME_PATTERN = re.compile(rf"^[A-Za-z0-9]{{{USERNAME_MIN_LEN},{USERNAME_MAX_LEN}}}$")
PASSWORD_SYMBOLS = frozenset("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?")


def is_valid_username(username: str) -> bool:
    """3-20 ASCII letters or digits."""
    return bool(USERNAME_PATTERN.fullmatch(username))


def is_strong_password(password: str) -> bool:
    """At least one lower, upper, digit and symbol, within the length bounds."""
    if not (PASSWORD_MIN_LEN <= len(password) <= PASSWORD_MAX_LEN):
        return False
    return (
        any("a" <= c <= "z" for c in password)
        and any("A" <= c <= "Z" for c in password)
        and any("0" <= c <= "9" for c in password)
        and any(c in PASSWORD_SYMBOLS for c in password)
    )


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    if rounds is None:
        rounds = get_settings().BCRYPT_ROUNDS
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash (constant-time compare)."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class TokenSigner:
    """
    Issues and verifies signed session tokens.

    Built once from settings; the secret is never mutated afterwards. The clock is
    injectable so expiry can be tested without sleeping.
    """

    secret: str = field(repr=False)
    algorithm: str = "HS256"
    expire_minutes: int = 60
    clock: Callable[[], datetime] = _utcnow

    def issue(self, user_id: int, username: str) -> str:
        """Create a token with sub (user id), username, iat and exp claims."""
        now = self.clock()
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "username": username,
            "iat": now,
            "exp": now + timedelta(minutes=self.expire_minutes),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> dict[str, Any]:
        """
        Decode and validate a token; return its claims.
        Raises jwt.PyJWTError on a bad signature, missing claims, or expiry.
        """
        payload = jwt.decode(
            token,
            self.secret,
            algorithms=[self.algorithm],
            options={
                "require": ["sub", "iat", "exp"],
                "verify_exp": False,
                "verify_iat": False,
            },
        )
        # Expiry is checked here so it follows the injected clock.
        if int(payload["exp"]) <= int(self.clock().timestamp()):
            raise jwt.ExpiredSignatureError("Signature has expired")
        return payload


@lru_cache
def get_token_signer() -> TokenSigner:
    """Return the process-wide signer built from settings."""
    settings = get_settings()
    return TokenSigner(
        secret=settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
        expire_minutes=settings.JWT_EXPIRE_MINUTES,
    )
