"""Registration, login, and the session-token dependency (get_current_user)."""

from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import ForbiddenError, UnauthenticatedError
from app.core.security import TokenSigner, get_token_signer
from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from app.services.auth import authenticate, register_user

router = APIRouter()
security = HTTPBearer(auto_error=False)


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> RegisterResponse:
    """
    Create an account. Always answers with the same success message, including when
    the username is already taken, so the endpoint cannot be used to probe usernames.
    """
    register_user(db, body.username, body.password)
    return RegisterResponse()


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    signer: Annotated[TokenSigner, Depends(get_token_signer)],
) -> LoginResponse:
    """
    Authenticate with username and password; returns a session token valid for one hour.
    Include the token in the Authorization header as: Bearer <token>
    """
    result = authenticate(db, body.username, body.password, signer)
    return LoginResponse(token=result.token, user_id=result.user_id)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    signer: Annotated[TokenSigner, Depends(get_token_signer)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer token and return the identity it carries.
    401 when no token is sent; 403 when it is invalid, expired, or has bad claims.
    """
    if credentials is None:
        raise UnauthenticatedError("Not authenticated")
    try:
        payload = signer.verify(credentials.credentials)
    except jwt.ExpiredSignatureError:
        raise ForbiddenError("Token has expired")
    except jwt.PyJWTError:
        raise ForbiddenError("Invalid token")
    username = payload.get("username")
    try:
        user_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise ForbiddenError("Invalid token payload")
    if not isinstance(username, str) or not username:
        raise ForbiddenError("Invalid token payload")
    return CurrentUser(id=user_id, username=username)


@router.get("/me", response_model=CurrentUser)
def read_current_user(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Return the identity carried by the session token."""
    return current_user
