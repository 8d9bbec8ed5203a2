"""Credential checks and bearer token issuance."""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from teamboard import models, schemas
from teamboard.config import settings
from teamboard.exceptions import (
    AuthenticationError,
    InvalidAuthorizationError,
    InvalidTokenError,
    ValidationError,
)
from teamboard.security import (
    ACCESS_TOKEN_TYPE,
    REFRESH_TOKEN_TYPE,
    create_access_token,
    create_refresh_token,
    decode_token,
    verify_password,
)
from teamboard.services import users

logger = logging.getLogger("teamboard.auth")

BEARER_PREFIX = "Bearer "


def authenticate(db: Session, email: str, password: str) -> schemas.Token:
    """
    Check credentials and issue an access/refresh token pair.

    Raises:
        AuthenticationError: unknown email or wrong password
    """
    try:
        user = users.find_by_email(db, users.normalize_email(email))
    except ValidationError:
        user = None
    if user is None or not verify_password(password or "", user.password_hash):
        logger.warning("Failed login attempt")
        raise AuthenticationError("Invalid email or password")

    logger.info(f"User {user.id} logged in")
    return schemas.Token(
        access_token=create_access_token(user.email),
        refresh_token=create_refresh_token(user.email),
        username=user.email,
        expires_in=settings.access_token_expire_seconds,
    )


def issue_access_token_from_refresh(refresh_token: str) -> schemas.Token:
    """Mint a new access token; the refresh token is returned unchanged."""
    payload = decode_token(refresh_token, expected_type=REFRESH_TOKEN_TYPE)
    subject = payload["sub"]
    return schemas.Token(
        access_token=create_access_token(subject),
        refresh_token=refresh_token,
        username=subject,
        expires_in=settings.access_token_expire_seconds,
    )


def extract_bearer_token(header: Optional[str]) -> str:
    if not header or not header.startswith(BEARER_PREFIX):
        raise InvalidAuthorizationError("Invalid authorization header")
    token = header[len(BEARER_PREFIX):].strip()
    if not token:
        raise InvalidAuthorizationError("Invalid authorization header")
    return token


def resolve_caller_from_bearer_token(db: Session, header: Optional[str]) -> models.User:
    """
    Resolve the calling user from an ``Authorization: Bearer <JWT>`` header.

    Raises:
        InvalidAuthorizationError: missing or malformed header, invalid or
            expired token, or a subject that matches no stored user
    """
    token = extract_bearer_token(header)
    try:
        payload = decode_token(token, expected_type=ACCESS_TOKEN_TYPE)
    except InvalidTokenError as e:
        logger.warning(f"Rejected bearer token: {e.message}")
        raise InvalidAuthorizationError("Invalid or expired token") from e

    user = users.find_by_email(db, payload["sub"])
    if user is None:
        logger.warning("Bearer token subject does not match any user")
        raise InvalidAuthorizationError("Invalid user")
    return user
