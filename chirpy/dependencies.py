import uuid
from typing import Mapping

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from chirpy.config import settings
from chirpy.database import get_db
from chirpy.models.user import User
from chirpy.utils.security import validate_jwt
from chirpy.utils.exceptions import (
    MalformedAuthHeaderException,
    MissingAuthHeaderException,
    UnauthorizedException,
)

BEARER_SCHEME = "Bearer"
API_KEY_SCHEME = "ApiKey"


# ─── Authorization Header Parsing ─────────────────────────────────────────────
def get_auth_header_value(headers: Mapping[str, str], scheme: str) -> str:
    """
    Return the credential that follows `scheme` in the Authorization header.

    The header must split on whitespace into exactly two fields, the first
    being the scheme label. Raises 401 when the header is missing or empty,
    or when it has any other shape.
    """
    auth_header = headers.get("Authorization") or headers.get("authorization")
    if not auth_header or not auth_header.strip():
        raise MissingAuthHeaderException()

    fields = auth_header.split()
    if len(fields) != 2 or fields[0] != scheme:
        raise MalformedAuthHeaderException()
    return fields[1]


def get_bearer_token(headers: Mapping[str, str]) -> str:
    return get_auth_header_value(headers, BEARER_SCHEME)


def get_api_key(headers: Mapping[str, str]) -> str:
    return get_auth_header_value(headers, API_KEY_SCHEME)


def authenticate_bearer(headers: Mapping[str, str], secret: str) -> uuid.UUID:
    """Resolve a Bearer access token to the user id it was issued for."""
    token = get_bearer_token(headers)
    return validate_jwt(token, secret)


# ─── FastAPI Dependencies ─────────────────────────────────────────────────────
def get_current_user_id(request: Request) -> uuid.UUID:
    """
    Validate the JWT Bearer token and return the caller's user id.
    Raises 401 if the token is missing, malformed, invalid, or expired.
    """
    return authenticate_bearer(request.headers, settings.SECRET_KEY)


def get_current_user(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> User:
    """Same as get_current_user_id, but loads the User row."""
    user = db.get(User, user_id)
    if not user:
        raise UnauthorizedException("User no longer exists")
    return user


def get_refresh_token(request: Request) -> str:
    """Bearer value for the refresh/revoke endpoints (an opaque refresh token)."""
    return get_bearer_token(request.headers)
