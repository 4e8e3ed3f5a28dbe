from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from chirpy.database import get_db
from chirpy.dependencies import get_refresh_token
from chirpy.schemas.auth import LoginRequest, LoginResponse, RefreshResponse
from chirpy.schemas.common import AUTH_ERRORS
from chirpy.services.auth_service import auth_service

router = APIRouter()


# ─── POST /api/login ──────────────────────────────────────────────────────────
@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=LoginResponse,
    responses=AUTH_ERRORS,
    summary="Login and receive access + refresh tokens",
)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    """
    Authenticate user.
    Returns the user plus a one-hour access token and a 60-day refresh token.
    """
    return auth_service.login(db, data)


# ─── POST /api/refresh ────────────────────────────────────────────────────────
@router.post(
    "/refresh",
    status_code=status.HTTP_200_OK,
    response_model=RefreshResponse,
    responses=AUTH_ERRORS,
    summary="Get new access token using refresh token",
)
def refresh(token: str = Depends(get_refresh_token), db: Session = Depends(get_db)):
    """The refresh token goes in `Authorization: Bearer <token>` and is not rotated."""
    return auth_service.refresh(db, token)


# ─── POST /api/revoke ─────────────────────────────────────────────────────────
@router.post(
    "/revoke",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=AUTH_ERRORS,
    summary="Revoke a refresh token",
)
def revoke(token: str = Depends(get_refresh_token), db: Session = Depends(get_db)):
    auth_service.revoke(db, token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
