import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import Session

from chirpy.config import settings
from chirpy.database import storage_operation
from chirpy.models.refresh_token import RefreshToken
from chirpy.models.user import User
from chirpy.schemas.auth import LoginRequest
from chirpy.services.refresh_token_store import refresh_token_store
from chirpy.utils.security import check_password_hash, make_jwt, make_refresh_token
from chirpy.utils.exceptions import (
    NotFoundException,
    RefreshTokenExpiredException,
    RefreshTokenNotFoundException,
    RefreshTokenRevokedException,
)

logger = logging.getLogger(__name__)


def as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; every stored timestamp is UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def access_token_ttl() -> timedelta:
    return timedelta(seconds=settings.ACCESS_TOKEN_EXPIRE_SECONDS)


class AuthService:

    # ─── Login ────────────────────────────────────────────────────────────────
    def login(self, db: Session, data: LoginRequest) -> dict:
        with storage_operation(db, "look up user by email"):
            user = db.query(User).filter(User.email == data.email).first()
        if not user:
            raise NotFoundException("User with this email")

        check_password_hash(data.password, user.hashed_password)

        access_token = make_jwt(user.id, settings.SECRET_KEY, access_token_ttl())
        refresh_token = make_refresh_token()
        expires_at = datetime.now(timezone.utc) + timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)
        refresh_token_store.create(db, refresh_token, user.id, expires_at)

        logger.info(f"User {user.id} logged in")
        return {
            "id":            user.id,
            "created_at":    user.created_at,
            "updated_at":    user.updated_at,
            "email":         user.email,
            "is_chirpy_red": user.is_chirpy_red,
            "token":         access_token,
            "refresh_token": refresh_token,
        }

    # ─── Refresh Token State Machine ──────────────────────────────────────────
    def check_refresh_token(self, stored: RefreshToken | None, now: datetime | None = None) -> RefreshToken:
        """
        Found -> Expired | Revoked | Valid.

        A token revoked at exactly `now` is still accepted: only instants
        strictly after revoked_at count as revoked.
        """
        if stored is None:
            raise RefreshTokenNotFoundException()

        now = now or datetime.now(timezone.utc)
        if now >= as_utc(stored.expires_at):
            raise RefreshTokenExpiredException()
        if stored.revoked_at is not None and now > as_utc(stored.revoked_at):
            raise RefreshTokenRevokedException()
        return stored

    def validate_refresh_token(self, db: Session, token: str) -> RefreshToken:
        stored = refresh_token_store.find_by_token(db, token)
        return self.check_refresh_token(stored)

    # ─── Refresh ──────────────────────────────────────────────────────────────
    def refresh(self, db: Session, token: str) -> dict:
        """Exchange a usable refresh token for a new access token. No rotation."""
        stored = self.validate_refresh_token(db, token)
        user_id = refresh_token_store.get_user_id_from_token(db, stored.token)
        if user_id is None:
            raise RefreshTokenNotFoundException()
        return {"token": make_jwt(user_id, settings.SECRET_KEY, timedelta(hours=1))}

    # ─── Revoke ───────────────────────────────────────────────────────────────
    def revoke(self, db: Session, token: str) -> None:
        if refresh_token_store.revoke(db, token) is None:
            raise RefreshTokenNotFoundException()


auth_service = AuthService()
