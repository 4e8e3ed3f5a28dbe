import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from chirpy.database import storage_operation
from chirpy.models.refresh_token import RefreshToken

logger = logging.getLogger(__name__)


class RefreshTokenStore:
    """
    Persistence of opaque refresh tokens.

    Rows are never deleted here; revocation only stamps `revoked_at`.
    Validity (expiry / revocation) is judged by the caller, see
    AuthService.check_refresh_token.
    """

    def create(self, db: Session, token: str, user_id: uuid.UUID, expires_at: datetime) -> RefreshToken:
        row = RefreshToken(token=token, user_id=user_id, expires_at=expires_at)
        with storage_operation(db, "create refresh token"):
            db.add(row)
            db.commit()
        return row

    def find_by_token(self, db: Session, token: str) -> RefreshToken | None:
        with storage_operation(db, "look up refresh token"):
            return db.get(RefreshToken, token)

    def revoke(self, db: Session, token: str) -> RefreshToken | None:
        """Stamp revoked_at = now. Revoking twice just moves the stamp."""
        with storage_operation(db, "revoke refresh token"):
            row = db.get(RefreshToken, token)
            if row is None:
                return None
            now = datetime.now(timezone.utc)
            row.revoked_at = now
            row.updated_at = now
            db.commit()
        logger.info(f"Refresh token revoked for user {row.user_id}")
        return row

    def get_user_id_from_token(self, db: Session, token: str) -> uuid.UUID | None:
        """Owning user of `token`. Does not check expiry or revocation."""
        with storage_operation(db, "resolve user from refresh token"):
            row = db.get(RefreshToken, token)
        return row.user_id if row else None


refresh_token_store = RefreshTokenStore()
