from sqlalchemy import Column, String, Uuid, ForeignKey, DateTime
from sqlalchemy.orm import relationship

from chirpy.database import Base
from chirpy.models.user import utcnow


class RefreshToken(Base):
    __tablename__ = "refresh_tokens"

    token      = Column(String(64), primary_key=True)
    user_id    = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    revoked_at = Column(DateTime(timezone=True), nullable=True)

    # ─── Relationships ─────────────────────────────────────────────────────────
    user = relationship("User", back_populates="refresh_tokens")

    def __repr__(self):
        return f"<RefreshToken user_id={self.user_id} expires_at={self.expires_at} revoked_at={self.revoked_at}>"
