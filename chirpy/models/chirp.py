import uuid

from sqlalchemy import Column, String, Uuid, ForeignKey, DateTime
from sqlalchemy.orm import relationship

from chirpy.database import Base
from chirpy.models.user import utcnow


class Chirp(Base):
    __tablename__ = "chirps"

    id         = Column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
    body       = Column(String(140), nullable=False)
    user_id    = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # ─── Relationships ─────────────────────────────────────────────────────────
    user = relationship("User", back_populates="chirps")

    def __repr__(self):
        return f"<Chirp id={self.id} user_id={self.user_id}>"
