import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Boolean, Uuid, DateTime
from sqlalchemy.orm import relationship

from chirpy.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id              = Column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at      = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at      = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
    email           = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    is_chirpy_red   = Column(Boolean, default=False, nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    chirps         = relationship("Chirp", back_populates="user", cascade="all, delete-orphan")
    refresh_tokens = relationship("RefreshToken", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User id={self.id} email={self.email} red={self.is_chirpy_red}>"
