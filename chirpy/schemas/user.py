import uuid
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


# ─── Request ──────────────────────────────────────────────────────────────────
class UserCreateRequest(BaseModel):
    email:    EmailStr
    password: str = Field(min_length=1)


class UserUpdateRequest(BaseModel):
    email:    EmailStr
    password: str = Field(min_length=1)


# ─── Response ─────────────────────────────────────────────────────────────────
class UserOut(BaseModel):
    id:            uuid.UUID
    created_at:    datetime
    updated_at:    datetime
    email:         str
    is_chirpy_red: bool

    model_config = {"from_attributes": True}
