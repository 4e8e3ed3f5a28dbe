from pydantic import BaseModel, EmailStr, Field

from chirpy.schemas.user import UserOut


# ─── Request Schemas ──────────────────────────────────────────────────────────
class LoginRequest(BaseModel):
    email:    EmailStr
    password: str = Field(min_length=1)


# ─── Response Schemas ─────────────────────────────────────────────────────────
class LoginResponse(UserOut):
    token:         str
    refresh_token: str


class RefreshResponse(BaseModel):
    token: str
