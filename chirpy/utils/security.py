import secrets
import uuid
from datetime import datetime, timedelta, timezone

from jose import JWTError, ExpiredSignatureError, jwt
from passlib.context import CryptContext

from chirpy.config import settings
from chirpy.utils.exceptions import (
    HashingFailureException,
    InvalidTokenException,
    MalformedSubjectException,
    PasswordMismatchException,
    TokenExpiredException,
)

# ─── Password Hashing ─────────────────────────────────────────────────────────
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# bcrypt only looks at the first 72 bytes; longer secrets are refused, not truncated
BCRYPT_MAX_BYTES = 72


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password using bcrypt."""
    if len(plain_password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise HashingFailureException()
    try:
        return pwd_context.hash(plain_password)
    except (ValueError, TypeError) as exc:
        raise HashingFailureException() from exc


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain-text password against a bcrypt hash."""
    return pwd_context.verify(plain_password, hashed_password)


def check_password_hash(plain_password: str, hashed_password: str) -> None:
    """Like verify_password, but a mismatch raises PasswordMismatchException."""
    if not verify_password(plain_password, hashed_password):
        raise PasswordMismatchException()


# ─── JWT ──────────────────────────────────────────────────────────────────────
def make_jwt(user_id: uuid.UUID, secret: str, expires_in: timedelta) -> str:
    """
    Create a signed access token for `user_id`.
    Payload: iss, iat, exp, sub (user id as string)
    """
    now = datetime.now(timezone.utc)
    payload = {
        "iss": settings.JWT_ISSUER,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_in).timestamp()),
        "sub": str(user_id),
    }
    return jwt.encode(payload, secret, algorithm=settings.ALGORITHM)


def validate_jwt(token: str, secret: str) -> uuid.UUID:
    """
    Verify signature and expiry of an access token and return its subject.
    Raises 401 (TOKEN_INVALID, TOKEN_EXPIRED or TOKEN_SUBJECT_MALFORMED).
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[settings.ALGORITHM],
            options={"verify_exp": False, "verify_sub": False},
        )
    except ExpiredSignatureError:
        raise TokenExpiredException()
    except JWTError:
        raise InvalidTokenException()

    # A token is dead from the very second its exp is reached
    exp = payload.get("exp")
    if not isinstance(exp, (int, float)) or datetime.now(timezone.utc).timestamp() >= exp:
        raise TokenExpiredException()

    try:
        return uuid.UUID(str(payload["sub"]))
    except (KeyError, ValueError):
        raise MalformedSubjectException()


def make_refresh_token() -> str:
    """32 bytes of CSPRNG output, hex-encoded (64 chars). No claims, no signature."""
    return secrets.token_hex(32)
