import time
import uuid
from datetime import timedelta

import pytest
from jose import jwt

from chirpy.utils.security import (
    check_password_hash,
    hash_password,
    make_jwt,
    make_refresh_token,
    validate_jwt,
    verify_password,
)
from chirpy.utils.exceptions import (
    HashingFailureException,
    InvalidTokenException,
    MalformedSubjectException,
    PasswordMismatchException,
    TokenExpiredException,
)

SECRET = "super-secret"


# ─── Password hashing ─────────────────────────────────────────────────────────
@pytest.mark.parametrize("password", ["a", "password", "correct horse battery staple", "pässwörd"])
def test_hash_then_verify(password):
    hashed = hash_password(password)
    assert hashed != password
    assert verify_password(password, hashed)
    check_password_hash(password, hashed)


def test_wrong_password_is_a_mismatch_not_a_crash():
    hashed = hash_password("password")
    assert verify_password("Password", hashed) is False
    with pytest.raises(PasswordMismatchException) as exc_info:
        check_password_hash("Password", hashed)
    assert exc_info.value.status_code == 401


def test_hash_is_salted():
    assert hash_password("password") != hash_password("password")


def test_password_over_bcrypt_limit_fails_to_hash():
    with pytest.raises(HashingFailureException) as exc_info:
        hash_password("x" * 73)
    assert exc_info.value.status_code == 500


# ─── Access tokens ────────────────────────────────────────────────────────────
def test_jwt_round_trip():
    user_id = uuid.uuid4()
    token = make_jwt(user_id, SECRET, timedelta(hours=1))
    assert validate_jwt(token, SECRET) == user_id


def test_jwt_claims():
    user_id = uuid.uuid4()
    token = make_jwt(user_id, SECRET, timedelta(minutes=5))
    claims = jwt.get_unverified_claims(token)
    assert claims["iss"] == "chirpy"
    assert claims["sub"] == str(user_id)
    assert claims["exp"] - claims["iat"] == 300


def test_jwt_wrong_secret_is_rejected():
    token = make_jwt(uuid.uuid4(), SECRET, timedelta(hours=1))
    with pytest.raises(InvalidTokenException):
        validate_jwt(token, "another-secret")


def test_jwt_garbage_is_rejected():
    with pytest.raises(InvalidTokenException):
        validate_jwt("not.a.jwt", SECRET)


def test_jwt_already_expired():
    token = make_jwt(uuid.uuid4(), SECRET, timedelta(seconds=-10))
    with pytest.raises(TokenExpiredException):
        validate_jwt(token, SECRET)


def test_jwt_expires_after_ttl():
    token = make_jwt(uuid.uuid4(), SECRET, timedelta(seconds=1))
    time.sleep(2)
    with pytest.raises(TokenExpiredException):
        validate_jwt(token, SECRET)


def test_jwt_subject_must_be_a_uuid():
    token = jwt.encode({"sub": "not-a-uuid", "exp": int(time.time()) + 60}, SECRET, algorithm="HS256")
    with pytest.raises(MalformedSubjectException):
        validate_jwt(token, SECRET)


def test_jwt_without_subject():
    token = jwt.encode({"exp": int(time.time()) + 60}, SECRET, algorithm="HS256")
    with pytest.raises(MalformedSubjectException):
        validate_jwt(token, SECRET)


# ─── Refresh tokens ───────────────────────────────────────────────────────────
def test_refresh_token_is_64_hex_chars():
    token = make_refresh_token()
    assert len(token) == 64
    int(token, 16)
    assert token != make_refresh_token()
