from fastapi import HTTPException, status


# ═══════════════════════════════════════════════════════════════════════════════
# ERROR CODES: machine-readable constants, logged next to every failure
# ═══════════════════════════════════════════════════════════════════════════════
class ErrorCode:
    VALIDATION_ERROR        = "VALIDATION_ERROR"
    CHIRP_TOO_LONG          = "CHIRP_TOO_LONG"
    UNAUTHORIZED            = "UNAUTHORIZED"
    AUTH_HEADER_MISSING     = "AUTH_HEADER_MISSING"
    AUTH_HEADER_MALFORMED   = "AUTH_HEADER_MALFORMED"
    TOKEN_INVALID           = "TOKEN_INVALID"
    TOKEN_EXPIRED           = "TOKEN_EXPIRED"
    TOKEN_SUBJECT_MALFORMED = "TOKEN_SUBJECT_MALFORMED"
    REFRESH_TOKEN_NOT_FOUND = "REFRESH_TOKEN_NOT_FOUND"
    REFRESH_TOKEN_EXPIRED   = "REFRESH_TOKEN_EXPIRED"
    REFRESH_TOKEN_REVOKED   = "REFRESH_TOKEN_REVOKED"
    PASSWORD_MISMATCH       = "PASSWORD_MISMATCH"
    FORBIDDEN               = "FORBIDDEN"
    NOT_FOUND               = "NOT_FOUND"
    DUPLICATE_ENTRY         = "DUPLICATE_ENTRY"
    HASHING_FAILURE         = "HASHING_FAILURE"
    STORAGE_FAILURE         = "STORAGE_FAILURE"


# ═══════════════════════════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════════════════════════
class AppException(HTTPException):
    """
    Base exception for all application-level errors.
    `detail` is the message sent to the client; `error_code` is for logs.
    """
    def __init__(self, status_code: int, message: str, error_code: str):
        super().__init__(status_code=status_code, detail=message)
        self.error_code = error_code

    @property
    def message(self) -> str:
        return self.detail


# ═══════════════════════════════════════════════════════════════════════════════
# 400 VALIDATION
# ═══════════════════════════════════════════════════════════════════════════════
class ValidationException(AppException):
    def __init__(self, message: str = "Invalid request"):
        super().__init__(status.HTTP_400_BAD_REQUEST, message, ErrorCode.VALIDATION_ERROR)


class ChirpTooLongException(ValidationException):
    def __init__(self):
        super().__init__("Chirp is too long")
        self.error_code = ErrorCode.CHIRP_TOO_LONG


# ═══════════════════════════════════════════════════════════════════════════════
# 401 AUTHENTICATION
# ═══════════════════════════════════════════════════════════════════════════════
class UnauthorizedException(AppException):
    def __init__(self, message: str = "Authentication required",
                 error_code: str = ErrorCode.UNAUTHORIZED):
        super().__init__(status.HTTP_401_UNAUTHORIZED, message, error_code)


class MissingAuthHeaderException(UnauthorizedException):
    def __init__(self):
        super().__init__("Authorization header not found", ErrorCode.AUTH_HEADER_MISSING)


class MalformedAuthHeaderException(UnauthorizedException):
    def __init__(self):
        super().__init__("Invalid authorization header format", ErrorCode.AUTH_HEADER_MALFORMED)


class InvalidTokenException(UnauthorizedException):
    def __init__(self, message: str = "Invalid or malformed token"):
        super().__init__(message, ErrorCode.TOKEN_INVALID)


class TokenExpiredException(UnauthorizedException):
    def __init__(self):
        super().__init__("Access token has expired", ErrorCode.TOKEN_EXPIRED)


class MalformedSubjectException(UnauthorizedException):
    def __init__(self):
        super().__init__("Token subject is not a valid user id", ErrorCode.TOKEN_SUBJECT_MALFORMED)


class RefreshTokenNotFoundException(UnauthorizedException):
    def __init__(self):
        super().__init__("Refresh token does not exist", ErrorCode.REFRESH_TOKEN_NOT_FOUND)


class RefreshTokenExpiredException(UnauthorizedException):
    def __init__(self):
        super().__init__("Refresh token expired", ErrorCode.REFRESH_TOKEN_EXPIRED)


class RefreshTokenRevokedException(UnauthorizedException):
    def __init__(self):
        super().__init__("Refresh token revoked", ErrorCode.REFRESH_TOKEN_REVOKED)


class PasswordMismatchException(UnauthorizedException):
    def __init__(self):
        super().__init__("Incorrect email or password", ErrorCode.PASSWORD_MISMATCH)


# ═══════════════════════════════════════════════════════════════════════════════
# 403 / 404 / 409
# ═══════════════════════════════════════════════════════════════════════════════
class ForbiddenException(AppException):
    def __init__(self, message: str = "You do not have permission to perform this action"):
        super().__init__(status.HTTP_403_FORBIDDEN, message, ErrorCode.FORBIDDEN)


class NotFoundException(AppException):
    def __init__(self, resource: str = "Resource"):
        super().__init__(status.HTTP_404_NOT_FOUND, f"{resource} not found", ErrorCode.NOT_FOUND)


class DuplicateEntryException(AppException):
    def __init__(self, message: str = "Record already exists"):
        super().__init__(status.HTTP_409_CONFLICT, message, ErrorCode.DUPLICATE_ENTRY)


# ═══════════════════════════════════════════════════════════════════════════════
# 500 INTERNAL (message is never the underlying error)
# ═══════════════════════════════════════════════════════════════════════════════
class HashingFailureException(AppException):
    def __init__(self):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to hash password",
                         ErrorCode.HASHING_FAILURE)


class StorageFailureException(AppException):
    def __init__(self):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR,
                         "Something went wrong, please try again later",
                         ErrorCode.STORAGE_FAILURE)
