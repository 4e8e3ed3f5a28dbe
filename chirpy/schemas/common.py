from pydantic import BaseModel


# ─── Error Response ───────────────────────────────────────────────────────────
class ErrorResponse(BaseModel):
    error: str


def error_body(message: str) -> dict:
    """Return the standardized error dict (used by the exception handlers)."""
    return {"error": message}


# Shared `responses=` entries for route decorators (OpenAPI docs only)
AUTH_ERRORS = {401: {"model": ErrorResponse}}
NOT_FOUND_ERRORS = {404: {"model": ErrorResponse}}
