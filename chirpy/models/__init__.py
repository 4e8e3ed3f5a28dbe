"""
Import all models here so that:
1. Alembic can auto-detect them when generating migrations
2. Relationships between models resolve correctly

Order matters: import parent tables before child tables.
"""

from chirpy.models.user import User
from chirpy.models.refresh_token import RefreshToken
from chirpy.models.chirp import Chirp

__all__ = [
    "User",
    "RefreshToken",
    "Chirp",
]
