from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings

STATIC_DIR = Path(__file__).resolve().parent / "static"


class Settings(BaseSettings):
    # ─── Application ───────────────────────────────────────────────────────────
    APP_NAME: str = "Chirpy"
    APP_ENV:  str = "development"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8080

    # "dev" unlocks POST /admin/reset
    PLATFORM: str

    # ─── Database ──────────────────────────────────────────────────────────────
    DATABASE_URL:          str
    DATABASE_POOL_SIZE:    int  = 10
    DATABASE_MAX_OVERFLOW: int  = 20
    DATABASE_POOL_TIMEOUT: int  = 30
    DATABASE_ECHO:         bool = False

    # ─── JWT ───────────────────────────────────────────────────────────────────
    SECRET_KEY:                  str
    ALGORITHM:                   str = "HS256"
    JWT_ISSUER:                  str = "chirpy"
    ACCESS_TOKEN_EXPIRE_SECONDS: int = 3600
    REFRESH_TOKEN_EXPIRE_DAYS:   int = 60

    # ─── Polka webhooks ────────────────────────────────────────────────────────
    POLKA_KEY: str

    # ─── File server ───────────────────────────────────────────────────────────
    FILESERVER_ROOT: str = str(STATIC_DIR)

    # ─── CORS ──────────────────────────────────────────────────────────────────
    CORS_ORIGINS: str = "*"

    def get_cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",")]

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"

    @property
    def is_dev_platform(self) -> bool:
        return self.PLATFORM == "dev"

    model_config = {"env_file": ".env", "case_sensitive": True, "extra": "ignore"}


settings = Settings()
