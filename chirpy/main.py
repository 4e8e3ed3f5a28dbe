import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from chirpy.config import settings
from chirpy.database import check_db_connection
from chirpy.utils.exceptions import AppException
from chirpy.middleware.metrics import FileserverHitsMiddleware, HitCounter, FILESERVER_PREFIX
from chirpy.middleware.error_handler import (
    app_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    integrity_error_handler,
    generic_exception_handler,
)

from chirpy.api import admin
from chirpy.api import auth
from chirpy.api import chirps
from chirpy.api import users
from chirpy.api import webhooks

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        description="Chirpy: short posts, JWT sessions and Chirpy Red upgrades",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # ─── Process State ────────────────────────────────────────────────────────
    app.state.hits = HitCounter()

    # ─── Middleware ───────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(FileserverHitsMiddleware)

    # ─── Exception Handlers ───────────────────────────────────────────────────
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # ─── Routers ──────────────────────────────────────────────────────────────
    PREFIX = "/api"
    app.include_router(users.router,    prefix=PREFIX, tags=["Users"])
    app.include_router(auth.router,     prefix=PREFIX, tags=["Auth"])
    app.include_router(chirps.router,   prefix=PREFIX, tags=["Chirps"])
    app.include_router(webhooks.router, prefix=PREFIX, tags=["Webhooks"])
    app.include_router(admin.router,                   tags=["Admin"])

    # ─── Health ───────────────────────────────────────────────────────────────
    @app.get(f"{PREFIX}/healthz", response_class=PlainTextResponse, tags=["Health"])
    def healthz():
        return PlainTextResponse("OK")

    # ─── File Server ──────────────────────────────────────────────────────────
    app.mount(
        FILESERVER_PREFIX,
        StaticFiles(directory=settings.FILESERVER_ROOT, html=True, check_dir=False),
        name="app",
    )

    # ─── Startup ──────────────────────────────────────────────────────────────
    @app.on_event("startup")
    def on_startup():
        ok = check_db_connection()
        logger.info("DB connected" if ok else "DB connection FAILED")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("chirpy.main:app", host=settings.APP_HOST, port=settings.APP_PORT,
                reload=settings.is_development)
