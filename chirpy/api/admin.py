import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse
from sqlalchemy.orm import Session

from chirpy.config import settings
from chirpy.database import get_db
from chirpy.services.user_service import user_service
from chirpy.utils.exceptions import ForbiddenException

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin")

METRICS_TEMPLATE = """<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>
"""


# GET /admin/metrics
@router.get("/metrics", response_class=HTMLResponse, summary="File server hit count")
def metrics(request: Request):
    return HTMLResponse(METRICS_TEMPLATE.format(hits=request.app.state.hits.value))


# POST /admin/reset: dev platform only
@router.post("/reset", response_class=PlainTextResponse, summary="Wipe all data (dev only)")
def reset(request: Request, db: Session = Depends(get_db)):
    if not settings.is_dev_platform:
        raise ForbiddenException("Reset is only allowed on the dev platform")

    deleted = user_service.delete_all_users(db)
    request.app.state.hits.reset()
    logger.warning(f"Admin reset: deleted {deleted} users and zeroed the hit counter")
    return PlainTextResponse("OK", status_code=status.HTTP_200_OK)
