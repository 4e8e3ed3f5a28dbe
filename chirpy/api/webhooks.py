import logging
import secrets

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

from chirpy.config import settings
from chirpy.database import get_db
from chirpy.dependencies import get_api_key
from chirpy.schemas.common import AUTH_ERRORS, NOT_FOUND_ERRORS
from chirpy.schemas.webhook import PolkaEventData, PolkaWebhookRequest, USER_UPGRADED
from chirpy.services.user_service import user_service
from chirpy.utils.exceptions import UnauthorizedException, ValidationException

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/polka")


def require_polka_key(request: Request) -> None:
    """`Authorization: ApiKey <key>` must carry the shared Polka secret."""
    api_key = get_api_key(request.headers)
    if not secrets.compare_digest(api_key, settings.POLKA_KEY):
        raise UnauthorizedException("Invalid API key")


# POST /api/polka/webhooks: Polka only
@router.post("/webhooks", status_code=status.HTTP_204_NO_CONTENT, response_class=Response,
             responses={**AUTH_ERRORS, **NOT_FOUND_ERRORS}, summary="Polka payment events")
def polka_webhook(
    body: PolkaWebhookRequest,
    db:   Session = Depends(get_db),
    _:    None    = Depends(require_polka_key),
):
    if body.event != USER_UPGRADED:
        logger.info(f"Ignoring Polka event '{body.event}'")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    if body.data is None:
        raise ValidationException("data.user_id is required for user.upgraded")
    try:
        data = PolkaEventData.model_validate(body.data)
    except ValidationError:
        raise ValidationException("data.user_id must be a valid user id")

    user_service.upgrade_to_chirpy_red(db, data.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
