import uuid
from typing import Any, Optional

from pydantic import BaseModel

USER_UPGRADED = "user.upgraded"


class PolkaEventData(BaseModel):
    user_id: uuid.UUID


class PolkaWebhookRequest(BaseModel):
    event: str
    # Shape depends on the event; only "user.upgraded" is parsed, as PolkaEventData
    data:  Optional[dict[str, Any]] = None
