import uuid
from datetime import datetime

from pydantic import BaseModel


class ChirpCreateRequest(BaseModel):
    body: str


class ChirpOut(BaseModel):
    id:         uuid.UUID
    created_at: datetime
    updated_at: datetime
    body:       str
    user_id:    uuid.UUID

    model_config = {"from_attributes": True}
