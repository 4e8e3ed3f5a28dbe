import logging
import uuid

from sqlalchemy.orm import Session

from chirpy.database import storage_operation
from chirpy.models.chirp import Chirp
from chirpy.schemas.chirp import ChirpCreateRequest
from chirpy.utils.profanity import validate_chirp_body
from chirpy.utils.exceptions import ForbiddenException, NotFoundException

logger = logging.getLogger(__name__)

SORT_ASC = "ASC"
SORT_DESC = "DESC"


def normalize_sort(sort: str | None) -> str:
    """Anything other than asc/desc (any case) means ascending."""
    value = (sort or "").upper()
    return SORT_DESC if value == SORT_DESC else SORT_ASC


class ChirpService:

    def create_chirp(self, db: Session, data: ChirpCreateRequest, user_id: uuid.UUID) -> Chirp:
        cleaned = validate_chirp_body(data.body)
        chirp = Chirp(body=cleaned, user_id=user_id)
        with storage_operation(db, "create chirp"):
            db.add(chirp)
            db.commit()
            db.refresh(chirp)
        return chirp

    def list_chirps(self, db: Session, author_id: uuid.UUID | None, sort: str | None) -> list[Chirp]:
        q = db.query(Chirp)
        if author_id is not None:
            q = q.filter(Chirp.user_id == author_id)

        if normalize_sort(sort) == SORT_DESC:
            q = q.order_by(Chirp.created_at.desc())
        else:
            q = q.order_by(Chirp.created_at.asc())

        with storage_operation(db, "list chirps"):
            return q.all()

    def get_chirp(self, db: Session, chirp_id: uuid.UUID) -> Chirp:
        with storage_operation(db, "get chirp"):
            chirp = db.get(Chirp, chirp_id)
        if not chirp:
            raise NotFoundException("Chirp")
        return chirp

    def delete_chirp(self, db: Session, chirp_id: uuid.UUID, user_id: uuid.UUID) -> None:
        """Only the author may delete; anyone else gets 403 even though the chirp exists."""
        chirp = self.get_chirp(db, chirp_id)
        if chirp.user_id != user_id:
            raise ForbiddenException("You can only delete your own chirps")

        with storage_operation(db, "delete chirp"):
            db.delete(chirp)
            db.commit()
        logger.info(f"User {user_id} deleted chirp {chirp_id}")


chirp_service = ChirpService()
