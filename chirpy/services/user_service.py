import logging
import uuid

from sqlalchemy.orm import Session

from chirpy.database import storage_operation
from chirpy.models.user import User
from chirpy.schemas.user import UserCreateRequest, UserUpdateRequest
from chirpy.utils.security import hash_password
from chirpy.utils.exceptions import DuplicateEntryException, NotFoundException

logger = logging.getLogger(__name__)


class UserService:

    def _ensure_email_free(self, db: Session, email: str, user_id: uuid.UUID | None = None) -> None:
        with storage_operation(db, "check email uniqueness"):
            q = db.query(User).filter(User.email == email)
            if user_id is not None:
                q = q.filter(User.id != user_id)
            taken = q.first() is not None
        if taken:
            raise DuplicateEntryException("Email already registered")

    def create_user(self, db: Session, data: UserCreateRequest) -> User:
        self._ensure_email_free(db, data.email)

        user = User(email=data.email, hashed_password=hash_password(data.password))
        with storage_operation(db, "create user"):
            db.add(user)
            db.commit()
            db.refresh(user)
        logger.info(f"Created user {user.id}")
        return user

    def update_user(self, db: Session, user: User, data: UserUpdateRequest) -> User:
        """Replace email and password of the authenticated user."""
        self._ensure_email_free(db, data.email, user.id)

        user.email = data.email
        user.hashed_password = hash_password(data.password)
        with storage_operation(db, "update user"):
            db.commit()
            db.refresh(user)
        return user

    def upgrade_to_chirpy_red(self, db: Session, user_id: uuid.UUID) -> User:
        with storage_operation(db, "upgrade user"):
            user = db.get(User, user_id)
            if not user:
                raise NotFoundException("User")
            user.is_chirpy_red = True
            db.commit()
        logger.info(f"User {user_id} upgraded to Chirpy Red")
        return user

    def delete_all_users(self, db: Session) -> int:
        """Admin reset: drop every user; chirps and refresh tokens cascade."""
        with storage_operation(db, "reset users"):
            users = db.query(User).all()
            for user in users:
                db.delete(user)
            db.commit()
        return len(users)


user_service = UserService()
