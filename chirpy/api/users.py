from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from chirpy.database import get_db
from chirpy.dependencies import get_current_user
from chirpy.models.user import User
from chirpy.schemas.common import AUTH_ERRORS
from chirpy.schemas.user import UserCreateRequest, UserUpdateRequest, UserOut
from chirpy.services.user_service import user_service

router = APIRouter(prefix="/users")


# POST /api/users: Open registration
@router.post("", status_code=status.HTTP_201_CREATED, response_model=UserOut,
             summary="Create a new account")
def create_user(body: UserCreateRequest, db: Session = Depends(get_db)):
    return user_service.create_user(db, body)


# PUT /api/users: Authenticated user updates their own email/password
@router.put("", status_code=status.HTTP_200_OK, response_model=UserOut,
            responses=AUTH_ERRORS, summary="Update own email and password")
def update_user(
    body:         UserUpdateRequest,
    db:           Session = Depends(get_db),
    current_user: User    = Depends(get_current_user),
):
    return user_service.update_user(db, current_user, body)
