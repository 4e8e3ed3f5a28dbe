import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from chirpy.database import get_db
from chirpy.dependencies import get_current_user_id
from chirpy.schemas.chirp import ChirpCreateRequest, ChirpOut
from chirpy.schemas.common import AUTH_ERRORS, NOT_FOUND_ERRORS
from chirpy.services.chirp_service import chirp_service

router = APIRouter(prefix="/chirps")


# POST /api/chirps: Authenticated
@router.post("", status_code=status.HTTP_201_CREATED, response_model=ChirpOut,
             responses=AUTH_ERRORS, summary="Post a chirp")
def create_chirp(
    body:    ChirpCreateRequest,
    db:      Session   = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    return chirp_service.create_chirp(db, body, user_id)


# GET /api/chirps: Public
@router.get("", status_code=status.HTTP_200_OK, response_model=list[ChirpOut],
            summary="List chirps")
def list_chirps(
    author_id: Optional[uuid.UUID] = Query(None, description="Only chirps by this user"),
    sort:      Optional[str]       = Query(None, description="asc (default) or desc by creation time"),
    db:        Session             = Depends(get_db),
):
    return chirp_service.list_chirps(db, author_id, sort)


# GET /api/chirps/{id}: Public
@router.get("/{chirp_id}", status_code=status.HTTP_200_OK, response_model=ChirpOut,
            responses=NOT_FOUND_ERRORS, summary="Get chirp by ID")
def get_chirp(chirp_id: uuid.UUID, db: Session = Depends(get_db)):
    return chirp_service.get_chirp(db, chirp_id)


# DELETE /api/chirps/{id}: Author only
@router.delete("/{chirp_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response,
               responses={**AUTH_ERRORS, **NOT_FOUND_ERRORS}, summary="Delete own chirp")
def delete_chirp(
    chirp_id: uuid.UUID,
    db:       Session   = Depends(get_db),
    user_id:  uuid.UUID = Depends(get_current_user_id),
):
    chirp_service.delete_chirp(db, chirp_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
