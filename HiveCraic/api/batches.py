from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user
from models.user import UserProfile
from enums.enums import BatchStatusEnum
from schemas.batch import BatchCreate, BatchUpdate, BatchOut
from services.batch_service import list_batches, get_batch, create_batch, update_batch, delete_batch

router = APIRouter(prefix="/batches", tags=["queencraft"])


@router.get("", response_model=list[BatchOut])
def get_batches(
        status_filter: BatchStatusEnum | None = Query(None, alias="status"),
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    """Own QueenCraft batches, each with the mother queen number"""
    return list_batches(db, user, status_filter)


@router.post("", response_model=BatchOut, status_code=status.HTTP_201_CREATED)
def post_batch(
        payload: BatchCreate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return create_batch(db, user, payload)


@router.get("/{batch_id}", response_model=BatchOut)
def get_batch_by_id(
        batch_id: int,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return get_batch(db, user, batch_id)


@router.patch("/{batch_id}", response_model=BatchOut)
def patch_batch(
        batch_id: int,
        payload: BatchUpdate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return update_batch(db, user, batch_id, payload)


@router.delete("/{batch_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_batch(
        batch_id: int,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    delete_batch(db, user, batch_id)
