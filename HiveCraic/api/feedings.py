from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user
from models.user import UserProfile
from schemas.feeding import FeedingCreate, FeedingUpdate, FeedingOut
from services.feeding_service import list_feedings, get_feeding, create_feeding, update_feeding, delete_feeding

router = APIRouter(prefix="/feedings", tags=["feedings"])


@router.get("", response_model=list[FeedingOut])
def get_feedings(
        hive_id: int | None = Query(None, gt=0),
        apiary_id: int | None = Query(None, gt=0),
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    """Own feedings, newest first"""
    return list_feedings(db, user, hive_id, apiary_id)


@router.post("", response_model=FeedingOut, status_code=status.HTTP_201_CREATED)
def post_feeding(
        payload: FeedingCreate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return create_feeding(db, user, payload)


@router.get("/{feeding_id}", response_model=FeedingOut)
def get_feeding_by_id(
        feeding_id: int,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return get_feeding(db, user, feeding_id)


@router.patch("/{feeding_id}", response_model=FeedingOut)
def patch_feeding(
        feeding_id: int,
        payload: FeedingUpdate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return update_feeding(db, user, feeding_id, payload)


@router.delete("/{feeding_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_feeding(
        feeding_id: int,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    delete_feeding(db, user, feeding_id)
