from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user
from models.user import UserProfile
from enums.enums import HiveStatusEnum
from schemas.hive import HiveCreate, HiveUpdate, HiveOut
from services.hive_service import list_hives, get_hive, create_hive, update_hive, delete_hive

router = APIRouter(prefix="/hives", tags=["hives"])


@router.get("", response_model=list[HiveOut])
def get_hives(
        status_filter: HiveStatusEnum | None = Query(None, alias="status"),
        apiary_id: int | None = Query(None, gt=0),
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    """
    Own hives ordered by hive number.

    Filters:
    - status: active / queenless / retired
    - apiary_id
    """
    return list_hives(db, user, status_filter, apiary_id)


@router.post("", response_model=HiveOut, status_code=status.HTTP_201_CREATED)
def post_hive(
        payload: HiveCreate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    """apiary_id and queen_id must be your own (422 otherwise)"""
    return create_hive(db, user, payload)


@router.get("/{hive_id}", response_model=HiveOut)
def get_hive_by_id(
        hive_id: int,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return get_hive(db, user, hive_id)


@router.patch("/{hive_id}", response_model=HiveOut)
def patch_hive(
        hive_id: int,
        payload: HiveUpdate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return update_hive(db, user, hive_id, payload)


@router.delete("/{hive_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_hive(
        hive_id: int,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    """
    Delete a hive.

    IMPORTANT: its inspections, feedings, harvests and varroa records are deleted too.
    """
    delete_hive(db, user, hive_id)
