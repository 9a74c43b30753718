from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user
from models.user import UserProfile
from schemas.harvest import HarvestCreate, HarvestUpdate, HarvestOut
from services.harvest_service import list_harvests, get_harvest, create_harvest, update_harvest, delete_harvest

router = APIRouter(prefix="/harvests", tags=["harvests"])


@router.get("", response_model=list[HarvestOut])
def get_harvests(
        hive_id: int | None = Query(None, gt=0),
        apiary_id: int | None = Query(None, gt=0),
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    """Own harvests, newest first"""
    return list_harvests(db, user, hive_id, apiary_id)


@router.post("", response_model=HarvestOut, status_code=status.HTTP_201_CREATED)
def post_harvest(
        payload: HarvestCreate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return create_harvest(db, user, payload)


@router.get("/{harvest_id}", response_model=HarvestOut)
def get_harvest_by_id(
        harvest_id: int,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return get_harvest(db, user, harvest_id)


@router.patch("/{harvest_id}", response_model=HarvestOut)
def patch_harvest(
        harvest_id: int,
        payload: HarvestUpdate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return update_harvest(db, user, harvest_id, payload)


@router.delete("/{harvest_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_harvest(
        harvest_id: int,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    delete_harvest(db, user, harvest_id)
