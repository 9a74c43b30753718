from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user
from models.user import UserProfile
from schemas.apiary import ApiaryCreate, ApiaryUpdate, ApiaryOut
from services.apiary_service import (
    list_apiaries,
    get_apiary,
    create_apiary,
    update_apiary,
    delete_apiary,
)

router = APIRouter(prefix="/apiaries", tags=["apiaries"])


@router.get("", response_model=list[ApiaryOut])
def get_apiaries(
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    """Own apiaries ordered by name"""
    return list_apiaries(db, user)


@router.post("", response_model=ApiaryOut, status_code=status.HTTP_201_CREATED)
def post_apiary(
        payload: ApiaryCreate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return create_apiary(db, user, payload)


@router.get("/{apiary_id}", response_model=ApiaryOut)
def get_apiary_by_id(
        apiary_id: int,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return get_apiary(db, user, apiary_id)


@router.patch("/{apiary_id}", response_model=ApiaryOut)
def patch_apiary(
        apiary_id: int,
        payload: ApiaryUpdate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return update_apiary(db, user, apiary_id, payload)


@router.delete("/{apiary_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_apiary(
        apiary_id: int,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    """
    Delete an apiary.

    Hives in it are kept and left without apiary.
    """
    delete_apiary(db, user, apiary_id)
