from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user
from models.user import UserProfile
from enums.enums import QueenStatusEnum
from schemas.queen import QueenCreate, QueenUpdate, QueenOut
from services.queen_service import list_queens, get_queen, create_queen, update_queen, delete_queen

router = APIRouter(prefix="/queens", tags=["queens"])


@router.get("", response_model=list[QueenOut])
def get_queens(
        status_filter: QueenStatusEnum | None = Query(None, alias="status"),
        search: str | None = Query(None, max_length=100, description="Queen number or genetics"),
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    """
    Own queens, newest first.

    Each queen carries `age` and `expected_marking_color` computed from the birth date.
    """
    return list_queens(db, user, status_filter, search)


@router.post("", response_model=QueenOut, status_code=status.HTTP_201_CREATED)
def post_queen(
        payload: QueenCreate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    """Without marking_color, the colour of the birth year is stored"""
    return create_queen(db, user, payload)


@router.get("/{queen_id}", response_model=QueenOut)
def get_queen_by_id(
        queen_id: int,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return get_queen(db, user, queen_id)


@router.patch("/{queen_id}", response_model=QueenOut)
def patch_queen(
        queen_id: int,
        payload: QueenUpdate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return update_queen(db, user, queen_id, payload)


@router.delete("/{queen_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_queen(
        queen_id: int,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    delete_queen(db, user, queen_id)
