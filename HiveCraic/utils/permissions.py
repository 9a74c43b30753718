"""
Record ownership checks.

Every beekeeping record carries the user_id of its owner. A user only ever
sees and changes their own rows; admins get no extra access to other users'
records (they manage users, tickets and dropdowns instead).
"""
from typing import TypeVar

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from models.user import UserProfile

T = TypeVar("T")


def get_owned_or_404(db: Session, model: type[T], record_id: int, user: UserProfile, label: str) -> T:
    """
    Load a record by primary key and check it belongs to the user.

    A record owned by someone else answers 404 as well, so ids of other
    users' records are not disclosed.
    """
    obj = db.get(model, record_id)
    if obj is None or getattr(obj, "user_id", None) != user.user_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")
    return obj


def ensure_owned_reference(db: Session, model: type[T], record_id: int | None, user: UserProfile, label: str) -> None:
    """Validate an optional foreign key supplied by the client (hive, apiary, queen...)."""
    if record_id is None:
        return
    obj = db.get(model, record_id)
    if obj is None or getattr(obj, "user_id", None) != user.user_id:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"{label} {record_id} does not exist",
        )
