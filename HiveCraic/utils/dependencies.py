from datetime import timedelta

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.security import oauth2_scheme, user_id_from_token
from utils.datetime_utils import now_local
from models.user import UserProfile

# last_seen_at is written at most once per window
LAST_SEEN_THROTTLE = timedelta(minutes=1)


def get_current_user(db: Session = Depends(get_db), token: str = Depends(oauth2_scheme)) -> UserProfile:
    user_id = user_id_from_token(token)
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token")
    user = db.get(UserProfile, user_id)
    if not user or user.status != "a":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found or inactive")

    now = now_local()
    if user.last_seen_at is None or now - user.last_seen_at >= LAST_SEEN_THROTTLE:
        user.last_seen_at = now
        db.add(user)
        db.commit()
        db.refresh(user)
    return user


def require_admin(current_user: UserProfile = Depends(get_current_user)) -> UserProfile:
    if not current_user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin role required")
    return current_user
