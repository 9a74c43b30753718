import logging

from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from enums.roles import Role
from models.user import UserProfile
from schemas.user import UserUpdate, ChangePasswordIn
from services.common import persist, search_filter
from utils.security import hash_password, verify_password

logger = logging.getLogger(__name__)


def list_users(
        db: Session,
        search: str | None = None,
        role: str | None = None,
        status_filter: str | None = None,
) -> list[UserProfile]:
    """
    List users with optional filters (admin).

    Args:
        search: matches email or full name
        role: User / Admin
        status_filter: a / i
    """
    q = db.query(UserProfile)
    if role:
        q = q.filter(UserProfile.role == role)
    if status_filter:
        q = q.filter(UserProfile.status == status_filter)
    q = search_filter(q, search, UserProfile.email, UserProfile.full_name)
    return q.order_by(UserProfile.email.asc()).all()


def get_user(db: Session, user_id: int) -> UserProfile:
    user = db.get(UserProfile, user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


def update_profile(db: Session, user: UserProfile, payload: UserUpdate) -> UserProfile:
    data = payload.model_dump(exclude_unset=True)

    if data.get("email"):
        email = data["email"].lower()
        taken = (
            db.query(UserProfile)
            .filter(UserProfile.email == email, UserProfile.user_id != user.user_id)
            .first()
        )
        if taken:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")
        user.email = email

    if "full_name" in data:
        user.full_name = (data["full_name"] or "").strip() or None

    return persist(db, user)


def change_password(db: Session, user: UserProfile, payload: ChangePasswordIn) -> None:
    if not verify_password(payload.current_password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Current password is incorrect")
    user.password_hash = hash_password(payload.new_password)
    persist(db, user)
    logger.info("User %s changed password", user.user_id)


def set_role(db: Session, acting_admin: UserProfile, user_id: int, role: str) -> UserProfile:
    """
    Change the role of a user.

    Raises:
        HTTPException 400: an admin trying to demote themselves
    """
    user = get_user(db, user_id)
    if user.user_id == acting_admin.user_id and role != Role.admin.value:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="You cannot remove your own admin role")
    user.role = role
    persist(db, user)
    logger.info("Admin %s set role of user %s to %s", acting_admin.user_id, user.user_id, role)
    return user


def deactivate_user(db: Session, acting_admin: UserProfile, user_id: int) -> UserProfile:
    user = get_user(db, user_id)
    if user.user_id == acting_admin.user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="You cannot deactivate yourself")
    user.status = "i"
    persist(db, user)
    logger.info("Admin %s deactivated user %s", acting_admin.user_id, user.user_id)
    return user


def reactivate_user(db: Session, acting_admin: UserProfile, user_id: int) -> UserProfile:
    user = get_user(db, user_id)
    user.status = "a"
    persist(db, user)
    logger.info("Admin %s reactivated user %s", acting_admin.user_id, user.user_id)
    return user
