from fastapi import APIRouter, Depends, Query, status as http_status
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user, require_admin
from models.user import UserProfile
from enums.enums import UserStatusEnum
from enums.roles import Role
from schemas.common import Msg
from schemas.user import UserOut, UserAdminOut, UserUpdate, ChangePasswordIn, SetRoleIn
from services.user_service import (
    list_users,
    update_profile,
    change_password,
    set_role,
    deactivate_user,
    reactivate_user,
)

router = APIRouter(prefix="/users", tags=["users"])


# ============================================================================
# Own profile
# ============================================================================

@router.get("/me", response_model=UserOut)
def get_profile(user: UserProfile = Depends(get_current_user)):
    """Own profile"""
    return user


@router.patch("/me", response_model=UserOut)
def patch_profile(
        payload: UserUpdate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    """Edit own full name / email (409 if the email is taken)"""
    return update_profile(db, user, payload)


@router.post("/me/password", response_model=Msg)
def post_change_password(
        payload: ChangePasswordIn,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    """Change own password (current password required)"""
    change_password(db, user, payload)
    return {"detail": "Password updated"}


# ============================================================================
# Admin
# ============================================================================

@router.get("", response_model=list[UserAdminOut])
def get_users(
        search: str | None = Query(None, description="Search by email or full name"),
        role: Role | None = Query(None),
        status: UserStatusEnum | None = Query(None, description="Filter by status (a/i)"),
        db: Session = Depends(get_db),
        _: UserProfile = Depends(require_admin),
):
    """
    List users.

    Permissions:
    - Admin only
    """
    return list_users(db, search, role, status)


@router.put("/{user_id}/role", response_model=UserAdminOut)
def put_user_role(
        user_id: int,
        payload: SetRoleIn,
        db: Session = Depends(get_db),
        admin: UserProfile = Depends(require_admin),
):
    """
    Change a user's role.

    Permissions:
    - Admin only; an admin cannot remove their own Admin role
    """
    return set_role(db, admin, user_id, payload.role)


@router.post("/{user_id}/deactivate", response_model=UserAdminOut, status_code=http_status.HTTP_200_OK)
def post_deactivate_user(
        user_id: int,
        db: Session = Depends(get_db),
        admin: UserProfile = Depends(require_admin),
):
    """Deactivate an account (not your own). The user can no longer log in."""
    return deactivate_user(db, admin, user_id)


@router.post("/{user_id}/reactivate", response_model=UserAdminOut)
def post_reactivate_user(
        user_id: int,
        db: Session = Depends(get_db),
        admin: UserProfile = Depends(require_admin),
):
    """Reactivate an account"""
    return reactivate_user(db, admin, user_id)
