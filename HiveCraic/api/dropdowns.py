from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user, require_admin
from models.user import UserProfile
from schemas.dropdown import (
    DropdownCategoryCreate,
    DropdownCategoryUpdate,
    DropdownCategoryOut,
    DropdownValueCreate,
    DropdownValueUpdate,
    DropdownValueOut,
)
from services import dropdown_service

router = APIRouter(prefix="/dropdowns", tags=["settings"])


# ============================================================================
# Read (any user)
# ============================================================================

@router.get("", response_model=list[DropdownCategoryOut])
def get_categories(
        db: Session = Depends(get_db),
        _: UserProfile = Depends(get_current_user),
):
    """Categories with all their values (active and inactive) by display order"""
    return dropdown_service.list_categories(db)


@router.get("/{category_key}/values", response_model=list[DropdownValueOut])
def get_active_values(
        category_key: str,
        db: Session = Depends(get_db),
        _: UserProfile = Depends(get_current_user),
):
    """Active values of a category, for form selects"""
    return dropdown_service.list_active_values(db, category_key)


# ============================================================================
# Write (admin)
# ============================================================================

@router.post("/categories", response_model=DropdownCategoryOut, status_code=status.HTTP_201_CREATED)
def post_category(
        payload: DropdownCategoryCreate,
        db: Session = Depends(get_db),
        _: UserProfile = Depends(require_admin),
):
    """category_key must be unique (409)"""
    return dropdown_service.create_category(db, payload)


@router.patch("/categories/{category_id}", response_model=DropdownCategoryOut)
def patch_category(
        category_id: int,
        payload: DropdownCategoryUpdate,
        db: Session = Depends(get_db),
        _: UserProfile = Depends(require_admin),
):
    return dropdown_service.update_category(db, category_id, payload)


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_category(
        category_id: int,
        db: Session = Depends(get_db),
        _: UserProfile = Depends(require_admin),
):
    """Deletes the category and all of its values"""
    dropdown_service.delete_category(db, category_id)


@router.post("/categories/{category_id}/values", response_model=DropdownValueOut, status_code=status.HTTP_201_CREATED)
def post_value(
        category_id: int,
        payload: DropdownValueCreate,
        db: Session = Depends(get_db),
        _: UserProfile = Depends(require_admin),
):
    """Without display_order the value goes to the end of the list"""
    return dropdown_service.create_value(db, category_id, payload)


@router.patch("/values/{value_id}", response_model=DropdownValueOut)
def patch_value(
        value_id: int,
        payload: DropdownValueUpdate,
        db: Session = Depends(get_db),
        _: UserProfile = Depends(require_admin),
):
    return dropdown_service.update_value(db, value_id, payload)


@router.post("/values/{value_id}/toggle", response_model=DropdownValueOut)
def post_toggle_value(
        value_id: int,
        db: Session = Depends(get_db),
        _: UserProfile = Depends(require_admin),
):
    """Activate / deactivate a value"""
    return dropdown_service.toggle_value(db, value_id)


@router.delete("/values/{value_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_value(
        value_id: int,
        db: Session = Depends(get_db),
        _: UserProfile = Depends(require_admin),
):
    dropdown_service.delete_value(db, value_id)
