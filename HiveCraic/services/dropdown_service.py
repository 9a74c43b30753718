# ============================================================================
# SERVICES: services/dropdown_service.py
# ============================================================================
"""
Dropdown categories and values (form options shared by every user).
Writes are admin only; the router enforces the role.
"""
import logging

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from models.dropdown import DropdownCategory, DropdownValue
from schemas.dropdown import (
    DropdownCategoryCreate,
    DropdownCategoryUpdate,
    DropdownValueCreate,
    DropdownValueUpdate,
)
from services.common import persist, remove, apply_changes, without_nulls

logger = logging.getLogger(__name__)


# ==================== CATEGORIES ====================

def list_categories(db: Session) -> list[DropdownCategory]:
    """Categories by name, each with its values sorted by display_order."""
    return (
        db.query(DropdownCategory)
        .options(selectinload(DropdownCategory.values))
        .order_by(DropdownCategory.category_name.asc())
        .all()
    )


def get_category(db: Session, category_id: int) -> DropdownCategory:
    category = db.get(DropdownCategory, category_id)
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category


def _ensure_key_free(db: Session, category_key: str, exclude_id: int | None = None) -> None:
    q = db.query(DropdownCategory).filter(DropdownCategory.category_key == category_key)
    if exclude_id is not None:
        q = q.filter(DropdownCategory.category_id != exclude_id)
    if q.first():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Category key '{category_key}' already exists",
        )


def create_category(db: Session, payload: DropdownCategoryCreate) -> DropdownCategory:
    _ensure_key_free(db, payload.category_key)
    category = persist(db, DropdownCategory(**payload.model_dump()))
    logger.info("Created dropdown category %s", category.category_key)
    return category


def update_category(db: Session, category_id: int, payload: DropdownCategoryUpdate) -> DropdownCategory:
    category = get_category(db, category_id)
    data = without_nulls(payload.model_dump(exclude_unset=True), "category_name", "category_key")
    if "category_key" in data:
        _ensure_key_free(db, data["category_key"], exclude_id=category_id)
    apply_changes(category, data)
    return persist(db, category)


def delete_category(db: Session, category_id: int) -> None:
    """Deletes the category together with its values."""
    category = get_category(db, category_id)
    remove(db, category)
    logger.info("Deleted dropdown category %s", category_id)


# ==================== VALUES ====================

def list_active_values(db: Session, category_key: str) -> list[DropdownValue]:
    """Active values of a category; empty when the category does not exist."""
    return (
        db.query(DropdownValue)
        .join(DropdownCategory, DropdownValue.category_id == DropdownCategory.category_id)
        .filter(DropdownCategory.category_key == category_key, DropdownValue.is_active.is_(True))
        .order_by(DropdownValue.display_order.asc(), DropdownValue.value_id.asc())
        .all()
    )


def get_value(db: Session, value_id: int) -> DropdownValue:
    value = db.get(DropdownValue, value_id)
    if not value:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Value not found")
    return value


def _next_display_order(db: Session, category_id: int) -> int:
    current_max = (
        db.query(func.coalesce(func.max(DropdownValue.display_order), 0))
        .filter(DropdownValue.category_id == category_id)
        .scalar()
    )
    return int(current_max) + 1


def create_value(db: Session, category_id: int, payload: DropdownValueCreate) -> DropdownValue:
    get_category(db, category_id)
    display_order = payload.display_order
    if display_order is None:
        display_order = _next_display_order(db, category_id)
    value = DropdownValue(
        category_id=category_id,
        value=payload.value.strip(),
        display_order=display_order,
        is_active=payload.is_active,
    )
    return persist(db, value)


def update_value(db: Session, value_id: int, payload: DropdownValueUpdate) -> DropdownValue:
    value = get_value(db, value_id)
    apply_changes(value, without_nulls(payload.model_dump(exclude_unset=True), "value", "display_order", "is_active"))
    return persist(db, value)


def toggle_value(db: Session, value_id: int) -> DropdownValue:
    value = get_value(db, value_id)
    value.is_active = not value.is_active
    return persist(db, value)


def delete_value(db: Session, value_id: int) -> None:
    remove(db, get_value(db, value_id))
