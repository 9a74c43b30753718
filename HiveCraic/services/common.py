# services/common.py
from __future__ import annotations

import logging
from typing import Any, Mapping, TypeVar

from sqlalchemy import or_, func
from sqlalchemy.orm import Query, Session

T = TypeVar("T")

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Persistence
# -------------------------------------------------------------------
def persist(db: Session, obj: T) -> T:
    """add + commit + refresh; rolls back the session on failure."""
    try:
        db.add(obj)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(obj)
    return obj


def remove(db: Session, obj: Any) -> None:
    try:
        db.delete(obj)
        db.commit()
    except Exception:
        db.rollback()
        raise


def apply_changes(obj: T, data: Mapping[str, Any]) -> T:
    """Copy the fields sent by the client (model_dump(exclude_unset=True)) onto the row."""
    for k, v in data.items():
        setattr(obj, k, v)
    return obj


# -------------------------------------------------------------------
# Filters
# -------------------------------------------------------------------
def search_filter(q: Query, term: str | None, *columns: Any) -> Query:
    """
    Case-insensitive "contains" over one or more columns (OR).
    Empty terms leave the query untouched; % and _ in the term match literally.
    """
    if not term or not term.strip():
        return q
    escaped = term.strip().lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    pattern = f"%{escaped}%"
    return q.filter(or_(*[func.lower(c).like(pattern, escape="\\") for c in columns]))


def date_range_filter(q: Query, column: Any, start=None, end=None) -> Query:
    """Inclusive bounds; None means open."""
    if start is not None:
        q = q.filter(column >= start)
    if end is not None:
        q = q.filter(column <= end)
    return q


def without_nulls(data: Mapping[str, Any], *required: str) -> dict[str, Any]:
    """
    Drop explicit nulls sent for NOT NULL columns in a partial update,
    so they keep their current value.
    """
    return {k: v for k, v in data.items() if not (k in required and v is None)}
