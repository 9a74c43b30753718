# ============================================================================
# SERVICES: services/queen_service.py
# ============================================================================
import logging

from sqlalchemy.orm import Session

from models.queen import Queen
from models.user import UserProfile
from schemas.queen import QueenCreate, QueenUpdate
from services.calculation_service import marking_color_for_year
from services.common import persist, remove, apply_changes, search_filter, without_nulls
from utils.permissions import get_owned_or_404

logger = logging.getLogger(__name__)


def list_queens(
    db: Session,
    user: UserProfile,
    status_filter: str | None = None,
    search: str | None = None,
) -> list[Queen]:
    """Newest first. `search` matches queen number or genetics."""
    q = db.query(Queen).filter(Queen.user_id == user.user_id)
    if status_filter:
        q = q.filter(Queen.status == status_filter)
    q = search_filter(q, search, Queen.queen_number, Queen.genetics)
    return q.order_by(Queen.created_at.desc(), Queen.queen_id.desc()).all()


def get_queen(db: Session, user: UserProfile, queen_id: int) -> Queen:
    return get_owned_or_404(db, Queen, queen_id, user, "Queen")


def create_queen(db: Session, user: UserProfile, payload: QueenCreate) -> Queen:
    """
    Create a queen. With a birth date and no marking colour, the
    international colour for the birth year is stored.
    """
    data = payload.model_dump()
    if data.get("birth_date") and not data.get("marking_color"):
        data["marking_color"] = marking_color_for_year(data["birth_date"].year).value
    queen = persist(db, Queen(user_id=user.user_id, **data))
    logger.info("User %s created queen %s", user.user_id, queen.queen_id)
    return queen


def update_queen(db: Session, user: UserProfile, queen_id: int, payload: QueenUpdate) -> Queen:
    queen = get_queen(db, user, queen_id)
    apply_changes(queen, without_nulls(payload.model_dump(exclude_unset=True), "queen_number", "source", "status"))
    return persist(db, queen)


def delete_queen(db: Session, user: UserProfile, queen_id: int) -> None:
    """Hives and batches pointing at the queen are detached, not deleted."""
    queen = get_queen(db, user, queen_id)
    remove(db, queen)
    logger.info("User %s deleted queen %s", user.user_id, queen_id)
