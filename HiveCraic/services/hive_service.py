# ============================================================================
# SERVICES: services/hive_service.py
# ============================================================================
import logging

from sqlalchemy.orm import Session, joinedload

from models.apiary import Apiary
from models.hive import Hive
from models.queen import Queen
from models.user import UserProfile
from schemas.hive import HiveCreate, HiveUpdate
from services.common import persist, remove, apply_changes, without_nulls
from utils.permissions import get_owned_or_404, ensure_owned_reference

logger = logging.getLogger(__name__)


def list_hives(
    db: Session,
    user: UserProfile,
    status_filter: str | None = None,
    apiary_id: int | None = None,
) -> list[Hive]:
    """
    Hives of the user ordered by hive number.

    Each row exposes apiary_name and queen_number.
    """
    q = (
        db.query(Hive)
        .options(joinedload(Hive.apiary), joinedload(Hive.queen))
        .filter(Hive.user_id == user.user_id)
    )
    if status_filter:
        q = q.filter(Hive.status == status_filter)
    if apiary_id is not None:
        q = q.filter(Hive.apiary_id == apiary_id)
    return q.order_by(Hive.hive_number.asc()).all()


def get_hive(db: Session, user: UserProfile, hive_id: int) -> Hive:
    return get_owned_or_404(db, Hive, hive_id, user, "Hive")


def _check_references(db: Session, user: UserProfile, data: dict) -> None:
    ensure_owned_reference(db, Apiary, data.get("apiary_id"), user, "Apiary")
    ensure_owned_reference(db, Queen, data.get("queen_id"), user, "Queen")


def create_hive(db: Session, user: UserProfile, payload: HiveCreate) -> Hive:
    data = payload.model_dump()
    _check_references(db, user, data)
    hive = persist(db, Hive(user_id=user.user_id, **data))
    logger.info("User %s created hive %s", user.user_id, hive.hive_id)
    return hive


def update_hive(db: Session, user: UserProfile, hive_id: int, payload: HiveUpdate) -> Hive:
    hive = get_hive(db, user, hive_id)
    data = without_nulls(
        payload.model_dump(exclude_unset=True),
        "hive_number", "queen_marked", "queen_mated", "queen_clipped", "status",
    )
    _check_references(db, user, data)
    apply_changes(hive, data)
    return persist(db, hive)


def delete_hive(db: Session, user: UserProfile, hive_id: int) -> None:
    """
    IMPORTANT: inspections, feedings, harvests and varroa records of the
    hive are deleted with it.
    """
    hive = get_hive(db, user, hive_id)
    remove(db, hive)
    logger.info("User %s deleted hive %s", user.user_id, hive_id)
