# ============================================================================
# SERVICES: services/feeding_service.py
# ============================================================================
import logging

from sqlalchemy.orm import Session, joinedload

from models.feeding import Feeding
from models.hive import Hive
from models.user import UserProfile
from schemas.feeding import FeedingCreate, FeedingUpdate
from services.common import persist, remove, apply_changes, without_nulls
from utils.permissions import get_owned_or_404, ensure_owned_reference

logger = logging.getLogger(__name__)


def list_feedings(
    db: Session,
    user: UserProfile,
    hive_id: int | None = None,
    apiary_id: int | None = None,
) -> list[Feeding]:
    """Newest first; apiary_id filters through the hive's apiary."""
    q = (
        db.query(Feeding)
        .options(joinedload(Feeding.hive))
        .filter(Feeding.user_id == user.user_id)
    )
    if hive_id is not None:
        q = q.filter(Feeding.hive_id == hive_id)
    if apiary_id is not None:
        q = q.join(Hive, Feeding.hive_id == Hive.hive_id).filter(Hive.apiary_id == apiary_id)
    return q.order_by(Feeding.feed_date.desc(), Feeding.feeding_id.desc()).all()


def get_feeding(db: Session, user: UserProfile, feeding_id: int) -> Feeding:
    return get_owned_or_404(db, Feeding, feeding_id, user, "Feeding")


def create_feeding(db: Session, user: UserProfile, payload: FeedingCreate) -> Feeding:
    ensure_owned_reference(db, Hive, payload.hive_id, user, "Hive")
    feeding = persist(db, Feeding(user_id=user.user_id, **payload.model_dump()))
    logger.info("User %s created feeding %s", user.user_id, feeding.feeding_id)
    return feeding


def update_feeding(db: Session, user: UserProfile, feeding_id: int, payload: FeedingUpdate) -> Feeding:
    feeding = get_feeding(db, user, feeding_id)
    data = without_nulls(payload.model_dump(exclude_unset=True), "hive_id", "feed_date", "feed_type", "unit")
    ensure_owned_reference(db, Hive, data.get("hive_id"), user, "Hive")
    apply_changes(feeding, data)
    return persist(db, feeding)


def delete_feeding(db: Session, user: UserProfile, feeding_id: int) -> None:
    feeding = get_feeding(db, user, feeding_id)
    remove(db, feeding)
    logger.info("User %s deleted feeding %s", user.user_id, feeding_id)
