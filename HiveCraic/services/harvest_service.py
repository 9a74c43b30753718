# ============================================================================
# SERVICES: services/harvest_service.py
# ============================================================================
import logging

from sqlalchemy.orm import Session, joinedload

from models.harvest import Harvest
from models.hive import Hive
from models.user import UserProfile
from schemas.harvest import HarvestCreate, HarvestUpdate
from services.common import persist, remove, apply_changes, without_nulls
from utils.permissions import get_owned_or_404, ensure_owned_reference

logger = logging.getLogger(__name__)


def list_harvests(
    db: Session,
    user: UserProfile,
    hive_id: int | None = None,
    apiary_id: int | None = None,
) -> list[Harvest]:
    q = (
        db.query(Harvest)
        .options(joinedload(Harvest.hive))
        .filter(Harvest.user_id == user.user_id)
    )
    if hive_id is not None:
        q = q.filter(Harvest.hive_id == hive_id)
    if apiary_id is not None:
        q = q.join(Hive, Harvest.hive_id == Hive.hive_id).filter(Hive.apiary_id == apiary_id)
    return q.order_by(Harvest.harvest_date.desc(), Harvest.harvest_id.desc()).all()


def get_harvest(db: Session, user: UserProfile, harvest_id: int) -> Harvest:
    return get_owned_or_404(db, Harvest, harvest_id, user, "Harvest")


def create_harvest(db: Session, user: UserProfile, payload: HarvestCreate) -> Harvest:
    ensure_owned_reference(db, Hive, payload.hive_id, user, "Hive")
    harvest = persist(db, Harvest(user_id=user.user_id, **payload.model_dump()))
    logger.info("User %s created harvest %s", user.user_id, harvest.harvest_id)
    return harvest


def update_harvest(db: Session, user: UserProfile, harvest_id: int, payload: HarvestUpdate) -> Harvest:
    harvest = get_harvest(db, user, harvest_id)
    data = without_nulls(payload.model_dump(exclude_unset=True), "hive_id", "harvest_date", "unit")
    ensure_owned_reference(db, Hive, data.get("hive_id"), user, "Hive")
    apply_changes(harvest, data)
    return persist(db, harvest)


def delete_harvest(db: Session, user: UserProfile, harvest_id: int) -> None:
    harvest = get_harvest(db, user, harvest_id)
    remove(db, harvest)
    logger.info("User %s deleted harvest %s", user.user_id, harvest_id)
