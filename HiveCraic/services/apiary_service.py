# ============================================================================
# SERVICES: services/apiary_service.py
# ============================================================================
import logging

from sqlalchemy.orm import Session

from models.apiary import Apiary
from models.user import UserProfile
from schemas.apiary import ApiaryCreate, ApiaryUpdate
from services.common import persist, remove, apply_changes, without_nulls
from utils.permissions import get_owned_or_404

logger = logging.getLogger(__name__)


def list_apiaries(db: Session, user: UserProfile) -> list[Apiary]:
    return (
        db.query(Apiary)
        .filter(Apiary.user_id == user.user_id)
        .order_by(Apiary.name.asc())
        .all()
    )


def get_apiary(db: Session, user: UserProfile, apiary_id: int) -> Apiary:
    return get_owned_or_404(db, Apiary, apiary_id, user, "Apiary")


def create_apiary(db: Session, user: UserProfile, payload: ApiaryCreate) -> Apiary:
    apiary = persist(db, Apiary(user_id=user.user_id, **payload.model_dump()))
    logger.info("User %s created apiary %s", user.user_id, apiary.apiary_id)
    return apiary


def update_apiary(db: Session, user: UserProfile, apiary_id: int, payload: ApiaryUpdate) -> Apiary:
    apiary = get_apiary(db, user, apiary_id)
    apply_changes(apiary, without_nulls(payload.model_dump(exclude_unset=True), "name"))
    return persist(db, apiary)


def delete_apiary(db: Session, user: UserProfile, apiary_id: int) -> None:
    """Hives of the apiary are kept, without apiary."""
    apiary = get_apiary(db, user, apiary_id)
    remove(db, apiary)
    logger.info("User %s deleted apiary %s", user.user_id, apiary_id)
