# ============================================================================
# SERVICES: services/batch_service.py
# ============================================================================
import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session, joinedload

from models.queen import Queen
from models.rearing_batch import RearingBatch
from models.user import UserProfile
from schemas.batch import BatchCreate, BatchUpdate
from services.common import persist, remove, apply_changes, without_nulls
from utils.permissions import get_owned_or_404, ensure_owned_reference

logger = logging.getLogger(__name__)


def list_batches(db: Session, user: UserProfile, status_filter: str | None = None) -> list[RearingBatch]:
    """Most recent graft first."""
    q = (
        db.query(RearingBatch)
        .options(joinedload(RearingBatch.mother_queen))
        .filter(RearingBatch.user_id == user.user_id)
    )
    if status_filter:
        q = q.filter(RearingBatch.status == status_filter)
    return q.order_by(RearingBatch.graft_date.desc(), RearingBatch.batch_id.desc()).all()


def get_batch(db: Session, user: UserProfile, batch_id: int) -> RearingBatch:
    return get_owned_or_404(db, RearingBatch, batch_id, user, "Batch")


def create_batch(db: Session, user: UserProfile, payload: BatchCreate) -> RearingBatch:
    ensure_owned_reference(db, Queen, payload.mother_queen_id, user, "Queen")
    batch = persist(db, RearingBatch(user_id=user.user_id, **payload.model_dump()))
    logger.info("User %s created batch %s", user.user_id, batch.batch_id)
    return batch


def update_batch(db: Session, user: UserProfile, batch_id: int, payload: BatchUpdate) -> RearingBatch:
    """
    Raises:
        HTTPException 422: emergence_date ends up before graft_date
    """
    batch = get_batch(db, user, batch_id)
    data = without_nulls(payload.model_dump(exclude_unset=True), "batch_name", "graft_date", "status")
    ensure_owned_reference(db, Queen, data.get("mother_queen_id"), user, "Queen")
    apply_changes(batch, data)
    if batch.emergence_date and batch.emergence_date < batch.graft_date:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="emergence_date cannot be before graft_date",
        )
    return persist(db, batch)


def delete_batch(db: Session, user: UserProfile, batch_id: int) -> None:
    batch = get_batch(db, user, batch_id)
    remove(db, batch)
    logger.info("User %s deleted batch %s", user.user_id, batch_id)
