# ============================================================================
# SERVICES: services/varroa_service.py
# ============================================================================
"""
Varroa checks and treatments.

The infestation rate of a check is never taken from the client: it is
recalculated from mites_count / sample_size on every create and update.
"""
import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session, joinedload

from models.hive import Hive
from models.user import UserProfile
from models.varroa import VarroaCheck, VarroaTreatment
from schemas.varroa import (
    VarroaCheckCreate,
    VarroaCheckUpdate,
    VarroaTreatmentCreate,
    VarroaTreatmentUpdate,
)
from services.calculation_service import calculate_infestation_rate
from services.common import persist, remove, apply_changes, without_nulls
from services.dropdown_service import list_active_values
from utils.permissions import get_owned_or_404, ensure_owned_reference

logger = logging.getLogger(__name__)

TREATMENT_PRODUCT_CATEGORY = "varroa_treatment_product"


# ==================== CHECKS ====================

def list_checks(db: Session, user: UserProfile, hive_id: int | None = None) -> list[VarroaCheck]:
    q = (
        db.query(VarroaCheck)
        .options(joinedload(VarroaCheck.hive))
        .filter(VarroaCheck.user_id == user.user_id)
    )
    if hive_id is not None:
        q = q.filter(VarroaCheck.hive_id == hive_id)
    return q.order_by(VarroaCheck.check_date.desc(), VarroaCheck.varroa_check_id.desc()).all()


def get_check(db: Session, user: UserProfile, check_id: int) -> VarroaCheck:
    return get_owned_or_404(db, VarroaCheck, check_id, user, "Varroa check")


def create_check(db: Session, user: UserProfile, payload: VarroaCheckCreate) -> VarroaCheck:
    ensure_owned_reference(db, Hive, payload.hive_id, user, "Hive")
    check = VarroaCheck(user_id=user.user_id, **payload.model_dump())
    check.infestation_rate = calculate_infestation_rate(check.mites_count, check.sample_size)
    check = persist(db, check)
    logger.info(
        "User %s created varroa check %s (rate=%s)",
        user.user_id, check.varroa_check_id, check.infestation_rate,
    )
    return check


def update_check(db: Session, user: UserProfile, check_id: int, payload: VarroaCheckUpdate) -> VarroaCheck:
    """
    Raises:
        HTTPException 422: mites_count ends up above a positive sample_size
    """
    check = get_check(db, user, check_id)
    data = without_nulls(
        payload.model_dump(exclude_unset=True),
        "hive_id", "check_date", "method", "action_threshold_reached",
    )
    ensure_owned_reference(db, Hive, data.get("hive_id"), user, "Hive")
    apply_changes(check, data)
    if check.sample_size and check.mites_count is not None and check.mites_count > check.sample_size:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="mites_count cannot exceed sample_size",
        )
    check.infestation_rate = calculate_infestation_rate(check.mites_count, check.sample_size)
    return persist(db, check)


def delete_check(db: Session, user: UserProfile, check_id: int) -> None:
    check = get_check(db, user, check_id)
    remove(db, check)
    logger.info("User %s deleted varroa check %s", user.user_id, check_id)


# ==================== TREATMENTS ====================

def list_treatments(db: Session, user: UserProfile, hive_id: int | None = None) -> list[VarroaTreatment]:
    q = (
        db.query(VarroaTreatment)
        .options(joinedload(VarroaTreatment.hive))
        .filter(VarroaTreatment.user_id == user.user_id)
    )
    if hive_id is not None:
        q = q.filter(VarroaTreatment.hive_id == hive_id)
    return q.order_by(VarroaTreatment.treatment_date.desc(), VarroaTreatment.varroa_treatment_id.desc()).all()


def get_treatment(db: Session, user: UserProfile, treatment_id: int) -> VarroaTreatment:
    return get_owned_or_404(db, VarroaTreatment, treatment_id, user, "Varroa treatment")


def create_treatment(db: Session, user: UserProfile, payload: VarroaTreatmentCreate) -> VarroaTreatment:
    ensure_owned_reference(db, Hive, payload.hive_id, user, "Hive")
    treatment = persist(db, VarroaTreatment(user_id=user.user_id, **payload.model_dump()))
    logger.info("User %s created varroa treatment %s", user.user_id, treatment.varroa_treatment_id)
    return treatment


def update_treatment(
    db: Session, user: UserProfile, treatment_id: int, payload: VarroaTreatmentUpdate
) -> VarroaTreatment:
    treatment = get_treatment(db, user, treatment_id)
    data = without_nulls(payload.model_dump(exclude_unset=True), "hive_id", "treatment_date", "treatment_type")
    ensure_owned_reference(db, Hive, data.get("hive_id"), user, "Hive")
    apply_changes(treatment, data)
    return persist(db, treatment)


def delete_treatment(db: Session, user: UserProfile, treatment_id: int) -> None:
    treatment = get_treatment(db, user, treatment_id)
    remove(db, treatment)
    logger.info("User %s deleted varroa treatment %s", user.user_id, treatment_id)


def list_treatment_products(db: Session) -> list[str]:
    """Product names offered in the treatment form (active dropdown values)."""
    return [v.value for v in list_active_values(db, TREATMENT_PRODUCT_CATEGORY)]
