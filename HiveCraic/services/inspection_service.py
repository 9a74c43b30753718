# ============================================================================
# SERVICES: services/inspection_service.py
# ============================================================================
import logging
from datetime import date

from fastapi import HTTPException, status
from sqlalchemy.orm import Session, Query, joinedload

from enums.enums import InspectionPeriodEnum
from models.hive import Hive
from models.inspection import Inspection
from models.user import UserProfile
from schemas.inspection import InspectionCreate, InspectionUpdate
from services.calculation_service import period_start, calculate_inspection_averages
from services.common import persist, remove, apply_changes, date_range_filter, without_nulls
from utils.datetime_utils import today_local
from utils.permissions import get_owned_or_404, ensure_owned_reference

logger = logging.getLogger(__name__)


def _resolve_period(
    period: InspectionPeriodEnum,
    start_date: date | None,
    end_date: date | None,
) -> tuple[date | None, date | None]:
    """
    Date window of a period filter.

    Only `custom` uses end_date; the fixed periods run up to today.
    """
    if period == InspectionPeriodEnum.custom:
        if start_date and end_date and start_date > end_date:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="start_date cannot be after end_date",
            )
        return start_date, end_date
    return period_start(period, today_local()), None


def _filtered_query(
    db: Session,
    user: UserProfile,
    hive_id: int | None,
    start: date | None,
    end: date | None,
) -> Query:
    q = db.query(Inspection).filter(Inspection.user_id == user.user_id)
    if hive_id is not None:
        q = q.filter(Inspection.hive_id == hive_id)
    return date_range_filter(q, Inspection.inspection_date, start, end)


def list_inspections(
    db: Session,
    user: UserProfile,
    hive_id: int | None = None,
    period: InspectionPeriodEnum = InspectionPeriodEnum.all,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[Inspection]:
    start, end = _resolve_period(period, start_date, end_date)
    return (
        _filtered_query(db, user, hive_id, start, end)
        .options(joinedload(Inspection.hive))
        .order_by(Inspection.inspection_date.desc(), Inspection.inspection_id.desc())
        .all()
    )


def inspection_summary(
    db: Session,
    user: UserProfile,
    hive_id: int | None = None,
    period: InspectionPeriodEnum = InspectionPeriodEnum.all,
    start_date: date | None = None,
    end_date: date | None = None,
) -> dict:
    """
    Averages for the same filters as the list.

    Returns:
        dict with the filter echo plus the averages of calculate_inspection_averages
    """
    start, end = _resolve_period(period, start_date, end_date)
    rows = _filtered_query(db, user, hive_id, start, end).all()
    return {
        "period": period.value,
        "start_date": start,
        "end_date": end,
        "hive_id": hive_id,
        **calculate_inspection_averages(rows),
    }


def get_inspection(db: Session, user: UserProfile, inspection_id: int) -> Inspection:
    return get_owned_or_404(db, Inspection, inspection_id, user, "Inspection")


def create_inspection(db: Session, user: UserProfile, payload: InspectionCreate) -> Inspection:
    ensure_owned_reference(db, Hive, payload.hive_id, user, "Hive")
    inspection = persist(db, Inspection(user_id=user.user_id, **payload.model_dump()))
    logger.info("User %s created inspection %s for hive %s", user.user_id, inspection.inspection_id, inspection.hive_id)
    return inspection


def update_inspection(db: Session, user: UserProfile, inspection_id: int, payload: InspectionUpdate) -> Inspection:
    inspection = get_inspection(db, user, inspection_id)
    data = without_nulls(
        payload.model_dump(exclude_unset=True),
        "hive_id", "inspection_date", "queen_seen", "eggs_present",
        "brood_pattern_rating", "temperament_rating", "population_strength",
    )
    ensure_owned_reference(db, Hive, data.get("hive_id"), user, "Hive")
    apply_changes(inspection, data)
    return persist(db, inspection)


def delete_inspection(db: Session, user: UserProfile, inspection_id: int) -> None:
    inspection = get_inspection(db, user, inspection_id)
    remove(db, inspection)
    logger.info("User %s deleted inspection %s", user.user_id, inspection_id)
