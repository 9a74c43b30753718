from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from enums.enums import InspectionPeriodEnum
from utils.db import get_db
from utils.dependencies import get_current_user
from models.user import UserProfile
from schemas.inspection import InspectionCreate, InspectionUpdate, InspectionOut, InspectionSummaryOut
from services.inspection_service import (
    list_inspections,
    inspection_summary,
    get_inspection,
    create_inspection,
    update_inspection,
    delete_inspection,
)

router = APIRouter(prefix="/inspections", tags=["inspections"])


@router.get("", response_model=list[InspectionOut])
def get_inspections(
        hive_id: int | None = Query(None, gt=0),
        period: InspectionPeriodEnum = Query(InspectionPeriodEnum.all),
        start_date: date | None = Query(None, description="Only with period=custom"),
        end_date: date | None = Query(None, description="Only with period=custom"),
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    """
    Own inspections, latest inspection date first.

    Periods: all, 3months, 6months, 1year (back from today) or custom
    (start_date / end_date, both optional and inclusive).
    """
    return list_inspections(db, user, hive_id, period, start_date, end_date)


@router.get("/summary", response_model=InspectionSummaryOut)
def get_inspection_summary(
        hive_id: int | None = Query(None, gt=0),
        period: InspectionPeriodEnum = Query(InspectionPeriodEnum.all),
        start_date: date | None = Query(None),
        end_date: date | None = Query(None),
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    """
    Averages of the inspections matching the filters: ratings, brood frames
    and the share of inspections with queen seen / eggs present.
    """
    return inspection_summary(db, user, hive_id, period, start_date, end_date)


@router.post("", response_model=InspectionOut, status_code=status.HTTP_201_CREATED)
def post_inspection(
        payload: InspectionCreate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return create_inspection(db, user, payload)


@router.get("/{inspection_id}", response_model=InspectionOut)
def get_inspection_by_id(
        inspection_id: int,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return get_inspection(db, user, inspection_id)


@router.patch("/{inspection_id}", response_model=InspectionOut)
def patch_inspection(
        inspection_id: int,
        payload: InspectionUpdate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return update_inspection(db, user, inspection_id, payload)


@router.delete("/{inspection_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_inspection(
        inspection_id: int,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    delete_inspection(db, user, inspection_id)
