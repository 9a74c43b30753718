from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user, require_admin
from models.user import UserProfile
from schemas.dashboard import DashboardStatsOut, SystemStatsOut
from services.dashboard_service import get_dashboard_stats, get_system_stats

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardStatsOut)
def get_dashboard(
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    """
    Home counters: queens, active queens, hives, active batches
    (grafted / emerged), inspections of the last 7 days and the 5 latest inspections.
    """
    return get_dashboard_stats(db, user)


@router.get("/system", response_model=SystemStatsOut)
def get_system_dashboard(
        db: Session = Depends(get_db),
        _: UserProfile = Depends(require_admin),
):
    """
    System totals.

    Permissions:
    - Admin only
    """
    return get_system_stats(db)
