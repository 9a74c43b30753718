# ============================================================================
# SERVICES: services/dashboard_service.py
# ============================================================================
from datetime import timedelta

from sqlalchemy.orm import Session, joinedload

from config.settings import settings
from enums.enums import BatchStatusEnum, QueenStatusEnum, TicketStatusEnum
from models.apiary import Apiary
from models.hive import Hive
from models.inspection import Inspection
from models.queen import Queen
from models.rearing_batch import RearingBatch
from models.support_ticket import SupportTicket
from models.user import UserProfile
from utils.datetime_utils import days_ago, now_local

ACTIVE_BATCH_STATUSES = (BatchStatusEnum.grafted.value, BatchStatusEnum.emerged.value)
RECENT_INSPECTIONS = 5


def get_dashboard_stats(db: Session, user: UserProfile) -> dict:
    """
    Home page counters for the user.

    - inspections_last_7_days counts inspection dates from today - 7 onwards
    - recent_inspections: last 5 by inspection date
    """
    uid = user.user_id

    recent = (
        db.query(Inspection)
        .options(joinedload(Inspection.hive))
        .filter(Inspection.user_id == uid)
        .order_by(Inspection.inspection_date.desc(), Inspection.inspection_id.desc())
        .limit(RECENT_INSPECTIONS)
        .all()
    )

    return {
        "role": user.role,
        "total_queens": db.query(Queen).filter(Queen.user_id == uid).count(),
        "active_queens": (
            db.query(Queen)
            .filter(Queen.user_id == uid, Queen.status == QueenStatusEnum.active.value)
            .count()
        ),
        "total_hives": db.query(Hive).filter(Hive.user_id == uid).count(),
        "active_batches": (
            db.query(RearingBatch)
            .filter(RearingBatch.user_id == uid, RearingBatch.status.in_(ACTIVE_BATCH_STATUSES))
            .count()
        ),
        "inspections_last_7_days": (
            db.query(Inspection)
            .filter(Inspection.user_id == uid, Inspection.inspection_date >= days_ago(7))
            .count()
        ),
        "recent_inspections": recent,
    }


def get_system_stats(db: Session) -> dict:
    """Totals across all users (admin)."""
    online_since = now_local() - timedelta(minutes=settings.ONLINE_WINDOW_MINUTES)
    return {
        "total_users": db.query(UserProfile).count(),
        "total_apiaries": db.query(Apiary).count(),
        "total_hives": db.query(Hive).count(),
        "total_queens": db.query(Queen).count(),
        "open_tickets": db.query(SupportTicket).filter(SupportTicket.status == TicketStatusEnum.open.value).count(),
        "online_users": (
            db.query(UserProfile)
            .filter(UserProfile.last_seen_at.is_not(None), UserProfile.last_seen_at >= online_since)
            .count()
        ),
    }
