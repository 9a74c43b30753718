from datetime import date
from pydantic import BaseModel


class RecentInspectionOut(BaseModel):
    inspection_id: int
    hive_id: int
    hive_number: str | None = None
    inspection_date: date
    queen_seen: bool
    eggs_present: bool

    class Config:
        from_attributes = True


class DashboardStatsOut(BaseModel):
    role: str
    total_queens: int
    active_queens: int
    total_hives: int
    active_batches: int
    inspections_last_7_days: int
    recent_inspections: list[RecentInspectionOut]


class SystemStatsOut(BaseModel):
    """Admin-only totals across all users"""
    total_users: int
    total_apiaries: int
    total_hives: int
    total_queens: int
    open_tickets: int
    online_users: int
