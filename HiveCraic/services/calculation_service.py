"""
Calculations for beekeeping records.

Pure functions, no database access:
- varroa infestation rate and level
- queen marking colour and age
- inspection period windows and averages
"""
from datetime import date
from typing import Any, Dict, Iterable, Optional

from enums.enums import InfestationLevelEnum, InspectionPeriodEnum, MarkingColorEnum
from utils.datetime_utils import shift_months


# ==================== VARROA ====================

def calculate_infestation_rate(mites_count: Optional[int], sample_size: Optional[int]) -> Optional[float]:
    """
    Infestation rate in percent.

    Formula:
    rate = mites_count / sample_size × 100  (2 decimals)

    Returns None when a count is missing or sample_size <= 0.
    """
    if mites_count is None or sample_size is None or sample_size <= 0:
        return None
    return round(mites_count / sample_size * 100, 2)


def infestation_level(rate: Optional[float]) -> InfestationLevelEnum:
    """
    Thresholds:
    - < 1%  Low
    - < 3%  Moderate
    - < 5%  High
    - else  Critical
    """
    if rate is None:
        return InfestationLevelEnum.na
    rate = float(rate)
    if rate < 1:
        return InfestationLevelEnum.low
    if rate < 3:
        return InfestationLevelEnum.moderate
    if rate < 5:
        return InfestationLevelEnum.high
    return InfestationLevelEnum.critical


# ==================== QUEENS ====================

# International queen marking code, by last digit of the year
_MARKING_COLORS = {
    1: MarkingColorEnum.white, 6: MarkingColorEnum.white,
    2: MarkingColorEnum.yellow, 7: MarkingColorEnum.yellow,
    3: MarkingColorEnum.red, 8: MarkingColorEnum.red,
    4: MarkingColorEnum.green, 9: MarkingColorEnum.green,
    5: MarkingColorEnum.blue, 0: MarkingColorEnum.blue,
}


def marking_color_for_year(year: int) -> MarkingColorEnum:
    return _MARKING_COLORS[year % 10]


def calculate_queen_age(birth_date: Optional[date], today: date) -> Optional[Dict[str, int]]:
    """
    Age of a queen in whole years, months and days, plus total days.

    Args:
        birth_date: Birth (emergence) date, None if unknown
        today: Reference date

    Returns:
        {"years", "months", "days", "total_days"} or None without a birth date

    Raises:
        ValueError: if birth_date is after today
    """
    if birth_date is None:
        return None
    if birth_date > today:
        raise ValueError("birth_date cannot be in the future")

    months_total = (today.year - birth_date.year) * 12 + (today.month - birth_date.month)
    if today.day < birth_date.day:
        months_total -= 1
    anchor = shift_months(birth_date, months_total)
    years, months = divmod(months_total, 12)

    return {
        "years": years,
        "months": months,
        "days": (today - anchor).days,
        "total_days": (today - birth_date).days,
    }


# ==================== INSPECTIONS ====================

_PERIOD_MONTHS = {
    InspectionPeriodEnum.three_months: 3,
    InspectionPeriodEnum.six_months: 6,
    InspectionPeriodEnum.one_year: 12,
}


def period_start(
    period: InspectionPeriodEnum | str,
    today: date,
    custom_start: Optional[date] = None,
) -> Optional[date]:
    """
    First date included by an inspection period filter.

    - all: None (no lower bound)
    - 3months / 6months / 1year: today moved back by calendar months,
      clamped to the end of the target month
    - custom: custom_start as given
    """
    period = InspectionPeriodEnum(period)
    if period == InspectionPeriodEnum.all:
        return None
    if period == InspectionPeriodEnum.custom:
        return custom_start
    # 31 May - 3 months is 28/29 Feb, never rolled over into March
    return shift_months(today, -_PERIOD_MONTHS[period])


def _avg(values: list) -> Optional[float]:
    if not values:
        return None
    return round(sum(float(v) for v in values) / len(values), 2)


def _pct(flags: list) -> Optional[float]:
    if not flags:
        return None
    return round(sum(1 for f in flags if f) / len(flags) * 100, 2)


def calculate_inspection_averages(inspections: Iterable[Any]) -> Dict[str, Any]:
    """
    Averages over a set of inspections (ORM rows or any object with the
    inspection attributes). Missing ratings are ignored per metric.

    IMPORTANT: for an empty set every average is None and count is 0.
    """
    rows = list(inspections)

    def collect(attr: str) -> list:
        return [getattr(r, attr) for r in rows if getattr(r, attr, None) is not None]

    return {
        "count": len(rows),
        "avg_brood_pattern": _avg(collect("brood_pattern_rating")),
        "avg_temperament": _avg(collect("temperament_rating")),
        "avg_population_strength": _avg(collect("population_strength")),
        "avg_brood_frames": _avg(collect("brood_frames")),
        "queen_seen_pct": _pct([bool(r.queen_seen) for r in rows]),
        "eggs_present_pct": _pct([bool(r.eggs_present) for r in rows]),
    }
