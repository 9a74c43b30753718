from datetime import date, datetime

from pydantic import BaseModel, Field

from enums.enums import HoneyStoresEnum
from schemas.common import EnumValuesModel


class InspectionBase(EnumValuesModel):
    hive_id: int = Field(..., gt=0)
    inspection_date: date
    queen_seen: bool = False
    eggs_present: bool = False
    brood_frames: int | None = Field(None, ge=0, le=10)
    brood_pattern_rating: int = Field(3, ge=1, le=5)
    temperament_rating: int = Field(3, ge=1, le=5)
    population_strength: int = Field(3, ge=1, le=5)
    honey_stores: HoneyStoresEnum | None = None
    disease_issues: str | None = Field(None, max_length=255)
    notes: str | None = None


class InspectionCreate(InspectionBase):
    pass


class InspectionUpdate(EnumValuesModel):
    hive_id: int | None = Field(None, gt=0)
    inspection_date: date | None = None
    queen_seen: bool | None = None
    eggs_present: bool | None = None
    brood_frames: int | None = Field(None, ge=0, le=10)
    brood_pattern_rating: int | None = Field(None, ge=1, le=5)
    temperament_rating: int | None = Field(None, ge=1, le=5)
    population_strength: int | None = Field(None, ge=1, le=5)
    honey_stores: HoneyStoresEnum | None = None
    disease_issues: str | None = Field(None, max_length=255)
    notes: str | None = None


class InspectionOut(InspectionBase):
    inspection_id: int
    hive_number: str | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class InspectionSummaryOut(BaseModel):
    """Averages over the filtered inspections (None when there are none)"""
    period: str
    start_date: date | None = None
    end_date: date | None = None
    hive_id: int | None = None
    count: int
    avg_brood_pattern: float | None = None
    avg_temperament: float | None = None
    avg_population_strength: float | None = None
    avg_brood_frames: float | None = None
    queen_seen_pct: float | None = None
    eggs_present_pct: float | None = None
