# schemas/queen.py
from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator, computed_field

from enums.enums import MarkingColorEnum, QueenSourceEnum, QueenStatusEnum
from schemas.common import EnumValuesModel
from services.calculation_service import calculate_queen_age, marking_color_for_year
from utils.datetime_utils import today_local


def _not_in_future(v: date | None) -> date | None:
    if v is not None and v > today_local():
        raise ValueError("birth_date cannot be in the future")
    return v


class QueenAge(BaseModel):
    years: int
    months: int
    days: int
    total_days: int


class QueenCreate(EnumValuesModel):
    queen_number: str = Field(..., min_length=1, max_length=50)
    birth_date: date | None = None
    marking_color: MarkingColorEnum | None = None
    source: QueenSourceEnum = QueenSourceEnum.bred
    genetics: str | None = Field(None, max_length=200)
    status: QueenStatusEnum = QueenStatusEnum.active
    performance_notes: str | None = None

    @field_validator("birth_date")
    @classmethod
    def validate_birth_date(cls, v: date | None) -> date | None:
        return _not_in_future(v)


class QueenUpdate(EnumValuesModel):
    queen_number: str | None = Field(None, min_length=1, max_length=50)
    birth_date: date | None = None
    marking_color: MarkingColorEnum | None = None
    source: QueenSourceEnum | None = None
    genetics: str | None = Field(None, max_length=200)
    status: QueenStatusEnum | None = None
    performance_notes: str | None = None

    @field_validator("birth_date")
    @classmethod
    def validate_birth_date(cls, v: date | None) -> date | None:
        return _not_in_future(v)


class QueenOut(BaseModel):
    queen_id: int
    queen_number: str
    birth_date: date | None = None
    marking_color: str | None = None
    source: str
    genetics: str | None = None
    status: str
    performance_notes: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def age(self) -> QueenAge | None:
        """Age today; None without a birth date"""
        if self.birth_date is None or self.birth_date > today_local():
            return None
        return QueenAge(**calculate_queen_age(self.birth_date, today_local()))

    @computed_field
    @property
    def expected_marking_color(self) -> str | None:
        """International colour for the birth year"""
        if self.birth_date is None:
            return None
        return marking_color_for_year(self.birth_date.year).value
