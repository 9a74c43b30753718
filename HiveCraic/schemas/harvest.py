from datetime import date, datetime

from pydantic import Field

from enums.enums import QuantityUnitEnum
from schemas.common import EnumValuesModel


class HarvestBase(EnumValuesModel):
    hive_id: int = Field(..., gt=0)
    harvest_date: date
    honey_weight: float | None = Field(None, ge=0)
    wax_weight: float | None = Field(None, ge=0)
    unit: QuantityUnitEnum = QuantityUnitEnum.kg
    frames_harvested: int | None = Field(None, ge=0)
    notes: str | None = None


class HarvestCreate(HarvestBase):
    pass


class HarvestUpdate(EnumValuesModel):
    hive_id: int | None = Field(None, gt=0)
    harvest_date: date | None = None
    honey_weight: float | None = Field(None, ge=0)
    wax_weight: float | None = Field(None, ge=0)
    unit: QuantityUnitEnum | None = None
    frames_harvested: int | None = Field(None, ge=0)
    notes: str | None = None


class HarvestOut(HarvestBase):
    harvest_id: int
    hive_number: str | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
