from datetime import date, datetime

from pydantic import Field

from enums.enums import QuantityUnitEnum
from schemas.common import EnumValuesModel


class FeedingBase(EnumValuesModel):
    hive_id: int = Field(..., gt=0)
    feed_date: date
    feed_type: str = Field(..., min_length=1, max_length=80)
    quantity: float | None = Field(None, ge=0)
    unit: QuantityUnitEnum = QuantityUnitEnum.kg
    notes: str | None = None


class FeedingCreate(FeedingBase):
    pass


class FeedingUpdate(EnumValuesModel):
    hive_id: int | None = Field(None, gt=0)
    feed_date: date | None = None
    feed_type: str | None = Field(None, min_length=1, max_length=80)
    quantity: float | None = Field(None, ge=0)
    unit: QuantityUnitEnum | None = None
    notes: str | None = None


class FeedingOut(FeedingBase):
    feeding_id: int
    hive_number: str | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
