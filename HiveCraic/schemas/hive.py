from datetime import datetime

from pydantic import Field, field_validator

from enums.enums import HiveStatusEnum, MarkingColorEnum
from schemas.common import EnumValuesModel, zero_to_none


class HiveBase(EnumValuesModel):
    hive_number: str = Field(..., min_length=1, max_length=50)
    apiary_id: int | None = None
    queen_id: int | None = None
    queen_marked: bool = False
    queen_marking_color: MarkingColorEnum | None = None
    queen_mated: bool = False
    queen_clipped: bool = False
    status: HiveStatusEnum = HiveStatusEnum.active
    notes: str | None = None


class HiveCreate(HiveBase):
    @field_validator("apiary_id", "queen_id")
    @classmethod
    def convert_zero_to_none(cls, v: int | None) -> int | None:
        return zero_to_none(v)

    @field_validator("hive_number")
    @classmethod
    def validate_hive_number(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Hive number cannot be empty")
        return v.strip()


class HiveUpdate(EnumValuesModel):
    """
    Partial update. Send apiary_id / queen_id as null (or 0) to unlink.
    """
    hive_number: str | None = Field(None, min_length=1, max_length=50)
    apiary_id: int | None = None
    queen_id: int | None = None
    queen_marked: bool | None = None
    queen_marking_color: MarkingColorEnum | None = None
    queen_mated: bool | None = None
    queen_clipped: bool | None = None
    status: HiveStatusEnum | None = None
    notes: str | None = None

    @field_validator("apiary_id", "queen_id")
    @classmethod
    def convert_zero_to_none(cls, v: int | None) -> int | None:
        return zero_to_none(v)


class HiveOut(HiveBase):
    hive_id: int
    apiary_name: str | None = None
    queen_number: str | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
