from datetime import date, datetime

from pydantic import Field, field_validator, model_validator

from enums.enums import BatchStatusEnum
from schemas.common import EnumValuesModel, zero_to_none


class BatchBase(EnumValuesModel):
    batch_name: str = Field(..., min_length=1, max_length=120)
    mother_queen_id: int | None = None
    graft_date: date
    cell_count: int | None = Field(None, ge=0)
    emergence_date: date | None = None
    status: BatchStatusEnum = BatchStatusEnum.grafted
    notes: str | None = None


class BatchCreate(BatchBase):
    @field_validator("mother_queen_id")
    @classmethod
    def convert_zero_to_none(cls, v: int | None) -> int | None:
        return zero_to_none(v)

    @model_validator(mode="after")
    def validate_dates(self):
        if self.emergence_date and self.emergence_date < self.graft_date:
            raise ValueError("emergence_date cannot be before graft_date")
        return self


class BatchUpdate(EnumValuesModel):
    batch_name: str | None = Field(None, min_length=1, max_length=120)
    mother_queen_id: int | None = None
    graft_date: date | None = None
    cell_count: int | None = Field(None, ge=0)
    emergence_date: date | None = None
    status: BatchStatusEnum | None = None
    notes: str | None = None

    @field_validator("mother_queen_id")
    @classmethod
    def convert_zero_to_none(cls, v: int | None) -> int | None:
        return zero_to_none(v)


class BatchOut(BatchBase):
    batch_id: int
    mother_queen_number: str | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
