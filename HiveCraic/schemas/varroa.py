# schemas/varroa.py
from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field, computed_field, model_validator

from services.calculation_service import infestation_level


# ============================================================================
# Varroa checks
# ============================================================================

class VarroaCheckCreate(BaseModel):
    """
    infestation_rate is not accepted from the client: it is derived from
    mites_count and sample_size.
    """
    hive_id: int = Field(..., gt=0)
    check_date: date
    method: str = Field(..., min_length=1, max_length=80)
    mites_count: int | None = Field(None, ge=0)
    sample_size: int | None = Field(None, ge=0)
    action_threshold_reached: bool = False
    notes: str | None = None

    @model_validator(mode="after")
    def validate_counts(self):
        if self.sample_size and self.mites_count is not None and self.mites_count > self.sample_size:
            raise ValueError("mites_count cannot exceed sample_size")
        return self


class VarroaCheckUpdate(BaseModel):
    hive_id: int | None = Field(None, gt=0)
    check_date: date | None = None
    method: str | None = Field(None, min_length=1, max_length=80)
    mites_count: int | None = Field(None, ge=0)
    sample_size: int | None = Field(None, ge=0)
    action_threshold_reached: bool | None = None
    notes: str | None = None


class VarroaCheckOut(BaseModel):
    varroa_check_id: int
    hive_id: int
    hive_number: str | None = None
    check_date: date
    method: str
    mites_count: int | None = None
    sample_size: int | None = None
    infestation_rate: float | None = None
    action_threshold_reached: bool
    notes: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def level(self) -> str:
        return infestation_level(self.infestation_rate).value


# ============================================================================
# Varroa treatments
# ============================================================================

class VarroaTreatmentBase(BaseModel):
    hive_id: int = Field(..., gt=0)
    treatment_date: date
    treatment_type: str = Field(..., min_length=1, max_length=80)
    product_name: str | None = Field(None, max_length=120)
    dosage: str | None = Field(None, max_length=120)
    temperature: float | None = None
    weather_conditions: str | None = Field(None, max_length=120)
    notes: str | None = None


class VarroaTreatmentCreate(VarroaTreatmentBase):
    pass


class VarroaTreatmentUpdate(BaseModel):
    hive_id: int | None = Field(None, gt=0)
    treatment_date: date | None = None
    treatment_type: str | None = Field(None, min_length=1, max_length=80)
    product_name: str | None = Field(None, max_length=120)
    dosage: str | None = Field(None, max_length=120)
    temperature: float | None = None
    weather_conditions: str | None = Field(None, max_length=120)
    notes: str | None = None


class VarroaTreatmentOut(VarroaTreatmentBase):
    varroa_treatment_id: int
    hive_number: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
