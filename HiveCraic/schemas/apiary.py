from datetime import datetime
from pydantic import BaseModel, Field, field_validator


class ApiaryBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    location: str | None = Field(None, max_length=200)
    city: str | None = Field(None, max_length=100)
    eircode: str | None = Field(None, max_length=10)
    notes: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()


class ApiaryCreate(ApiaryBase):
    pass


class ApiaryUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=150)
    location: str | None = Field(None, max_length=200)
    city: str | None = Field(None, max_length=100)
    eircode: str | None = Field(None, max_length=10)
    notes: str | None = None


class ApiaryOut(ApiaryBase):
    apiary_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
