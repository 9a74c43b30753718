from datetime import date
from pydantic import BaseModel, Field

from schemas.queen import QueenAge


class QueenAgeIn(BaseModel):
    birth_date: date
    today: date | None = None


class QueenAgeOut(BaseModel):
    birth_date: date
    today: date
    age: QueenAge
    marking_color: str


class MarkingColorOut(BaseModel):
    year: int
    marking_color: str


class InfestationIn(BaseModel):
    mites_count: int | None = Field(None, ge=0)
    sample_size: int | None = Field(None, ge=0)


class InfestationOut(BaseModel):
    infestation_rate: float | None = None
    level: str
