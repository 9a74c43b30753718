from datetime import datetime
from pydantic import BaseModel, Field


class DropdownValueCreate(BaseModel):
    """display_order defaults to the end of the list"""
    value: str = Field(..., min_length=1, max_length=120)
    display_order: int | None = Field(None, ge=0)
    is_active: bool = True


class DropdownValueUpdate(BaseModel):
    value: str | None = Field(None, min_length=1, max_length=120)
    display_order: int | None = Field(None, ge=0)
    is_active: bool | None = None


class DropdownValueOut(BaseModel):
    value_id: int
    category_id: int
    value: str
    display_order: int
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class DropdownCategoryCreate(BaseModel):
    category_name: str = Field(..., min_length=1, max_length=120)
    category_key: str = Field(..., min_length=1, max_length=80, pattern=r"^[a-z0-9_]+$")
    description: str | None = Field(None, max_length=255)


class DropdownCategoryUpdate(BaseModel):
    category_name: str | None = Field(None, min_length=1, max_length=120)
    category_key: str | None = Field(None, min_length=1, max_length=80, pattern=r"^[a-z0-9_]+$")
    description: str | None = Field(None, max_length=255)


class DropdownCategoryOut(BaseModel):
    category_id: int
    category_name: str
    category_key: str
    description: str | None = None
    created_at: datetime
    values: list[DropdownValueOut] = []

    class Config:
        from_attributes = True
