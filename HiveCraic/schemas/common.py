# schemas/common.py
from __future__ import annotations

from pydantic import BaseModel


# -------------------------------------------------------------------
# Simple message responses
# -------------------------------------------------------------------
class Msg(BaseModel):
    """Plain message response (deletes, actions, ...)."""
    detail: str


# -------------------------------------------------------------------
# Base for schemas with enum fields
# -------------------------------------------------------------------
class EnumValuesModel(BaseModel):
    """
    Enum fields are validated against enums.enums and kept as their plain
    string values (defaults included), which is what the columns store.
    """

    class Config:
        use_enum_values = True
        validate_default = True


def zero_to_none(v: int | None) -> int | None:
    """Optional ids: clients send 0 for "no selection"."""
    if v == 0:
        return None
    return v


def blank_to_none(v: str | None) -> str | None:
    if v is None:
        return None
    v = v.strip()
    return v or None
