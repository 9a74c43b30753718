from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from enums.enums import UserStatusEnum
from enums.roles import Role
from schemas.common import EnumValuesModel, blank_to_none


class UserBase(EnumValuesModel):
    email: EmailStr
    full_name: str | None = Field(None, max_length=120)


class UserRegister(UserBase):
    password: str = Field(min_length=6, max_length=100)

    @field_validator("full_name")
    @classmethod
    def clean_full_name(cls, v: str | None) -> str | None:
        return blank_to_none(v)


class UserOut(UserBase):
    user_id: int
    role: Role
    status: UserStatusEnum
    last_login_at: datetime | None = None
    created_at: datetime

    class Config:
        from_attributes = True


class UserAdminOut(UserOut):
    """User row as listed for admins (includes activity)."""
    last_seen_at: datetime | None = None


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class UserUpdate(BaseModel):
    """Update own profile"""
    full_name: str | None = Field(None, max_length=120)
    email: EmailStr | None = None


class ChangePasswordIn(BaseModel):
    """Change password (current password required)"""
    current_password: str
    new_password: str = Field(min_length=6, max_length=100)


class SetRoleIn(EnumValuesModel):
    role: Role
