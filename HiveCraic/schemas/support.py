from datetime import datetime

from pydantic import BaseModel, Field

from enums.enums import TicketPriorityEnum, TicketStatusEnum, TicketTypeEnum
from schemas.common import EnumValuesModel


class TicketCreate(EnumValuesModel):
    ticket_type: TicketTypeEnum
    subject: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)


class TicketUpdate(BaseModel):
    """Owner edit, only while the ticket is still open / in progress"""
    subject: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, min_length=1)


class TicketAdminUpdate(EnumValuesModel):
    status: TicketStatusEnum | None = None
    priority: TicketPriorityEnum | None = None
    admin_notes: str | None = None


class TicketOut(BaseModel):
    ticket_id: int
    user_id: int
    user_email: str | None = None
    ticket_type: str
    subject: str
    description: str
    status: str
    priority: str
    admin_notes: str | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
