from __future__ import annotations

from datetime import datetime
from sqlalchemy import String, BigInteger, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local


class SupportTicket(Base):
    """
    Problem report or suggestion raised by a user.

    The owner edits subject/description while the ticket is open;
    admins handle status, priority and admin_notes.
    """
    __tablename__ = "support_ticket"

    ticket_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("user_profile.user_id", ondelete="CASCADE"), nullable=False, index=True
    )
    ticket_type: Mapped[str] = mapped_column(String(20), nullable=False)  # problem/suggestion
    subject: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text(), nullable=False)
    status: Mapped[str] = mapped_column(String(20), default="open", nullable=False)
    priority: Mapped[str] = mapped_column(String(20), default="normal", nullable=False)
    admin_notes: Mapped[str | None] = mapped_column(Text())
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, onupdate=now_local, nullable=False)

    user: Mapped["UserProfile"] = relationship("UserProfile")

    @property
    def user_email(self) -> str | None:
        return self.user.email if self.user else None
