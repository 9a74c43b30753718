# models/user.py
from __future__ import annotations

from datetime import datetime
from sqlalchemy import String, CHAR, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local


class UserProfile(Base):
    """
    Account of a beekeeper.

    - role: "User" (own records only) or "Admin" (also users, tickets, settings)
    - last_seen_at: refreshed on authenticated requests, feeds the online-users stat
    """
    __tablename__ = "user_profile"

    user_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(120), unique=True, nullable=False)
    full_name: Mapped[str | None] = mapped_column(String(120))
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), default="User", nullable=False)  # User/Admin
    status: Mapped[str] = mapped_column(CHAR(1), default="a", nullable=False)  # a/i
    last_login_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=False))
    last_seen_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=False))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, onupdate=now_local,
                                                 nullable=False)

    @property
    def is_admin(self) -> bool:
        return self.role == "Admin"
