from __future__ import annotations

from datetime import datetime, date
from sqlalchemy import String, BigInteger, Text, Date, DateTime, Numeric, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local


class Feeding(Base):
    __tablename__ = "feeding"

    feeding_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("user_profile.user_id", ondelete="CASCADE"), nullable=False, index=True
    )
    hive_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("hive.hive_id", ondelete="CASCADE"), nullable=False, index=True
    )
    feed_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    feed_type: Mapped[str] = mapped_column(String(80), nullable=False)
    quantity: Mapped[float | None] = mapped_column(Numeric(10, 2))
    unit: Mapped[str] = mapped_column(String(10), default="kg", nullable=False)  # kg/liters
    notes: Mapped[str | None] = mapped_column(Text())
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, onupdate=now_local, nullable=False)

    hive: Mapped["Hive"] = relationship("Hive", back_populates="feedings")

    @property
    def hive_number(self) -> str | None:
        return self.hive.hive_number if self.hive else None
