from __future__ import annotations

from datetime import datetime, date
from sqlalchemy import String, BigInteger, Text, Date, DateTime, Boolean, SmallInteger, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local


class Inspection(Base):
    """
    Hive inspection.

    Ratings (brood pattern, temperament, population) go from 1 to 5,
    brood_frames from 0 to 10 (NULL = not counted).
    """
    __tablename__ = "inspection"

    inspection_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("user_profile.user_id", ondelete="CASCADE"), nullable=False, index=True
    )
    hive_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("hive.hive_id", ondelete="CASCADE"), nullable=False, index=True
    )
    inspection_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    queen_seen: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    eggs_present: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    brood_frames: Mapped[int | None] = mapped_column(SmallInteger)
    brood_pattern_rating: Mapped[int] = mapped_column(SmallInteger, default=3, nullable=False)
    temperament_rating: Mapped[int] = mapped_column(SmallInteger, default=3, nullable=False)
    population_strength: Mapped[int] = mapped_column(SmallInteger, default=3, nullable=False)
    honey_stores: Mapped[str | None] = mapped_column(String(20))  # Low/Medium/Good/Excellent
    disease_issues: Mapped[str | None] = mapped_column(String(255))
    notes: Mapped[str | None] = mapped_column(Text())
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, onupdate=now_local, nullable=False)

    hive: Mapped["Hive"] = relationship("Hive", back_populates="inspections")

    @property
    def hive_number(self) -> str | None:
        return self.hive.hive_number if self.hive else None
