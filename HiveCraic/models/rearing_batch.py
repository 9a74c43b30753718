from __future__ import annotations

from datetime import datetime, date
from sqlalchemy import String, BigInteger, Text, Date, DateTime, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local


class RearingBatch(Base):
    """QueenCraft queen-rearing batch (grafted -> emerged -> mated -> completed)."""
    __tablename__ = "rearing_batch"

    batch_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("user_profile.user_id", ondelete="CASCADE"), nullable=False, index=True
    )
    mother_queen_id: Mapped[int | None] = mapped_column(
        BigInteger, ForeignKey("queen.queen_id", ondelete="SET NULL"), index=True
    )
    batch_name: Mapped[str] = mapped_column(String(120), nullable=False)
    graft_date: Mapped[date] = mapped_column(Date, nullable=False)
    cell_count: Mapped[int | None] = mapped_column(Integer)
    emergence_date: Mapped[date | None] = mapped_column(Date)
    status: Mapped[str] = mapped_column(String(20), default="grafted", nullable=False)
    notes: Mapped[str | None] = mapped_column(Text())
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, onupdate=now_local, nullable=False)

    mother_queen: Mapped["Queen | None"] = relationship("Queen", back_populates="batches")

    @property
    def mother_queen_number(self) -> str | None:
        return self.mother_queen.queen_number if self.mother_queen else None
