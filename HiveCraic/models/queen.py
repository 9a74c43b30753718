from __future__ import annotations

from datetime import datetime, date
from sqlalchemy import String, BigInteger, Text, Date, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local


class Queen(Base):
    __tablename__ = "queen"

    queen_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("user_profile.user_id", ondelete="CASCADE"), nullable=False, index=True
    )
    queen_number: Mapped[str] = mapped_column(String(50), nullable=False)
    birth_date: Mapped[date | None] = mapped_column(Date)
    marking_color: Mapped[str | None] = mapped_column(String(10))
    source: Mapped[str] = mapped_column(String(20), default="bred", nullable=False)  # bred/purchased/swarm
    genetics: Mapped[str | None] = mapped_column(String(200))
    status: Mapped[str] = mapped_column(String(20), default="active", nullable=False)  # active/retired/dead
    performance_notes: Mapped[str | None] = mapped_column(Text())
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, onupdate=now_local, nullable=False)

    # Deleting a queen detaches hives and batches that reference her
    hives: Mapped[list["Hive"]] = relationship("Hive", back_populates="queen")
    batches: Mapped[list["RearingBatch"]] = relationship("RearingBatch", back_populates="mother_queen")
