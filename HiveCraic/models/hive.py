from __future__ import annotations

from datetime import datetime
from sqlalchemy import String, BigInteger, Text, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local


class Hive(Base):
    __tablename__ = "hive"

    hive_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("user_profile.user_id", ondelete="CASCADE"), nullable=False, index=True
    )
    apiary_id: Mapped[int | None] = mapped_column(
        BigInteger, ForeignKey("apiary.apiary_id", ondelete="SET NULL"), index=True
    )
    queen_id: Mapped[int | None] = mapped_column(
        BigInteger, ForeignKey("queen.queen_id", ondelete="SET NULL"), index=True
    )
    hive_number: Mapped[str] = mapped_column(String(50), nullable=False)
    queen_marked: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    queen_marking_color: Mapped[str | None] = mapped_column(String(10))
    queen_mated: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    queen_clipped: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    status: Mapped[str] = mapped_column(String(20), default="active", nullable=False)  # active/queenless/retired
    notes: Mapped[str | None] = mapped_column(Text())
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, onupdate=now_local, nullable=False)

    apiary: Mapped["Apiary | None"] = relationship("Apiary", back_populates="hives")
    queen: Mapped["Queen | None"] = relationship("Queen", back_populates="hives")

    # Hive records go with the hive
    inspections: Mapped[list["Inspection"]] = relationship(
        "Inspection", back_populates="hive", cascade="all, delete-orphan"
    )
    feedings: Mapped[list["Feeding"]] = relationship(
        "Feeding", back_populates="hive", cascade="all, delete-orphan"
    )
    harvests: Mapped[list["Harvest"]] = relationship(
        "Harvest", back_populates="hive", cascade="all, delete-orphan"
    )
    varroa_checks: Mapped[list["VarroaCheck"]] = relationship(
        "VarroaCheck", back_populates="hive", cascade="all, delete-orphan"
    )
    varroa_treatments: Mapped[list["VarroaTreatment"]] = relationship(
        "VarroaTreatment", back_populates="hive", cascade="all, delete-orphan"
    )

    @property
    def apiary_name(self) -> str | None:
        return self.apiary.name if self.apiary else None

    @property
    def queen_number(self) -> str | None:
        return self.queen.queen_number if self.queen else None
