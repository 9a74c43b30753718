from __future__ import annotations

from datetime import datetime, date
from sqlalchemy import String, BigInteger, Text, Date, DateTime, Numeric, Integer, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local


class VarroaCheck(Base):
    """
    Varroa mite count.

    infestation_rate (%) = mites_count / sample_size × 100, filled in by the
    service when both counts are present.
    """
    __tablename__ = "varroa_check"

    varroa_check_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("user_profile.user_id", ondelete="CASCADE"), nullable=False, index=True
    )
    hive_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("hive.hive_id", ondelete="CASCADE"), nullable=False, index=True
    )
    check_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    method: Mapped[str] = mapped_column(String(80), nullable=False)
    mites_count: Mapped[int | None] = mapped_column(Integer)
    sample_size: Mapped[int | None] = mapped_column(Integer)
    infestation_rate: Mapped[float | None] = mapped_column(Numeric(7, 2))
    action_threshold_reached: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text())
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, onupdate=now_local, nullable=False)

    hive: Mapped["Hive"] = relationship("Hive", back_populates="varroa_checks")

    @property
    def hive_number(self) -> str | None:
        return self.hive.hive_number if self.hive else None


class VarroaTreatment(Base):
    __tablename__ = "varroa_treatment"

    varroa_treatment_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("user_profile.user_id", ondelete="CASCADE"), nullable=False, index=True
    )
    hive_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("hive.hive_id", ondelete="CASCADE"), nullable=False, index=True
    )
    treatment_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    treatment_type: Mapped[str] = mapped_column(String(80), nullable=False)
    product_name: Mapped[str | None] = mapped_column(String(120))
    dosage: Mapped[str | None] = mapped_column(String(120))
    temperature: Mapped[float | None] = mapped_column(Numeric(5, 1))
    weather_conditions: Mapped[str | None] = mapped_column(String(120))
    notes: Mapped[str | None] = mapped_column(Text())
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, onupdate=now_local, nullable=False)

    hive: Mapped["Hive"] = relationship("Hive", back_populates="varroa_treatments")

    @property
    def hive_number(self) -> str | None:
        return self.hive.hive_number if self.hive else None
