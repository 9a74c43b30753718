from __future__ import annotations

from datetime import datetime
from sqlalchemy import String, BigInteger, DateTime, Boolean, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local


class DropdownCategory(Base):
    """
    Admin-maintained list of form options (e.g. varroa treatment products).
    Global: not owned by any user.
    """
    __tablename__ = "dropdown_category"

    category_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    category_name: Mapped[str] = mapped_column(String(120), nullable=False)
    category_key: Mapped[str] = mapped_column(String(80), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)

    values: Mapped[list["DropdownValue"]] = relationship(
        "DropdownValue",
        back_populates="category",
        cascade="all, delete-orphan",
        order_by="DropdownValue.display_order",
    )


class DropdownValue(Base):
    __tablename__ = "dropdown_value"

    value_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    category_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("dropdown_category.category_id", ondelete="CASCADE"), nullable=False, index=True
    )
    value: Mapped[str] = mapped_column(String(120), nullable=False)
    display_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)

    category: Mapped[DropdownCategory] = relationship("DropdownCategory", back_populates="values")
