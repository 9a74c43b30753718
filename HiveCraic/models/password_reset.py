# models/password_reset.py
from __future__ import annotations

from datetime import datetime
from sqlalchemy import BigInteger, CHAR, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from utils.db import Base, BigIntPK


class PasswordResetToken(Base):
    """
    Password reset token.

    - Only the SHA-256 hash of the token is stored
    - Expires after PASSWORD_RESET_TOKEN_EXPIRE_MINUTES
    - Marked as used once the password has been reset
    """
    __tablename__ = "password_reset_token"

    token_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("user_profile.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    token_hash: Mapped[str] = mapped_column(CHAR(64), unique=True, nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, index=True)
    used_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=False))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)

    user: Mapped["UserProfile"] = relationship("UserProfile", foreign_keys=[user_id])
