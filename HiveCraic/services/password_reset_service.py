# services/password_reset_service.py
"""
Password reset tokens.
"""
import logging
from datetime import timedelta

from fastapi import HTTPException
from sqlalchemy.orm import Session

from models.password_reset import PasswordResetToken
from models.user import UserProfile
from utils.datetime_utils import now_local
from utils.security import hash_password, new_reset_token, hash_reset_token
from services.email_service import send_password_reset_email
from config.settings import settings

logger = logging.getLogger(__name__)

GENERIC_RESET_MESSAGE = "If the email exists, you will receive instructions to reset your password"


def _rate_limited(db: Session, user_id: int) -> bool:
    one_hour_ago = now_local() - timedelta(hours=1)
    recent_attempts = (
        db.query(PasswordResetToken)
        .filter(
            PasswordResetToken.user_id == user_id,
            PasswordResetToken.created_at >= one_hour_ago
        )
        .count()
    )
    return recent_attempts >= settings.PASSWORD_RESET_MAX_ATTEMPTS_PER_HOUR


def request_password_reset(db: Session, email: str) -> dict:
    """
    Request a password reset.

    Steps:
    1. Look up the user by email
    2. Check the hourly rate limit
    3. Generate a token and store its SHA-256 hash
    4. Email the reset link

    IMPORTANT: the answer is the same whether or not the email exists,
    so accounts cannot be enumerated.
    """
    user = db.query(UserProfile).filter(UserProfile.email == email.lower()).first()

    if not user or user.status != "a":
        logger.info("Password reset requested for unknown or inactive email")
        return {"message": GENERIC_RESET_MESSAGE}

    if _rate_limited(db, user.user_id):
        logger.warning("Password reset rate limit reached for user %s", user.user_id)
        return {"message": GENERIC_RESET_MESSAGE}

    token = new_reset_token()

    reset_token = PasswordResetToken(
        user_id=user.user_id,
        token_hash=hash_reset_token(token),
        expires_at=now_local() + timedelta(minutes=settings.PASSWORD_RESET_TOKEN_EXPIRE_MINUTES),
        created_at=now_local()
    )
    db.add(reset_token)
    db.commit()

    reset_link = f"{settings.FRONTEND_URL}/reset-password?token={token}"

    email_sent = send_password_reset_email(
        to_email=user.email,
        reset_link=reset_link,
        user_name=user.full_name or user.email
    )

    if not email_sent:
        # Token without email is useless
        db.delete(reset_token)
        db.commit()
        logger.error("Password reset email failed for user %s", user.user_id)

    return {"message": GENERIC_RESET_MESSAGE}


def reset_password(db: Session, token: str, new_password: str) -> dict:
    """
    Reset the password with the emailed token.

    Raises:
        HTTPException 400: invalid, expired or already used token
        HTTPException 403: user no longer active
    """
    reset_token = (
        db.query(PasswordResetToken)
        .filter(PasswordResetToken.token_hash == hash_reset_token(token))
        .first()
    )

    if not reset_token:
        raise HTTPException(status_code=400, detail="Invalid token")

    if reset_token.expires_at < now_local():
        raise HTTPException(status_code=400, detail="Token expired")

    if reset_token.used_at is not None:
        raise HTTPException(status_code=400, detail="Token already used")

    user = db.get(UserProfile, reset_token.user_id)
    if not user or user.status != "a":
        raise HTTPException(status_code=403, detail="User not available")

    user.password_hash = hash_password(new_password)
    reset_token.used_at = now_local()

    db.add(user)
    db.add(reset_token)
    db.commit()
    logger.info("Password reset for user %s", user.user_id)

    return {"message": "Password reset successfully"}


def cleanup_expired_tokens(db: Session) -> int:
    """
    Delete tokens that expired more than 7 days ago (maintenance task).

    Returns:
        Number of tokens deleted
    """
    cutoff_date = now_local() - timedelta(days=7)

    deleted = (
        db.query(PasswordResetToken)
        .filter(PasswordResetToken.expires_at < cutoff_date)
        .delete(synchronize_session=False)
    )
    db.commit()

    return deleted
