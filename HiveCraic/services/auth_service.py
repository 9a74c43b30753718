# services/auth_service.py
"""
Authentication service.
Registration, login and JWT issuing.
"""
import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from enums.roles import Role
from utils.security import verify_password, create_access_token, hash_password
from utils.datetime_utils import now_local
from models.user import UserProfile
from schemas.user import UserRegister

logger = logging.getLogger(__name__)


def register_user(db: Session, payload: UserRegister) -> UserProfile:
    """
    Create a new account with the User role.

    Raises:
        HTTPException 409: if the email is already registered
    """
    email = payload.email.lower()
    exists = db.query(UserProfile).filter(UserProfile.email == email).first()
    if exists:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")

    user = UserProfile(
        email=email,
        full_name=payload.full_name,
        password_hash=hash_password(payload.password),
        role=Role.user.value,
        status="a",
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s", user.user_id)
    return user


def authenticate_user(db: Session, email: str, password: str) -> UserProfile:
    """
    Authenticate with email and password.

    Args:
        db: DB session
        email: Account email (sent as OAuth2 `username`)
        password: Plain text password

    Returns:
        The authenticated user

    Raises:
        HTTPException 401: bad credentials or inactive user
    """
    user = db.query(UserProfile).filter(UserProfile.email == email.strip().lower()).first()

    if not user or user.status != "a" or not verify_password(password, user.password_hash):
        logger.warning("Failed login for %s", email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        )

    user.last_login_at = now_local()
    user.last_seen_at = user.last_login_at
    db.add(user)
    db.commit()
    db.refresh(user)

    return user


def issue_access_token(user: UserProfile) -> str:
    return create_access_token(subject=user.user_id, role=user.role)
