# api/auth.py
"""
Authentication API.
Endpoints: register, login, me, forgot-password, reset-password.
"""
from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user
from schemas.user import Token, UserOut, UserRegister
from schemas.password_reset import ForgotPasswordIn, ResetPasswordIn, PasswordResetResponse
from services.auth_service import authenticate_user, issue_access_token, register_user
from services.password_reset_service import request_password_reset, reset_password
from models.user import UserProfile

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/register",
    response_model=UserOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
    description=(
        "Creates a beekeeper account with the `User` role.\n\n"
        "**Errors:**\n"
        "- 409 if the email is already registered\n"
        "- 422 if the password has fewer than 6 characters"
    )
)
def register(payload: UserRegister, db: Session = Depends(get_db)):
    return register_user(db, payload)


@router.post(
    "/token",
    response_model=Token,
    summary="Login (OAuth2)",
    description=(
        "OAuth2 Password Flow.\n\n"
        "**Format:** `application/x-www-form-urlencoded`\n\n"
        "**Fields:**\n"
        "- `username`: the account email\n"
        "- `password`: the password\n\n"
        "**Response:**\n"
        "- `access_token`: JWT for the `Authorization: Bearer <token>` header\n"
        "- `token_type`: always `bearer`"
    )
)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db)
):
    """Login with email and password"""
    user = authenticate_user(db, form_data.username, form_data.password)
    token = issue_access_token(user)
    return {"access_token": token, "token_type": "bearer"}


@router.get(
    "/me",
    response_model=UserOut,
    summary="Current user",
    description="Returns the authenticated user, including the `role`."
)
def me(current_user: UserProfile = Depends(get_current_user)):
    return current_user


@router.post(
    "/forgot-password",
    response_model=PasswordResetResponse,
    summary="Request a password reset",
    description=(
        "Emails a link to reset the password.\n\n"
        "**Process:**\n"
        "1. Looks up the email\n"
        "2. Checks the rate limit (5 requests per hour)\n"
        "3. Issues a single-use token valid for 30 minutes\n"
        "4. Emails the reset link\n\n"
        "**Note:** always answers with the same message, whether or not the email exists."
    )
)
def forgot_password(
    payload: ForgotPasswordIn,
    db: Session = Depends(get_db)
):
    return request_password_reset(db, payload.email)


@router.post(
    "/reset-password",
    response_model=PasswordResetResponse,
    summary="Reset the password with a token",
    description=(
        "Changes the password with the emailed token.\n\n"
        "**Checks:**\n"
        "- The token exists\n"
        "- It has not expired\n"
        "- It has not been used\n\n"
        "The token is marked as used afterwards."
    )
)
def reset_password_endpoint(
    payload: ResetPasswordIn,
    db: Session = Depends(get_db)
):
    return reset_password(db, payload.token, payload.new_password)
