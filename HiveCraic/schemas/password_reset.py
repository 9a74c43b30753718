# schemas/password_reset.py
from pydantic import BaseModel, EmailStr, Field


class ForgotPasswordIn(BaseModel):
    """Request a password reset email"""
    email: EmailStr


class ResetPasswordIn(BaseModel):
    """Reset the password with the emailed token"""
    token: str = Field(..., min_length=32, max_length=64)
    new_password: str = Field(..., min_length=6, max_length=100)


class PasswordResetResponse(BaseModel):
    message: str
