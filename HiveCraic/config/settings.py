# config/settings.py
"""
Centralised application configuration using Pydantic Settings.
Values are loaded from the environment or from the .env file.
"""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application configuration"""

    # Database
    DATABASE_URL: str

    # JWT
    SECRET_KEY: str
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 720
    ALGORITHM: str = "HS256"

    # CORS
    CORS_ALLOW_ORIGINS: List[str] = ["http://localhost:3000"]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Local time used for record dates ("today", last 7 days, ...)
    TIMEZONE: str = "Europe/Dublin"

    # A user counts as online when seen within this window (admin stats)
    ONLINE_WINDOW_MINUTES: int = 15

    # Email (SMTP)
    MAIL_USER: str | None = None
    MAIL_PASS: str | None = None
    MAIL_HOST: str = "smtp.gmail.com"
    MAIL_PORT: int = 587
    MAIL_FROM_NAME: str = "Hive Craic"
    MAIL_FROM_EMAIL: str | None = None  # Falls back to MAIL_USER

    # Password reset
    PASSWORD_RESET_TOKEN_EXPIRE_MINUTES: int = 30
    PASSWORD_RESET_MAX_ATTEMPTS_PER_HOUR: int = 5
    FRONTEND_URL: str = "http://localhost:3000"

    class Config:
        env_file = ".env"
        case_sensitive = True

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if not self.MAIL_FROM_EMAIL and self.MAIL_USER:
            self.MAIL_FROM_EMAIL = self.MAIL_USER


settings = Settings()
