from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str

    # If DEV and you hit SSL cert issues on Windows, set DB_SSL_VERIFY=false in .env
    DB_SSL_VERIFY: bool = True
    # Supabase / pgbouncer transaction pooler: no prepared statements, no local pool
    DB_POOLER_MODE: bool = False

    SECRET_KEY: str
    SESSION_COOKIE_NAME: str = "eportal_session"
    SESSION_EXPIRE_MINUTES: int = 60 * 24 * 7
    COOKIE_SECURE: bool = False

    CORS_ORIGINS: List[str] = ["http://localhost:3001"]

    SUPER_ADMIN_EMAIL: str | None = None
    SUPER_ADMIN_PASSWORD: str | None = None
    SUPER_ADMIN_NAME: str | None = "Super Admin"
    ENV: str = "dev"  # "dev" or "prod"
    LOG_LEVEL: str = "INFO"

    # --- EMAIL SETTINGS ---
    SMTP_HOST: str | None = None
    SMTP_PORT: int = 2525  # Default to Mailtrap port
    SMTP_USER: str | None = None
    SMTP_PASSWORD: str | None = None
    EMAILS_FROM_EMAIL: str = "no-reply@eportal.edu.ng"
    EMAILS_FROM_NAME: str = "University E-Portal"
    FRONTEND_URL: str = "http://localhost:3001"  # For login link

    # --- LOGIN HARDENING ---
    REDIS_URL: str | None = None
    RATE_LIMIT_ENABLED: bool = True
    LOGIN_RATE_LIMIT: str = "10/minute"
    MAX_LOGIN_ATTEMPTS: int = 5
    LOCKOUT_MINUTES: int = 15
    PASSWORD_RESET_OTP_MINUTES: int = 15
    MAX_RESET_OTP_ATTEMPTS: int = 5

    # Public self sign-up always creates student accounts
    ALLOW_SIGN_UP: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
