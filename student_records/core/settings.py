import os
from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class Env(str, Enum):
    DEV = "dev"
    HML = "hml"
    PROD = "prod"


class Settings(BaseSettings):
    APP_ENV: Env = Env.DEV
    DEBUG: bool = False
    SECRET_KEY: str

    JWT_SECRET: str = "change-me"
    JWT_ALG: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 15
    # Lifetime of the link sent in the account verification e-mail
    VERIFY_TOKEN_EXPIRE_HOURS: int = 48

    DATABASE_URL: str

    ALLOWED_HOSTS: str = "localhost,127.0.0.1"

    LOG_JSON: bool = True
    LOG_LEVEL: str = "INFO"

    MAIL_HOST: str = os.getenv("MAIL_HOST", "localhost")
    MAIL_PORT: int = int(os.getenv("MAIL_PORT", "1025"))
    MAIL_TLS: bool = os.getenv("MAIL_TLS", "false").lower() == "true"
    MAIL_USER: str = os.getenv("MAIL_USER", "")
    MAIL_PASS: str = os.getenv("MAIL_PASS", "")
    MAIL_FROM: str = os.getenv("MAIL_FROM", "no-reply@school.local")
    MAIL_FROM_NAME: str = os.getenv("MAIL_FROM_NAME", "School Admin")
    APP_PUBLIC_BASE_URL: str = os.getenv("APP_PUBLIC_BASE_URL", "http://localhost:3000")

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        env_file_encoding="utf-8",
        ser_json_timedelta="iso8601",
        ser_json_tz="utc",
    )


# global instance
settings = Settings()
