from typing import Optional

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database
    DATABASE_URL: str = "sqlite:///./jobportal.db"

    # Session tokens. SECRET_KEY has no default: the process refuses to start without it.
    SECRET_KEY: SecretStr
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 24 * 60

    # Password hashing work factor (bcrypt log2 rounds)
    BCRYPT_ROUNDS: int = 10

    # Session cookie
    SESSION_COOKIE_NAME: str = "token"
    SESSION_COOKIE_SECURE: bool = False

    # Blob uploads: "local" | "s3"
    UPLOAD_BACKEND: str = "local"
    UPLOAD_DIR: str = "./uploads"
    UPLOAD_BASE_URL: str = "http://localhost:8000/uploads"
    S3_BUCKET: Optional[str] = None
    S3_REGION: Optional[str] = None
    S3_ENDPOINT_URL: Optional[str] = None
    S3_PUBLIC_BASE_URL: Optional[str] = None

    # Application
    APP_NAME: str = "JobPortal"
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    BACKEND_CORS_ORIGINS: str = (
        "http://localhost:5173,"
        "http://127.0.0.1:5173"
    )


settings = Settings()
