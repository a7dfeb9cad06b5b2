"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Closing Agent - Transaction Timeline"
    APP_ENV: str = "dev"

    # Uploads
    MAX_FILE_SIZE_MB: int = 25

    # Generated documents
    EMAIL_SIGNATURE: str = "Your Real Estate Team"
    REPORT_TITLE: str = "Timeline & Email Templates"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


# Global settings instance
settings = Settings()
