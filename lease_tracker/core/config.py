"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Persistence
    PERSISTENCE_BACKEND: str = "sql"  # sql | json | memory
    DATABASE_URL: str = "sqlite:///./contracts.db"
    DATA_FILE: str = "./contracts.json"
    STORAGE_KEY: str = "contracts_v1"

    # Upload (simulated)
    UPLOAD_PLACEHOLDER_URL: str = "https://example.com/archivo-simulado.pdf"
    UPLOAD_MESSAGE: str = "Simulated upload. Cloud storage integration is not configured."

    # Application
    APP_NAME: str = "Lease Tracker - Commercial Lease Contracts"
    APP_ENV: str = "dev"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


# Global settings instance
settings = Settings()
