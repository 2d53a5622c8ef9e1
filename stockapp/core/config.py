# stockapp/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Database
    DATABASE_URL: str = "sqlite:///./database.db"

    # Seeding
    SEED_ON_STARTUP: bool = True
    SEED_STOCK_QUANTITY: int = 100

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    WRITE_RATE_LIMIT: str = "60/minute"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="forbid",
    )


settings = Settings()
