from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PROJECT_NAME: str = "Prayer Walk Badges"
    API_VERSION: str = "0.1.0"
    ENV: str = "development"

    # database
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "prayerwalk"
    DATABASE_URL: Optional[str] = None  # overrides the POSTGRES_* settings when set
    DB_ECHO: bool = False

    LOG_LEVEL: str = "INFO"


settings = Settings()
