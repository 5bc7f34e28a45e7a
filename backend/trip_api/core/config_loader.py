# backend/trip_api/core/config_loader.py

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DB_NAME: str = "trip_planner"

    GROQ_API_KEY: str = ""
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    groq_model: str = "llama-3.1-8b-instant"
    llm_temperature: float = 0.7

    JWT_SECRET_KEY: str = "supersecret"
    access_token_expire_minutes: int = 7 * 24 * 60

    # comma separated, e.g. ".vercel.app,.netlify.app"
    CORS_TRUSTED_SUFFIXES: str = ".vercel.app"

    PORT: int = 5000

    LOG_LEVEL: str = "INFO"
    # empty → backend/logs
    LOG_DIR: str = ""
    LOG_TO_FILE: bool = True

    environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @property
    def trusted_suffixes(self) -> List[str]:
        return [s.strip() for s in self.CORS_TRUSTED_SUFFIXES.split(",") if s.strip()]


settings = Settings()
