from typing import List, Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Date Analyzer API"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000
    DEFAULT_LANGUAGE: str = "en"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_JSON: bool = False
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"

settings = Settings()
