from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_TITLE: str = "Contact Inbox API"
    DATABASE_URL: str = "sqlite:///./contact.db"
    API_PREFIX: str = "/api/v1"
    DB_ECHO: bool = False
    SECRET_KEY: str
    SESSION_COOKIE_NAME: str = "app_session_id"
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
