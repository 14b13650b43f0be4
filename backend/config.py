from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    APP_NAME: str = "ARES"
    VERSION: str = "2.0.4"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    HOST: str = "0.0.0.0"
    PORT: int = 8000

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]

    # sheetbest | file | google
    WAITLIST_SINK: str = "file"
    SINK_TIMEOUT_SECONDS: float = 10.0

    SHEET_BEST_URL: str = "https://api.sheetbest.com/sheets/19402277-d48e-4cb3-b884-2689be966458"

    WAITLIST_FILE: str = "data/waitlist.txt"

    GOOGLE_SHEET_ID: Optional[str] = None
    GOOGLE_SHEET_RANGE: str = "Sheet1!A:D"
    GOOGLE_CREDENTIALS_FILE: Optional[str] = None

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
