from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    APP_NAME: str = "HR Workforce Management"
    APP_VERSION: str = "1.0.0"

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    # In-memory store
    SEED_SAMPLE_DATA: bool = False

    # Analytics
    OVERTIME_THRESHOLD_HOURS: float = 8.0
    OVERTIME_WINDOW_DAYS: int = 7

    # Spreadsheet export (mocked)
    SPREADSHEET_BASE_URL: str = "https://docs.google.com/spreadsheets/d"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
