"""
Configuration settings for the Medication Regimen Engine
"""
from pathlib import Path
from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "Medication Regimen Engine"
    DEBUG: bool = True
    VERSION: str = "1.0.0"

    # Database
    DATABASE_URL: str = f"sqlite:///{BASE_DIR}/data/medication_regimen.db"
    SQL_DEBUG: bool = False

    # Activity inference
    CURRENT_UNKNOWN_DURATION_DAYS: int = 90  # current-medications view
    HISTORY_UNKNOWN_DURATION_DAYS: int = 30  # per-record history flag

    # Scheduling
    DEFAULT_DOSE_TIME: str = "8:00 AM"

    # Safety signals
    POLYPHARMACY_THRESHOLD: int = 5

    # History
    HISTORY_PAGE_LIMIT: int = 50

    # Display
    DOCTOR_TITLE_PREFIX: str = "د."
    UNKNOWN_DOCTOR_NAME: str = "غير محدد"

    class Config:
        env_file = ".env"
        extra = "allow"


settings = Settings()

(BASE_DIR / "data").mkdir(parents=True, exist_ok=True)
