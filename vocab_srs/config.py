from pydantic_settings import BaseSettings
from pathlib import Path
from typing import Optional

# Get the project root directory (parent of vocab_srs folder)
PROJECT_ROOT = Path(__file__).parent.parent

class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""
    database_url: str = f"sqlite:///{PROJECT_ROOT / 'vocab_srs.db'}"

    # IANA timezone used to decide what "today" is, e.g. "Asia/Tokyo".
    # Unset means the host's local date.
    timezone: Optional[str] = None

    log_level: str = "INFO"

    # Default cap for due-item listings
    due_review_limit: int = 20

    class Config:
        env_file = str(PROJECT_ROOT / ".env")
        env_prefix = "VOCAB_SRS_"

settings = Settings()
