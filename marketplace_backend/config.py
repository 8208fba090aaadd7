"""Configuration management using python-dotenv."""
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load .env file from project root
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name, "").strip()
    return int(value) if value else None


class AppConfig:
    """Application configuration."""
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    BACKEND_URL: str = os.getenv("BACKEND_URL", "http://localhost:8000")
    # Unset: every start produces fresh histories. Integer: reproducible catalog.
    RANDOM_SEED: Optional[int] = _optional_int("RANDOM_SEED")
    REFRESH_HOUR: int = int(os.getenv("REFRESH_HOUR", "0"))


# Singleton instance
app_config = AppConfig()
