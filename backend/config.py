"""
Todo backend configuration.
Single source of truth for environment and app settings.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def get_settings():
    """Return app settings (use as FastAPI Depends or call directly)."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    APP_TITLE: str = "Todo API"
    APP_VERSION: str = "1.0.0"
    ALLOWED_ORIGINS: list[str]
    LOG_LEVEL: str = "INFO"

    # Storage: one JSON array file under the data dir
    TODO_DATA_DIR: Path
    TODO_DATA_FILE: str = "todos.json"

    def __init__(self):
        origins = os.environ.get("ALLOWED_ORIGINS", "http://localhost:3000")
        self.ALLOWED_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]
        self.LOG_LEVEL = (os.environ.get("LOG_LEVEL") or "INFO").strip().upper()
        data_dir = os.environ.get("TODO_DATA_DIR", "data")
        self.TODO_DATA_DIR = Path(data_dir)
        self.TODO_DATA_FILE = (os.environ.get("TODO_DATA_FILE") or "todos.json").strip()

    @property
    def data_path(self) -> Path:
        """Full path of the backing JSON file."""
        return self.TODO_DATA_DIR / self.TODO_DATA_FILE
