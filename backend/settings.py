import os
from pathlib import Path

# Basic settings helper to read environment configuration.

BACKEND_ROOT = Path(__file__).resolve().parent


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


class Settings:
    def __init__(self) -> None:
        self.FILE_UPLOAD_DIRECTORY: str = os.getenv("FILE_UPLOAD_DIRECTORY", "uploads")
        self.DATABASE_URL: str = os.getenv(
            "DATABASE_URL", f"sqlite:///{BACKEND_ROOT / 'app.db'}"
        )
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.SQL_ECHO: bool = _as_bool(os.getenv("SQL_ECHO"), False)


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
