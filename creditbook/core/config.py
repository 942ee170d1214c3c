"""
Configuration helpers for the creditbook backend.

Routers/services read a Settings object instead of fetching os.environ
directly (storage backend, data file path, database URL, blob keys).
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[1] / "data.json"
STORAGE_BACKENDS = ("json", "sql", "memory")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    storage_backend: str
    data_file: Path
    database_url: str
    people_key: str
    events_key: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _choice(value: str | None, allowed: tuple[str, ...], default: str) -> str:
        candidate = (value or "").strip().lower()
        return candidate if candidate in allowed else default

    data_file = (os.getenv("CREDITBOOK_DATA_FILE") or "").strip()
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        storage_backend=_choice(os.getenv("CREDITBOOK_STORAGE"), STORAGE_BACKENDS, "json"),
        data_file=Path(data_file) if data_file else DEFAULT_DATA_FILE,
        database_url=os.getenv("DATABASE_URL", ""),
        people_key=os.getenv("CREDITBOOK_PEOPLE_KEY", "credit.people"),
        events_key=os.getenv("CREDITBOOK_EVENTS_KEY", "credit.events"),
    )
