"""
Persistence adapters.

Every adapter exposes the same two calls, ``get(key) -> str | None`` and
``set(key, value)``, over opaque string blobs. The ledger service only talks
to that contract; which backend is used comes from Settings.
"""

from __future__ import annotations

from creditbook.core.config import Settings, get_settings
from .json_storage import JSONStorage, MemoryStorage


def build_storage(settings: Settings | None = None):
    settings = settings or get_settings()
    if settings.storage_backend == "sql":
        from .sql_repository import SQLStorage

        return SQLStorage()
    if settings.storage_backend == "memory":
        return MemoryStorage()
    return JSONStorage(settings.data_file)


__all__ = ["JSONStorage", "MemoryStorage", "build_storage"]
