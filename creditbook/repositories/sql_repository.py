"""Key/value blob storage backed by SQLAlchemy."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select

from creditbook.db.models import KeyValue
from creditbook.db.session import get_session, init_db


class SQLStorage:
    """get/set of opaque string blobs in the kv_store table."""

    def __init__(self, *, create_tables: bool = True) -> None:
        if create_tables:
            init_db()

    def get(self, key: str) -> Optional[str]:
        with get_session() as session:
            entity = session.get(KeyValue, key)
            return entity.value if entity else None

    def set(self, key: str, value: str) -> None:
        now = datetime.now(timezone.utc)
        with get_session() as session:
            entity = session.get(KeyValue, key)
            if not entity:
                session.add(KeyValue(key=key, value=value, updated_at=now))
            else:
                entity.value = value
                entity.updated_at = now
            session.commit()

    def keys(self) -> list[str]:
        with get_session() as session:
            return list(session.execute(select(KeyValue.key)).scalars().all())
