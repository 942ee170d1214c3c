"""
Smoke tests for the SQL key/value storage against a temporary SQLite database.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote creditbook seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from creditbook.core import config as core_config  # noqa: E402
from creditbook.db import models  # noqa: E402
from creditbook.db import session as db_session  # noqa: E402
from creditbook.repositories import build_storage  # noqa: E402
from creditbook.repositories.json_storage import JSONStorage  # noqa: E402
from creditbook.repositories.sql_repository import SQLStorage  # noqa: E402
from creditbook.services.ledger_service import LedgerService  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Configura um SQLite temporário e garante teardown completo para não deixar o arquivo bloqueado no Windows."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("CREDITBOOK_STORAGE", "sql")
    monkeypatch.setenv("CREDITBOOK_DATA_FILE", str(tmp_path / "data.json"))
    _clear_caches()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)

    yield db_file

    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    _clear_caches()


def test_set_then_get_and_overwrite(temp_db):
    repo = SQLStorage()
    assert repo.get("credit.people") is None
    repo.set("credit.people", "[]")
    assert repo.get("credit.people") == "[]"
    repo.set("credit.people", '[{"id": 1}]')
    assert repo.get("credit.people") == '[{"id": 1}]'
    assert repo.keys() == ["credit.people"]


def test_ledger_round_trip_through_sql(temp_db):
    storage = build_storage()
    assert isinstance(storage, SQLStorage)
    ledger = LedgerService(storage)
    ledger.add_person("Nima", 3)
    ledger.log_event(1, 10, "back on track")
    ledger.deactivate_person(2)

    reloaded = LedgerService(SQLStorage(), people_seed=[], events_seed=[])
    assert reloaded.people == ledger.people
    assert reloaded.events == ledger.events
    assert reloaded.score_for(1) == 70
    assert [p.name for p in reloaded.ranked_active_people()] == ["Ali", "Zahra", "Ahoo", "Nima"]


def test_migrate_json_to_sql(temp_db, tmp_path):
    sys.path.insert(0, str(ROOT / "scripts"))
    try:
        import migrate_json_to_sql
    finally:
        sys.path.remove(str(ROOT / "scripts"))

    source = JSONStorage(tmp_path / "data.json")
    LedgerService(source).add_person("Migrated", 1)

    copied = migrate_json_to_sql.migrate()

    assert copied == ["credit.events", "credit.people"]
    ledger = LedgerService(SQLStorage(), people_seed=[], events_seed=[])
    assert ledger.get_person(5).name == "Migrated"
