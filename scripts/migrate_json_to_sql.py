"""One-off migration script: JSON file (data.json) -> SQL kv_store."""
from __future__ import annotations

import argparse
from pathlib import Path
import sys

# Garantir que o pacote creditbook seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from creditbook.core.config import get_settings  # noqa: E402
from creditbook.repositories.json_storage import JSONStorage  # noqa: E402
from creditbook.repositories.sql_repository import SQLStorage  # noqa: E402


def migrate(data_file: Path | None = None) -> list[str]:
    settings = get_settings()
    path = data_file or settings.data_file
    if not path.exists():
        raise SystemExit(f"Arquivo nao encontrado: {path}")
    source = JSONStorage(path)
    target = SQLStorage()
    for key in (settings.people_key, settings.events_key):
        value = source.get(key)
        if value is None:
            continue
        target.set(key, value)
    return sorted(target.keys())


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Copiar o ledger do JSON para o banco SQL")
    ap.add_argument("--data-file", type=Path, help="Arquivo JSON de origem (default: CREDITBOOK_DATA_FILE)")
    args = ap.parse_args()
    keys = migrate(args.data_file)
    print(f"JSON data migrated to SQL successfully ({', '.join(keys) or 'nothing to copy'}).")
