#!/usr/bin/env python3
"""
Cadastrar uma pessoa no ledger usando o backend configurado (CREDITBOOK_STORAGE).

Uso:
  python scripts/add_person.py --name Zahra --tier 1 [--base 80]
  python scripts/add_person.py --list
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Garante que o pacote creditbook seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from creditbook.repositories import build_storage  # noqa: E402
from creditbook.services.ledger_service import LedgerService, ValidationError  # noqa: E402


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Cadastrar pessoa no creditbook")
    ap.add_argument("--name", help="Nome da pessoa")
    ap.add_argument("--tier", default="2", help="Tier 1, 2 ou 3 (default: 2)")
    ap.add_argument("--base", default="", help="Base credit opcional (default: valor do tier)")
    ap.add_argument("--list", action="store_true", help="Apenas listar o ranking atual")
    args = ap.parse_args(argv)

    ledger = LedgerService(build_storage())
    if args.list:
        for person in ledger.ranked_active_people():
            print(f"{person.id:>4}  {person.name:<20} tier {person.tier}  score {ledger.score_for(person.id)}")
        return
    try:
        person = ledger.add_person(args.name, args.tier, args.base)
    except ValidationError as exc:
        raise SystemExit(exc.message)
    print("OK: pessoa cadastrada")
    print(f"  ID: {person.id}")
    print(f"  Nome: {person.name}")
    print(f"  Tier: {person.tier}")
    print(f"  Base: {person.base_credit}")


if __name__ == "__main__":
    try:
        main()
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
