"""Read-only JSON views of the ledger."""
from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from creditbook.routers.people import _get_ledger
from creditbook.services.ledger_display import person_payload

router = APIRouter(prefix="/api", tags=["api"])


@router.get("/people")
def api_people(request: Request):
    ledger = _get_ledger(request)
    return [person_payload(ledger, p) for p in ledger.ranked_active_people()]


@router.get("/people/{person_id}")
def api_person(person_id: int, request: Request):
    ledger = _get_ledger(request)
    person = ledger.get_person(person_id)
    if not person:
        raise HTTPException(404, "Pessoa nao encontrada")
    return person_payload(ledger, person, with_history=True)
