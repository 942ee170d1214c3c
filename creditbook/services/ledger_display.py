"""Helpers that shape ledger entities for the list/detail pages and the JSON API."""
from __future__ import annotations

from creditbook.core.utils import fmt_date, fmt_delta
from creditbook.domain.entities import CreditEvent, Person
from creditbook.domain.rules import ALLOWED_DELTAS, TIER_DEFAULT_BASE
from creditbook.services.ledger_service import LedgerService

DELTA_CHOICES = [(d, fmt_delta(d)) for d in ALLOWED_DELTAS]
TIER_CHOICES = sorted(TIER_DEFAULT_BASE)


def event_row(event: CreditEvent) -> dict:
    return {
        "id": event.id,
        "delta": event.delta,
        "delta_label": fmt_delta(event.delta),
        "positive": event.delta > 0,
        "note": event.note,
        "when": fmt_date(event.created_at),
    }


def person_card(ledger: LedgerService, person: Person) -> dict:
    """List-view entry: identity plus the derived score."""
    score = ledger.score_for(person.id)
    return {
        "id": person.id,
        "name": person.name,
        "tier": person.tier,
        "score": score,
        "event_count": ledger.event_count_for(person.id),
        "negative": score < 0,
    }


def person_detail(ledger: LedgerService, person: Person) -> dict:
    card = person_card(ledger, person)
    card.update(
        {
            "base_credit": person.base_credit,
            "active": person.active,
            "history": [event_row(e) for e in ledger.history_for(person.id)],
        }
    )
    return card


def person_payload(ledger: LedgerService, person: Person, *, with_history: bool = False) -> dict:
    """Stored shape of a person plus score/eventCount, for the JSON API."""
    payload = person.to_dict()
    payload["score"] = ledger.score_for(person.id)
    payload["eventCount"] = ledger.event_count_for(person.id)
    if with_history:
        payload["history"] = [e.to_dict() for e in ledger.history_for(person.id)]
    return payload
