"""Built-in seed data, used for any collection that has nothing valid stored."""
from __future__ import annotations

from creditbook.domain.entities import CreditEvent, Person

ONE_HOUR_MS = 3_600_000


def seed_people() -> list[Person]:
    return [
        Person(id=1, name="Zahra", tier=1, base_credit=70),
        Person(id=2, name="Kaman", tier=2, base_credit=55),
        Person(id=3, name="Ahoo", tier=2, base_credit=55),
        Person(id=4, name="Ali", tier=1, base_credit=70),
    ]


def seed_events(now_ms: int) -> list[CreditEvent]:
    return [
        CreditEvent(id=1, person_id=1, delta=-10, note="cancel last minute", created_at=now_ms - ONE_HOUR_MS),
    ]
