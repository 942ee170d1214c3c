"""
Ledger use cases: people, credit events and derived scores.

The service owns both collections in memory, restores them from a storage
adapter at construction time and writes them back (full overwrite) after every
mutation. Scores are never stored; they are recomputed from the events.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Iterable, Mapping, Optional

from creditbook.core.config import get_settings
from creditbook.core.utils import now_ms
from creditbook.domain.entities import CreditEvent, Person
from creditbook.domain.rules import (
    clean_name,
    clean_note,
    default_base,
    is_blank,
    next_id,
    parse_delta,
    parse_int,
    parse_tier,
)
from creditbook.domain.seeds import seed_events, seed_people


class LedgerError(Exception):
    """Base class for ledger-related exceptions."""


class ValidationError(LedgerError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


NAME_REQUIRED = "Name required"
TIER_INVALID = "Tier must be 1,2,3"
BASE_INVALID = "Base credit must be a number"
DELTA_INVALID = "Delta must be -10, -5, +5 or +10"


class LedgerService:
    """Queries and validated mutations over the people/events collections."""

    def __init__(
        self,
        storage,
        *,
        people_seed: Optional[Iterable[Person]] = None,
        events_seed: Optional[Iterable[CreditEvent]] = None,
        clock: Optional[Callable[[], int]] = None,
        people_key: Optional[str] = None,
        events_key: Optional[str] = None,
    ) -> None:
        settings = get_settings()
        self.storage = storage
        self.clock = clock or now_ms
        self.people_key = people_key or settings.people_key
        self.events_key = events_key or settings.events_key
        self._people: list[Person] = list(people_seed) if people_seed is not None else seed_people()
        self._events: list[CreditEvent] = (
            list(events_seed) if events_seed is not None else seed_events(self.clock())
        )
        self.load()

    # -------------------------------------- storage --------------------------------------
    def _read_collection(self, key: str, factory: Callable[[Mapping[str, Any]], Any]) -> Optional[list]:
        try:
            raw = self.storage.get(key)
        except Exception as exc:
            print(f"[storage] Falha ao ler '{key}': {exc}")
            return None
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except (TypeError, ValueError, RecursionError):
            print(f"[storage] Conteudo invalido em '{key}'; usando dados iniciais.")
            return None
        if not isinstance(data, list):
            return None
        try:
            return [factory(record) for record in data]
        except (TypeError, ValueError) as exc:
            print(f"[storage] Registro invalido em '{key}' ({exc}); usando dados iniciais.")
            return None

    def load(self) -> None:
        """Restore both collections; each one keeps its seed if its blob is unusable."""
        people = self._read_collection(self.people_key, Person.from_dict)
        if people is not None:
            self._people = people
        events = self._read_collection(self.events_key, CreditEvent.from_dict)
        if events is not None:
            self._events = events

    def persist(self) -> None:
        people_blob = json.dumps([p.to_dict() for p in self._people], ensure_ascii=False)
        events_blob = json.dumps([e.to_dict() for e in self._events], ensure_ascii=False)
        try:
            self.storage.set(self.people_key, people_blob)
            self.storage.set(self.events_key, events_blob)
        except Exception as exc:
            print(f"[storage] Falha ao salvar ledger: {exc}")

    def close(self) -> None:
        self.persist()

    # -------------------------------------- queries --------------------------------------
    @property
    def people(self) -> tuple[Person, ...]:
        return tuple(self._people)

    @property
    def events(self) -> tuple[CreditEvent, ...]:
        return tuple(self._events)

    def get_person(self, person_id: Any) -> Optional[Person]:
        pid = parse_int(person_id)
        if pid is None:
            return None
        for person in self._people:
            if person.id == pid:
                return person
        return None

    def events_for(self, person_id: Any) -> list[CreditEvent]:
        pid = parse_int(person_id)
        return [e for e in self._events if e.person_id == pid]

    def history_for(self, person_id: Any) -> list[CreditEvent]:
        """Events of a person, most recent first."""
        return sorted(self.events_for(person_id), key=lambda e: e.created_at or 0, reverse=True)

    def event_count_for(self, person_id: Any) -> int:
        return len(self.events_for(person_id))

    def score_for(self, person_id: Any) -> int:
        person = self.get_person(person_id)
        if not person:
            return 0
        return person.base_credit + sum(e.delta for e in self.events_for(person.id))

    def ranked_active_people(self) -> list[Person]:
        active = [p for p in self._people if p.active]
        scores = {p.id: self.score_for(p.id) for p in active}
        return sorted(active, key=lambda p: (-scores[p.id], p.name.casefold(), p.name))

    # -------------------------------------- mutations --------------------------------------
    def add_person(self, name: Any, tier: Any, base_override: Any = None) -> Person:
        clean = clean_name(name)
        if not clean:
            raise ValidationError(NAME_REQUIRED)
        tier_value = parse_tier(tier)
        if tier_value is None:
            raise ValidationError(TIER_INVALID)
        if is_blank(base_override):
            base_credit = default_base(tier_value)
        else:
            base_credit = parse_int(base_override)
            if base_credit is None:
                raise ValidationError(BASE_INVALID)
        person = Person(
            id=next_id(self._people),
            name=clean,
            tier=tier_value,
            base_credit=base_credit,
            active=True,
            created_at=self.clock(),
        )
        self._people.append(person)
        self.persist()
        return person

    def edit_person(self, person_id: Any, updates: Mapping[str, Any]) -> Optional[Person]:
        """
        Apply each valid field of ``updates`` (name, tier, baseCredit).

        Invalid or missing fields are left untouched; an unknown id is a no-op.
        """
        person = self.get_person(person_id)
        if not person:
            return None
        if updates.get("name") is not None:
            clean = clean_name(updates["name"])
            if clean:
                person.name = clean
        if updates.get("tier") is not None:
            tier_value = parse_tier(updates["tier"])
            if tier_value is not None:
                person.tier = tier_value
        base_raw = updates.get("baseCredit", updates.get("base_credit"))
        if not is_blank(base_raw):
            base_credit = parse_int(base_raw)
            if base_credit is not None:
                person.base_credit = base_credit
        self.persist()
        return person

    def deactivate_person(self, person_id: Any) -> Optional[Person]:
        person = self.get_person(person_id)
        if not person or not person.active:
            return None
        person.active = False
        self.persist()
        return person

    def log_event(self, person_id: Any, delta: Any, note: Any = "") -> Optional[CreditEvent]:
        delta_value = parse_delta(delta)
        if delta_value is None:
            raise ValidationError(DELTA_INVALID)
        # Inactive people still accept events (ledger corrections after offboarding).
        person = self.get_person(person_id)
        if not person:
            return None
        event = CreditEvent(
            id=next_id(self._events),
            person_id=person.id,
            delta=delta_value,
            note=clean_note(note),
            created_at=self.clock(),
        )
        self._events.append(event)
        self.persist()
        return event
