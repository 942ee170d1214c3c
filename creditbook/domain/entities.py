"""Ledger entities and their stored (camelCase JSON) shape."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from creditbook.domain.rules import parse_int


def _required_int(record: Mapping[str, Any], key: str) -> int:
    value = parse_int(record.get(key))
    if value is None:
        raise ValueError(f"field {key!r} must be an integer")
    return value


def _optional_int(record: Mapping[str, Any], key: str) -> Optional[int]:
    if record.get(key) is None:
        return None
    return _required_int(record, key)


@dataclass
class Person:
    id: int
    name: str
    tier: int
    base_credit: int
    active: bool = True
    created_at: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "tier": self.tier,
            "baseCredit": self.base_credit,
            "active": self.active,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "Person":
        if not isinstance(record, Mapping):
            raise ValueError("person record must be an object")
        name = record.get("name")
        if not isinstance(name, str):
            raise ValueError("field 'name' must be a string")
        active = record.get("active", True)
        if not isinstance(active, bool):
            raise ValueError("field 'active' must be a boolean")
        return cls(
            id=_required_int(record, "id"),
            name=name,
            tier=_required_int(record, "tier"),
            base_credit=_required_int(record, "baseCredit"),
            active=active,
            created_at=_optional_int(record, "createdAt"),
        )


@dataclass(frozen=True)
class CreditEvent:
    id: int
    person_id: int
    delta: int
    note: str
    created_at: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "personId": self.person_id,
            "delta": self.delta,
            "note": self.note,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "CreditEvent":
        if not isinstance(record, Mapping):
            raise ValueError("event record must be an object")
        return cls(
            id=_required_int(record, "id"),
            person_id=_required_int(record, "personId"),
            delta=_required_int(record, "delta"),
            note=str(record.get("note") or ""),
            created_at=_optional_int(record, "createdAt"),
        )
