"""Domain types and rules (entities, input parsing, id allocation, seeds)."""

from .entities import CreditEvent, Person

__all__ = ["CreditEvent", "Person"]
