"""Creditbook: a small ledger of people, credit events and derived scores."""
