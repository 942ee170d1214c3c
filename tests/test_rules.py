from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote creditbook seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from creditbook.core.utils import fmt_date, fmt_delta  # noqa: E402
from creditbook.domain.entities import Person  # noqa: E402
from creditbook.domain.rules import (  # noqa: E402
    clean_note,
    next_id,
    parse_delta,
    parse_int,
    parse_tier,
)


@pytest.mark.parametrize(
    "raw, expected",
    [(5, 5), (" 12 ", 12), ("-10", -10), ("3.0", 3), (4.0, 4), ("", None), ("  ", None),
     (None, None), ("1e1", 10), ("2.5", None), ("nan", None), (True, None), ([1], None)],
)
def test_parse_int(raw, expected):
    assert parse_int(raw) == expected


def test_parse_tier_and_delta_sets():
    assert [parse_tier(v) for v in ("1", 2, 3.0, 0, "4")] == [1, 2, 3, None, None]
    assert [parse_delta(v) for v in ("-10", -5, "+5", 10, 7)] == [-10, -5, 5, 10, None]


def test_clean_note_placeholder():
    assert clean_note("  ") == "(no note)"
    assert clean_note(None) == "(no note)"
    assert clean_note(" hi ") == "hi"


def test_next_id():
    assert next_id([]) == 1
    people = [Person(id=3, name="a", tier=1, base_credit=1), Person(id=8, name="b", tier=1, base_credit=1)]
    assert next_id(people) == 9


def test_formatting_helpers():
    assert fmt_date(0) == "1970-01-01 00:00"
    assert fmt_date(None) == ""
    assert fmt_delta(5) == "+5"
    assert fmt_delta(-10) == "-10"
