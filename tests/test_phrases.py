from __future__ import annotations

from datetime import datetime, timezone

import pytest

from skyspeak.speech.phrases import clock_phrase, relative_day_phrase
from tests.builders import at


@pytest.mark.parametrize(
    ("hour", "expected"),
    [
        (0, "midnight"),
        (1, "1 AM"),
        (8, "8 AM"),
        (11, "11 AM"),
        (12, "noon"),
        (13, "1 PM"),
        (18, "6 PM"),
        (23, "11 PM"),
    ],
)
def test_clock_phrase(hour: int, expected: str) -> None:
    assert clock_phrase(at(hour, 30)) == expected


def test_relative_day_near_days() -> None:
    now = at(10)
    assert relative_day_phrase(now, at(23)) == "today"
    assert relative_day_phrase(now, at(0, day=7)) == "tomorrow"
    assert relative_day_phrase(now, at(23, day=5)) == "yesterday"


def test_relative_day_falls_back_to_weekday() -> None:
    now = at(10)
    assert relative_day_phrase(now, at(9, day=8)) == "Friday"
    assert relative_day_phrase(now, at(9, day=9)) == "Saturday"
    # A week out reads the same as today's weekday.
    assert relative_day_phrase(now, at(9, day=13)) == "Wednesday"


def test_relative_day_uses_target_timezone() -> None:
    # 02:00 UTC on the 7th is still the evening of the 6th in New York.
    now = datetime(2024, 3, 7, 2, 0, tzinfo=timezone.utc)
    assert relative_day_phrase(now, at(22)) == "today"
    assert relative_day_phrase(now, at(8, day=7)) == "tomorrow"
