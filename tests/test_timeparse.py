"""Central timestamp parser."""

from datetime import datetime

import pytest

from bookdesk.core.errors import ValidationError
from bookdesk.services.timeparse import (
    ParseFailure,
    Timestamp,
    optional_timestamp,
    parse_timestamp,
    require_timestamp,
)


@pytest.mark.parametrize(("raw", "expected"), [
    ("2026-11-02T10:00:00", datetime(2026, 11, 2, 10, 0)),
    ("2026-11-02T10:00", datetime(2026, 11, 2, 10, 0)),
    ("2026-11-02", datetime(2026, 11, 2)),
    ("2026-11-02T10:00:00Z", datetime(2026, 11, 2, 10, 0)),
    ("2026-11-02T12:30:00+02:00", datetime(2026, 11, 2, 10, 30)),
    ("  2026-11-02T10:00:00  ", datetime(2026, 11, 2, 10, 0)),
])
def test_valid_inputs(raw, expected):
    assert parse_timestamp(raw) == Timestamp(expected)


@pytest.mark.parametrize("raw", ["", "   ", "tomorrow", "2026-13-01", "2026-02-30T10:00", None, 1730541600])
def test_invalid_inputs_are_failures(raw):
    result = parse_timestamp(raw)
    assert isinstance(result, ParseFailure)
    assert result.raw == raw
    assert result.reason


def test_require_raises_validation_error():
    with pytest.raises(ValidationError) as exc_info:
        require_timestamp("soon", "start date/time")
    assert "start date/time" in exc_info.value.message


def test_optional_accepts_missing():
    assert optional_timestamp(None, "end") is None
    assert optional_timestamp("", "end") is None
    assert optional_timestamp("2026-11-02T10:00:00", "end") == datetime(2026, 11, 2, 10, 0)
    with pytest.raises(ValidationError):
        optional_timestamp("later", "end")
