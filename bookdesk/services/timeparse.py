"""Central timestamp parsing for appointment input.

``parse_timestamp`` never raises; it returns either a ``Timestamp`` or a
``ParseFailure`` and the caller decides what a failure means.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from bookdesk.core.errors import ValidationError


@dataclass(frozen=True)
class Timestamp:
    value: datetime


@dataclass(frozen=True)
class ParseFailure:
    raw: object
    reason: str


ParseResult = Timestamp | ParseFailure


def parse_timestamp(raw: object) -> ParseResult:
    """Parse an ISO-8601 string into naive UTC.

    Offsets (including a trailing ``Z``) are honoured and normalised to UTC;
    values without an offset are taken as UTC already.
    """
    if not isinstance(raw, str):
        return ParseFailure(raw, "expected an ISO-8601 string")
    text = raw.strip()
    if not text:
        return ParseFailure(raw, "empty value")
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return ParseFailure(raw, "not an ISO-8601 date/time")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return Timestamp(parsed)


def require_timestamp(raw: object, field: str) -> datetime:
    """Like ``parse_timestamp`` but raises ValidationError on failure."""
    result = parse_timestamp(raw)
    if isinstance(result, ParseFailure):
        raise ValidationError(f"Invalid {field}: {result.reason}")
    return result.value


def optional_timestamp(raw: object, field: str) -> datetime | None:
    if raw is None or raw == "":
        return None
    return require_timestamp(raw, field)
