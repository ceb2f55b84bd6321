from datetime import date, datetime, tzinfo

import pendulum


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp, accepting a trailing ``Z`` for UTC.

    Raises:
        ValueError: if ``value`` is not a valid ISO 8601 timestamp.
    """
    return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))


def resolve_timezone(name: str | None = None) -> tzinfo:
    """Return the IANA zone ``name``, or the machine's local zone when unset.

    Both are full zones with their daylight-saving rules, so each calendar date
    gets the offset in force on that date rather than today's offset.
    """
    if name:
        return pendulum.timezone(name)
    return pendulum.local_timezone()


def local_today(tz: tzinfo) -> date:
    return datetime.now(tz).date()
