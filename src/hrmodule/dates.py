"""Date convention at the API boundary.

The remote API stores every date as a full RFC 3339 timestamp. Forms
and filters work with date-only ``YYYY-MM-DD`` strings, so values are
widened on the way out and narrowed for display.
"""

MIDNIGHT_UTC = "T00:00:00Z"


def to_timestamp(value: str | None) -> str | None:
    """Widen a ``YYYY-MM-DD`` date to a midnight-UTC timestamp.

    Values that already carry a time component pass through unchanged.
    Empty and ``None`` inputs return ``None``.

    ``"2025-03-01"`` -> ``"2025-03-01T00:00:00Z"``
    """
    if not value:
        return None
    if "T" in value:
        return value
    return f"{value}{MIDNIGHT_UTC}"


def from_timestamp(value: str | None) -> str:
    """Extract the date portion of a timestamp, for form inputs.

    ``"2025-03-01T08:30:00Z"`` -> ``"2025-03-01"``. Empty input gives ``""``.
    """
    if not value:
        return ""
    return value.split("T", 1)[0]
