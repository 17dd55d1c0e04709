"""ID generation for newly created records."""

from typing import Any, Iterable, Mapping


def numeric_id(value: Any) -> int:
    """Return the integer value of a record ID, or 0 when it is not numeric."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value)
    return 0


def max_id(records: Iterable[Mapping[str, Any]]) -> int:
    """Get the largest numeric ID among records (0 when there are none)."""
    return max((numeric_id(record.get("id")) for record in records), default=0)


def next_id(current_max: int) -> str:
    """
    Generate the ID for a new record.

    Args:
        current_max: Largest numeric ID currently in use (0 if none)

    Returns:
        The new ID as a string, strictly greater than ``current_max``
    """
    return str(max(current_max, 0) + 1)
