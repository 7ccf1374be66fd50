"""Trading-date normalization utilities."""

from datetime import date, datetime
from typing import Any, Optional


def to_iso_date(value: Any) -> str:
    """
    Normalize a trading date to its ISO ``YYYY-MM-DD`` string.
    
    Args:
        value: ``date``, ``datetime`` or ISO-8601 date string.
    
    Returns:
        ISO date string. ISO strings sort lexicographically in calendar order.
    
    Raises:
        ValueError: If the value cannot be interpreted as a calendar date.
    """
    if isinstance(value, datetime):
        return value.date().isoformat()
    
    if isinstance(value, date):
        return value.isoformat()
    
    if isinstance(value, str):
        s = value.strip()
        try:
            return date.fromisoformat(s).isoformat()
        except ValueError:
            pass
        # Accept full timestamps, keeping only the calendar date
        try:
            return datetime.fromisoformat(s).date().isoformat()
        except ValueError as e:
            raise ValueError(f"Invalid trading date: {value!r}") from e
    
    raise ValueError(f"Unsupported trading date type: {type(value).__name__}")


def parse_iso_date(value: Any) -> Optional[str]:
    """Like to_iso_date(), but returns None instead of raising."""
    if value is None:
        return None
    try:
        return to_iso_date(value)
    except ValueError:
        return None
