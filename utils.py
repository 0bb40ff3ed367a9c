# utils.py
from typing import Any, Optional, Sequence


def lower_text(s: Optional[str]) -> str:
    """Lowercase for comparisons. None becomes an empty string."""
    if not s:
        return ""
    return s.lower()


def safe_first(lst: Sequence[Any]):
    return lst[0] if lst else None


def text_or_none(value: Any) -> Optional[str]:
    """
    Return a stripped string, or None for blanks and non-strings.
    RestCountries occasionally sends nulls or empty strings for optional fields.
    """
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None
