"""Normalization of multi-value option fields."""

from typing import Iterable, Optional, Union


def normalize_list(raw: Union[str, Iterable[Optional[str]], None]) -> Optional[list[str]]:
    """Turn a raw multi-value field into a clean list of entries.

    A single string is split on any run of whitespace, newlines included.
    A sequence of strings keeps each non-blank element as exactly one
    (trimmed) entry, even when it contains spaces.

    Args:
        raw: A whitespace-separated string, a sequence of strings, or None.

    Returns:
        The entries in their original order, or None when nothing is left.
    """
    if raw is None:
        return None
    if isinstance(raw, str):
        entries = raw.split()
    else:
        entries = [item.strip() for item in raw if item is not None and item.strip()]
    return entries or None


def fix_empty_and_trim(value: Optional[str]) -> Optional[str]:
    """Trim a scalar option; blank values count as not configured."""
    if value is None:
        return None
    value = value.strip()
    return value or None


__all__ = ["normalize_list", "fix_empty_and_trim"]
