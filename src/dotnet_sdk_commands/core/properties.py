"""Parser for free-form ``key=value`` property blocks.

The syntax follows the usual line-oriented properties format:

- ``#`` at the start of a logical line marks a comment;
- blank lines are ignored;
- a trailing unescaped backslash joins the next physical line with a
  single space; whitespace after the backslash cancels the continuation;
- the first unescaped ``=`` separates key and value; a line without one
  is a key with an empty value.
"""

import logging
import re
from typing import List, NamedTuple, Optional

logger = logging.getLogger(__name__)

_ESCAPABLE = {"\\", "=", "#"}
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class PropertyEntry(NamedTuple):
    """One parsed property."""

    key: str
    value: str

    def to_argument(self, prefix: str) -> str:
        """Render the entry as a single ``<prefix>:<key>=<value>`` token."""
        return f"{prefix}:{self.key}={self.value}"


def _ends_with_continuation(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _unescape(text: str) -> str:
    out: List[str] = []
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        if ch == "\\" and i + 1 < n and text[i + 1] in _ESCAPABLE:
            out.append(text[i + 1])
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def _split_entry(line: str) -> PropertyEntry:
    i, n = 0, len(line)
    while i < n:
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "=":
            return PropertyEntry(_unescape(line[:i].strip()), _unescape(line[i + 1:].strip()))
        i += 1
    return PropertyEntry(_unescape(line.strip()), "")


def parse_properties(raw: Optional[str]) -> List[PropertyEntry]:
    """Parse a properties block into entries, in input order.

    Parsing is best-effort: a continuation at end of input simply drops the
    backslash, and entries with an empty key are skipped. Duplicate keys
    are kept.

    Args:
        raw: The properties text, or None.

    Returns:
        The parsed entries (possibly empty).
    """
    if raw is None:
        return []

    lines = _LINE_BREAK.split(raw)
    entries: List[PropertyEntry] = []
    i = 0

    while i < len(lines):
        logical = lines[i].lstrip()
        i += 1
        if not logical.strip() or logical.startswith("#"):
            continue

        while _ends_with_continuation(logical):
            logical = logical[:-1].rstrip()
            if i >= len(lines):
                break
            logical = f"{logical} {lines[i].lstrip()}"
            i += 1

        entry = _split_entry(logical)
        if not entry.key:
            logger.debug("Skipping property line without a key: %r", logical)
            continue
        entries.append(entry)

    return entries


__all__ = ["PropertyEntry", "parse_properties"]
