"""Shell-style splitting of free-form "extra options" strings."""

from typing import List, Optional

_SEPARATORS = frozenset(" \t\r\n\f\v")


def tokenize_options(raw: Optional[str]) -> List[str]:
    """Split *raw* into argument tokens the way a shell would pass them.

    Rules
    -----
    • Runs of unquoted ASCII whitespace separate tokens.
    • Text inside single quotes is taken literally and the quotes are
      dropped; quoted and unquoted segments that touch form one token.
    • Double quotes and backslashes are ordinary characters.
    • An unterminated quote takes the rest of the input literally.
    """
    if raw is None:
        return []

    tokens: List[str] = []
    current: List[str] = []
    in_token = False
    in_quote = False

    for ch in raw:
        if in_quote:
            if ch == "'":
                in_quote = False
            else:
                current.append(ch)
            continue

        if ch == "'":
            in_quote = True
            in_token = True
        elif ch in _SEPARATORS:
            if in_token:
                tokens.append("".join(current))
                current = []
                in_token = False
        else:
            current.append(ch)
            in_token = True

    if in_token:
        tokens.append("".join(current))

    return tokens


__all__ = ["tokenize_options"]
