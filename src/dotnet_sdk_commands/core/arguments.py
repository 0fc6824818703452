"""Ordered, append-only argument lists with per-token masking."""

import os
import shlex
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple, Union

REDACTION_MARKER = "********"


@dataclass(frozen=True)
class Token:
    """A single process argument."""

    text: str
    sensitive: bool = False

    @property
    def display(self) -> str:
        """The text to show in logs (redacted when sensitive)."""
        return REDACTION_MARKER if self.sensitive else self.text


class ArgumentList:
    """The tokens of one invocation of the underlying tool.

    The first token is always the executable. Tokens can only be appended;
    the list is never reordered. Sensitive tokens keep their literal value
    for the process but are redacted in every display form.
    """

    def __init__(self, executable: Union[str, os.PathLike]):
        self._tokens: List[Token] = []
        self.append(os.fspath(executable))

    def append(self, text: str, sensitive: bool = False) -> None:
        """Append one token."""
        if not isinstance(text, str):
            raise TypeError(f"Argument must be a string, got {type(text).__name__}")
        self._tokens.append(Token(text, sensitive))

    def extend(self, texts: Iterable[str], sensitive: bool = False) -> None:
        """Append several tokens sharing the same sensitivity."""
        for text in texts:
            self.append(text, sensitive)

    @property
    def executable(self) -> str:
        return self._tokens[0].text

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return tuple(self._tokens)

    @property
    def masks(self) -> List[bool]:
        return [token.sensitive for token in self._tokens]

    def to_command(self) -> List[str]:
        """Literal token texts, as handed to the process runner."""
        return [token.text for token in self._tokens]

    def to_display_string(self) -> str:
        """Shell-quoted rendering with every sensitive token redacted."""
        return " ".join(
            token.display if token.sensitive else shlex.quote(token.text)
            for token in self._tokens
        )

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"ArgumentList({self.to_display_string()!r})"


__all__ = ["REDACTION_MARKER", "Token", "ArgumentList"]
