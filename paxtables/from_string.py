"""Conversion of text to strings, numbers and tuples of them."""

from __future__ import annotations

import re
from collections.abc import Sequence

__all__ = ["ConversionError", "from_string", "tuple_from_strings"]

_INTEGER = re.compile(r"-?[0-9]+")
_FLOAT = re.compile(
    r"-?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class ConversionError(ValueError):
    """Raised when text cannot be read as a number."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Could not convert '{text}' to numerical.")
        self.text = text


def _number(kind: type, text: str):
    if not text:
        raise ConversionError("<empty string>")
    if text[0] == "+":
        text = text[1:]
    pattern = _INTEGER if issubclass(kind, int) else _FLOAT
    match = pattern.match(text)
    if match is None:
        raise ConversionError(text)
    return kind(match.group())


def from_string(kind: type, text: str):
    """Read text as kind: a str type, an int type or a float type.

    Numbers may carry one leading '+'; the longest valid numeric prefix is
    used and anything after it is ignored.
    """
    if isinstance(kind, type):
        if issubclass(kind, str):
            return kind(text)
        if issubclass(kind, bool):
            raise TypeError("Cannot convert text to bool.")
        if issubclass(kind, (int, float)):
            return _number(kind, text)
    raise TypeError(f"Cannot convert text to {kind!r}.")


def tuple_from_strings(kinds: Sequence[type], texts: Sequence[str]) -> tuple:
    """Convert each of texts to the kind at the same position.

    Texts beyond the number of kinds are ignored.
    """
    kinds = tuple(kinds)
    texts = list(texts)
    if len(texts) < len(kinds):
        raise ValueError(f"Expected at least {len(kinds)} values, got {len(texts)}.")
    return tuple(from_string(kind, text) for kind, text in zip(kinds, texts))