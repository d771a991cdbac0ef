"""Extended regular expressions used to select benchmarks by name."""

from __future__ import annotations

import re
import string

_CHARACTER_CLASSES = {
    "alpha": "a-zA-Z",
    "digit": "0-9",
    "alnum": "a-zA-Z0-9",
    "upper": "A-Z",
    "lower": "a-z",
    "space": " \\t\\n\\r\\f\\v",
    "blank": " \\t",
    "punct": re.escape(string.punctuation),
    "xdigit": "0-9A-Fa-f",
    "cntrl": "\\x00-\\x1f\\x7f",
    "print": "\\x20-\\x7e",
    "graph": "\\x21-\\x7e",
}

_CLASS_NAME = re.compile(r"\[:([A-Za-z]*):\]")


class RegexError(ValueError):
    """Raised when a regular expression cannot be compiled."""


def _translate(spec: str) -> str:
    def replace(found: re.Match) -> str:
        name = found.group(1)
        if name not in _CHARACTER_CLASSES:
            raise RegexError(f"Invalid character class name: {name!r}")
        return _CHARACTER_CLASSES[name]

    return _CLASS_NAME.sub(replace, spec)


class Regex:
    """A compiled extended regular expression that matches anywhere in a string."""

    def __init__(self, spec: str) -> None:
        self.spec = spec
        try:
            self._compiled = re.compile(_translate(spec))
        except re.error as exc:
            raise RegexError(str(exc)) from exc

    def match(self, text: str) -> bool:
        """Return whether *text* contains a match for the expression."""
        return self._compiled.search(text) is not None

    def __repr__(self) -> str:
        return f"Regex({self.spec!r})"