"""Decides whether a file name is one that should be indexed as a program."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

WILDCARD = "Wildcard"
REGEX = "Regex"

_CLASS_SPECIALS = "\\^[]"


class PatternError(ValueError):
    """Raised when a pattern or pattern type cannot be used."""


def _translate_class(chars: Iterator[str], pattern: str) -> str:
    negate = False
    members: list[str] = []
    ch = next(chars, None)
    if ch in ("!", "^"):
        negate = True
        ch = next(chars, None)
    if ch == "]":
        members.append(ch)
        ch = next(chars, None)
    while ch is not None and ch != "]":
        members.append(ch)
        ch = next(chars, None)
    if ch is None:
        raise PatternError(f"unclosed character class in wildcard {pattern!r}")
    body = "".join("\\" + c if c in _CLASS_SPECIALS else c for c in members)
    return "[" + ("^" if negate else "") + body + "]"


def _translate_glob(pattern: str) -> str:
    """Turn a wildcard pattern into a regular expression for full matching."""
    parts: list[str] = []
    in_alternation = False
    chars = iter(pattern)
    for ch in chars:
        if ch == "*":
            if not parts or parts[-1] != ".*":
                parts.append(".*")
        elif ch == "?":
            parts.append(".")
        elif ch == "[":
            parts.append(_translate_class(chars, pattern))
        elif ch == "{":
            if in_alternation:
                raise PatternError(f"nested alternation in wildcard {pattern!r}")
            in_alternation = True
            parts.append("(?:")
        elif ch == "}" and in_alternation:
            in_alternation = False
            parts.append(")")
        elif ch == "," and in_alternation:
            parts.append("|")
        else:
            parts.append(re.escape(ch))
    if in_alternation:
        raise PatternError(f"unclosed alternation in wildcard {pattern!r}")
    return "(?s:" + "".join(parts) + ")"


def _compile(expression: str, original: str, kind: str) -> re.Pattern[str]:
    try:
        return re.compile(expression)
    except re.error as exc:
        raise PatternError(f"invalid {kind} {original!r}: {exc}") from exc


class PathChecker:
    """Matches lower-cased file names against wildcards or regular expressions.

    A name containing any of the excluded keys (compared in lower case) never
    matches. Wildcards must match the whole name; regular expressions may match
    anywhere in it.
    """

    def __init__(
        self,
        patterns: Iterable[str],
        pattern_type: str,
        excluded_keys: Iterable[str],
    ) -> None:
        self._excluded_keys = [key.lower() for key in excluded_keys]
        if pattern_type == WILDCARD:
            self._is_glob = True
            self._patterns = [
                _compile(_translate_glob(p), p, "wildcard") for p in patterns
            ]
        elif pattern_type == REGEX:
            self._is_glob = False
            self._patterns = [_compile(p, p, "regular expression") for p in patterns]
        else:
            raise PatternError(f"unknown pattern type: {pattern_type}")

    def is_match(self, path: str) -> bool:
        """Return True if ``path`` is wanted."""
        path = path.lower()
        if any(key in path for key in self._excluded_keys):
            return False
        if self._is_glob:
            return any(p.fullmatch(path) for p in self._patterns)
        return any(p.search(path) for p in self._patterns)