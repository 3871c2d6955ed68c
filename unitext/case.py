"""
Case conversion.

Single characters use an ASCII fast path and otherwise the simple (one to
one) Unicode case mappings, so converting a string never changes its
length. That is what lets `AnnotatedText` keep its annotation spans as they
are.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, NamedTuple, Tuple, Union

from . import ucd
from .validate import is_malformed


class Annotation(NamedTuple):
    start: int
    end: int
    label: str
    value: Any = None


@dataclass(frozen=True)
class AnnotatedText:
    """Text with out-of-band metadata attached to spans of characters."""

    text: str
    annotations: Tuple[Annotation, ...] = ()

    def __str__(self):
        return self.text

    def __len__(self):
        return len(self.text)

    def __iter__(self):
        return iter(self.text)


Text = Union[str, AnnotatedText]


def to_lower(c: str) -> str:
    """Lowercase a single character.

    >>> to_lower("Ö")
    'ö'
    """
    if c < "\x80":
        return chr(ord(c) + 0x20) if "A" <= c <= "Z" else c
    if is_malformed(c):
        return c
    return chr(ucd.to_lower(ord(c)))


def to_upper(c: str) -> str:
    if c < "\x80":
        return chr(ord(c) - 0x20) if "a" <= c <= "z" else c
    if is_malformed(c):
        return c
    return chr(ucd.to_upper(ord(c)))


def to_title(c: str) -> str:
    """Titlecase a single character; differs from uppercase for digraphs
    such as 'ǆ' -> 'ǅ'."""
    if c < "\x80":
        return chr(ord(c) - 0x20) if "a" <= c <= "z" else c
    if is_malformed(c):
        return c
    return chr(ucd.to_title(ord(c)))


def chartransform(func: Callable[[str], str], s: Text) -> Text:
    """Apply `func` to every character of `s`, keeping annotations."""
    if isinstance(s, AnnotatedText):
        return AnnotatedText("".join(map(func, s.text)), s.annotations)
    return "".join(map(func, s))


def lowercase(s: Text) -> Text:
    return chartransform(to_lower, s)


def uppercase(s: Text) -> Text:
    return chartransform(to_upper, s)


def _first(func: Callable[[str], str], s: Text) -> Text:
    text = str(s)
    if not text:
        out = ""
    else:
        out = func(text[0]) + text[1:]
    if isinstance(s, AnnotatedText):
        return AnnotatedText(out, s.annotations)
    return out


def uppercase_first(s: Text) -> Text:
    """Titlecase only the first character.

    >>> uppercase_first("python")
    'Python'
    """
    return _first(to_title, s)


def lowercase_first(s: Text) -> Text:
    return _first(to_lower, s)
