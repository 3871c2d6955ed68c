from __future__ import annotations

import io
from typing import Callable, Optional

from .case import AnnotatedText, Text, to_lower, to_title
from .chars import is_letter
from .graphemes import BreakState, is_grapheme_break_stateful


def is_word_separator(c: str) -> bool:
    """Default separator: anything that is not a letter."""
    return not is_letter(c)


def titlecase(
    s: Text,
    wordsep: Optional[Callable[[str], bool]] = None,
    strict: bool = True,
) -> Text:
    """Capitalize the first character of each word in `s`.

    A character separates words when it starts a new grapheme cluster and
    `wordsep` accepts it, so combining marks never split a word. With
    `strict`, every other character is lowercased; otherwise it is left as
    is.

    >>> titlecase("the julia programming language")
    'The Julia Programming Language'
    >>> titlecase("ISS - international space station", strict=False)
    'ISS - International Space Station'
    """
    if wordsep is None:
        wordsep = is_word_separator

    start_word = True
    state = BreakState()
    c0 = "\x00"
    b = io.StringIO()
    for c in str(s):
        if is_grapheme_break_stateful(state, c0, c) and wordsep(c):
            b.write(c)
            start_word = True
        else:
            b.write(to_title(c) if start_word else to_lower(c) if strict else c)
            start_word = False
        c0 = c

    if isinstance(s, AnnotatedText):
        return AnnotatedText(b.getvalue(), s.annotations)
    return b.getvalue()
