"""
Grapheme cluster segmentation following Unicode Standard Annex #29.

The break engine is a thin layer over the UCD service that owns the running
`BreakState` of a scan. Malformed characters always start a new cluster and
reset the state, so a scan resynchronizes after bad input.

https://www.unicode.org/reports/tr29/
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from . import ucd
from .validate import is_malformed


@dataclass
class BreakState:
    """Running state of one grapheme scan. Never share between scans."""

    value: int = 0

    def reset(self) -> None:
        self.value = 0


def is_grapheme_break(c1: str, c2: str) -> bool:
    """Whether there is a cluster boundary between two adjacent characters.

    This only sees the pair, so it cannot be used to scan runs of three or
    more characters (emoji ZWJ sequences, regional indicator pairs).
    """
    return is_malformed(c1) or is_malformed(c2) or ucd.grapheme_break(ord(c1), ord(c2))


def is_grapheme_break_stateful(state: BreakState, c1: str, c2: str) -> bool:
    """Stateful boundary test between `c1` and the following `c2`."""
    if is_malformed(c1) or is_malformed(c2):
        state.value = 0
        return True
    brk, state.value = ucd.grapheme_break_stateful(ord(c1), ord(c2), state.value)
    return brk


Step = Tuple[str, Tuple[int, int]]


@functools.total_ordering
class GraphemeIterator:
    """Lazy sequence of the grapheme clusters of `text`.

    Iteration always starts from the beginning with a fresh state. To resume
    part-way, call `step` with the `(state, position)` pair returned by the
    previous step.

        >>> list(graphemes("éa"))
        ['é', 'a']
    """

    __slots__ = ("text",)

    def __init__(self, text: str):
        self.text = text

    def step(self, state: int = 0, position: int = 0) -> Optional[Step]:
        """Return the cluster starting at `position` and the pair to resume
        from, or None at the end of the text."""
        s = self.text
        if position >= len(s):
            return None
        brk = BreakState(state)
        c0 = s[position]
        k = position + 1
        while k < len(s):
            c = s[k]
            if is_grapheme_break_stateful(brk, c0, c):
                break
            c0 = c
            k += 1
        return s[position:k], (brk.value, k)

    def __iter__(self) -> Iterator[str]:
        carried = (0, 0)
        while True:
            result = self.step(*carried)
            if result is None:
                return
            cluster, carried = result
            yield cluster

    def __len__(self) -> int:
        # one pass over the text, O(n)
        state = BreakState()
        c0 = "\x00"
        n = 0
        for c in self.text:
            n += is_grapheme_break_stateful(state, c0, c)
            c0 = c
        return n

    def __eq__(self, other):
        if not isinstance(other, GraphemeIterator):
            return NotImplemented
        return self.text == other.text

    def __lt__(self, other):
        if not isinstance(other, GraphemeIterator):
            return NotImplemented
        return self.text < other.text

    def __hash__(self):
        return hash(self.text)

    def __repr__(self):
        return f"<length-{len(self)} GraphemeIterator for {self.text!r}>"


def graphemes(text: str) -> GraphemeIterator:
    return GraphemeIterator(text)
