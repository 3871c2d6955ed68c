"""
Per-character properties: general category, classification predicates and
display width.

Characters are one-character strings or integer code points.
"""

from __future__ import annotations

import enum
from typing import Union

from . import ucd
from .validate import is_malformed

Char = Union[str, int]


class CategoryCode(enum.IntEnum):
    CN = 0
    LU = 1
    LL = 2
    LT = 3
    LM = 4
    LO = 5
    MN = 6
    MC = 7
    ME = 8
    ND = 9
    NL = 10
    NO = 11
    PC = 12
    PD = 13
    PS = 14
    PE = 15
    PI = 16
    PF = 17
    PO = 18
    SM = 19
    SC = 20
    SK = 21
    SO = 22
    ZS = 23
    ZL = 24
    ZP = 25
    CC = 26
    CF = 27
    CS = 28
    CO = 29
    # not part of the Unicode table
    TOO_HIGH = 30
    MALFORMED = 31

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS = {
    CategoryCode.CN: "Other, not assigned",
    CategoryCode.LU: "Letter, uppercase",
    CategoryCode.LL: "Letter, lowercase",
    CategoryCode.LT: "Letter, titlecase",
    CategoryCode.LM: "Letter, modifier",
    CategoryCode.LO: "Letter, other",
    CategoryCode.MN: "Mark, nonspacing",
    CategoryCode.MC: "Mark, spacing combining",
    CategoryCode.ME: "Mark, enclosing",
    CategoryCode.ND: "Number, decimal digit",
    CategoryCode.NL: "Number, letter",
    CategoryCode.NO: "Number, other",
    CategoryCode.PC: "Punctuation, connector",
    CategoryCode.PD: "Punctuation, dash",
    CategoryCode.PS: "Punctuation, open",
    CategoryCode.PE: "Punctuation, close",
    CategoryCode.PI: "Punctuation, initial quote",
    CategoryCode.PF: "Punctuation, final quote",
    CategoryCode.PO: "Punctuation, other",
    CategoryCode.SM: "Symbol, math",
    CategoryCode.SC: "Symbol, currency",
    CategoryCode.SK: "Symbol, modifier",
    CategoryCode.SO: "Symbol, other",
    CategoryCode.ZS: "Separator, space",
    CategoryCode.ZL: "Separator, line",
    CategoryCode.ZP: "Separator, paragraph",
    CategoryCode.CC: "Other, control",
    CategoryCode.CF: "Other, format",
    CategoryCode.CS: "Other, surrogate",
    CategoryCode.CO: "Other, private use",
    CategoryCode.TOO_HIGH: "Invalid, too high",
    CategoryCode.MALFORMED: "Malformed, bad data",
}


def _codepoint(c: Char) -> int:
    if isinstance(c, str):
        return ord(c)
    if c < 0:
        raise ValueError(f"negative code point: {c}")
    return c


def category_code(c: Char) -> CategoryCode:
    """General category of `c`.

    Malformed characters get `MALFORMED`, integers above U+10FFFF `TOO_HIGH`.
    Negative integers raise `ValueError`.
    """
    if is_malformed(c):
        return CategoryCode.MALFORMED
    cp = _codepoint(c)
    if cp > ucd.MAX_CODEPOINT:
        return CategoryCode.TOO_HIGH
    return CategoryCode(ucd.category(cp))


def category_abbrev(c: Char) -> str:
    if is_malformed(c):
        return "Ma"
    cp = _codepoint(c)
    if cp > ucd.MAX_CODEPOINT:
        return "In"
    return ucd.category_abbrev(cp)


def category_string(c: Char) -> str:
    return category_code(c).label


def is_assigned(c: Char) -> bool:
    return CategoryCode.CN < category_code(c) <= CategoryCode.CO


def is_lowercase(c: str) -> bool:
    """Lowercase derived property; `is_lowercase('α')` is true."""
    return not is_malformed(c) and c.islower()


def is_uppercase(c: str) -> bool:
    return not is_malformed(c) and c.isupper()


def is_cased(c: Char) -> bool:
    return category_code(c) in (CategoryCode.LU, CategoryCode.LT, CategoryCode.LL)


def is_digit(c: str) -> bool:
    """ASCII decimal digits only."""
    return "0" <= c <= "9"


def is_letter(c: Char) -> bool:
    return CategoryCode.LU <= category_code(c) <= CategoryCode.LO


def is_numeric(c: Char) -> bool:
    # includes characters such as ¾
    return CategoryCode.ND <= category_code(c) <= CategoryCode.NO


def is_control(c: str) -> bool:
    return c <= "\x1f" or "\x7f" <= c <= "\x9f"


def is_punct(c: Char) -> bool:
    return CategoryCode.PC <= category_code(c) <= CategoryCode.PO


def is_space(c: str) -> bool:
    """ASCII whitespace, NEL, and anything in category Zs."""
    return (
        c == " "
        or "\t" <= c <= "\r"
        or c == "\x85"
        or ("\xa0" <= c and category_code(c) == CategoryCode.ZS)
    )


def is_print(c: Char) -> bool:
    return CategoryCode.LU <= category_code(c) <= CategoryCode.ZS


def is_xdigit(c: str) -> bool:
    return "0" <= c <= "9" or "a" <= c <= "f" or "A" <= c <= "F"


def char_width(c: Char) -> int:
    if isinstance(c, int) and not 0 <= c <= ucd.MAX_CODEPOINT:
        return 1
    cp = _codepoint(c)
    if cp < 0x7F:
        return int(cp >= 0x20)
    if is_malformed(c):
        return 1
    return ucd.char_width(cp)


def text_width(s) -> int:
    """Number of columns needed to print `s` (a character or a string).

    >>> text_width("March")
    5
    """
    if isinstance(s, int) or (isinstance(s, str) and len(s) == 1):
        return char_width(s)
    return sum(char_width(c) for c in str(s))
