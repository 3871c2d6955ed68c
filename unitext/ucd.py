"""
In-process Unicode Character Database service.

Everything above this layer talks to Unicode data through the functions
here, using integer code points and integer status codes:

- general category codes and simple case mappings
- decomposition into a caller-sized buffer, followed by re-encoding
- pairwise and stateful grapheme-cluster break decisions (UAX #29)
- terminal display width

Data comes from `unicodedata`, the `regex` package (grapheme break and
emoji properties) and `wcwidth`.
"""

from __future__ import annotations

import enum
import unicodedata
from functools import lru_cache
from typing import Callable, List, MutableSequence, Optional, Sequence, Tuple, Union

import regex
from wcwidth import wcwidth

from .rules import LUMP_MAP, SIMPLE_LOWER_MAP, SIMPLE_UPPER_MAP

MAX_CODEPOINT = 0x10FFFF

# Negative statuses returned by decompose/reencode
ERROR_NOMEM = -1
ERROR_OVERFLOW = -2
ERROR_INVALIDUTF8 = -3
ERROR_NOTASSIGNED = -4
ERROR_INVALIDOPTS = -5

_ERROR_MESSAGES = {
    ERROR_NOMEM: "Memory for processing UTF-8 data could not be allocated.",
    ERROR_OVERFLOW: "UTF-8 string is too long to be processed.",
    ERROR_INVALIDUTF8: "Invalid UTF-8 string",
    ERROR_NOTASSIGNED: "Unassigned Unicode code point found in UTF-8 string.",
    ERROR_INVALIDOPTS: "Invalid options for UTF-8 processing chosen.",
}


class Flag(enum.IntFlag):
    STABLE = 1 << 1
    COMPAT = 1 << 2
    COMPOSE = 1 << 3
    DECOMPOSE = 1 << 4
    IGNORE = 1 << 5
    REJECTNA = 1 << 6
    NLF2LS = 1 << 7
    NLF2PS = 1 << 8
    NLF2LF = NLF2LS | NLF2PS
    STRIPCC = 1 << 9
    CASEFOLD = 1 << 10
    CHARBOUND = 1 << 11
    LUMP = 1 << 12
    STRIPMARK = 1 << 13


# Category abbreviations, indexed by category code
CATEGORY_ABBREVS = (
    "Cn", "Lu", "Ll", "Lt", "Lm", "Lo", "Mn", "Mc", "Me", "Nd",
    "Nl", "No", "Pc", "Pd", "Ps", "Pe", "Pi", "Pf", "Po", "Sm",
    "Sc", "Sk", "So", "Zs", "Zl", "Zp", "Cc", "Cf", "Cs", "Co",
)
_CATEGORY_CODES = {abbrev: code for code, abbrev in enumerate(CATEGORY_ABBREVS)}

_CAT_MN, _CAT_ME = 6, 8
_CAT_PC, _CAT_PD = 12, 13
_CAT_ZS, _CAT_ZL, _CAT_ZP = 23, 24, 25

Transform = Callable[[int], int]


def error_message(status: int) -> str:
    return _ERROR_MESSAGES.get(status, "An unknown error occurred while processing UTF-8 data.")


def is_scalar(cp) -> bool:
    return isinstance(cp, int) and (0 <= cp <= 0xD7FF or 0xE000 <= cp <= MAX_CODEPOINT)


@lru_cache(maxsize=4096)
def category(cp: int) -> int:
    """General category code in [0, 29] for a code point <= U+10FFFF."""
    return _CATEGORY_CODES[unicodedata.category(chr(cp))]


def category_abbrev(cp: int) -> str:
    return CATEGORY_ABBREVS[category(cp)]


# --- case mapping ---------------------------------------------------------

def _simple(cp: int, mapped: str, table: dict) -> int:
    # only one-to-one mappings are applied
    if cp in table:
        return table[cp]
    return ord(mapped) if len(mapped) == 1 else cp


@lru_cache(maxsize=4096)
def to_lower(cp: int) -> int:
    return _simple(cp, chr(cp).lower(), SIMPLE_LOWER_MAP)


@lru_cache(maxsize=4096)
def to_upper(cp: int) -> int:
    return _simple(cp, chr(cp).upper(), SIMPLE_UPPER_MAP)


@lru_cache(maxsize=4096)
def to_title(cp: int) -> int:
    # titlecase digraphs and ypogegrammeni letters already map to one character
    return _simple(cp, chr(cp).title(), {})


# --- decomposition --------------------------------------------------------

_IGNORABLE = regex.compile(r"\p{Default_Ignorable_Code_Point}")


def _lump(cp: int, cat: int, flags: Flag) -> int:
    if cp in LUMP_MAP:
        return LUMP_MAP[cp]
    if cat == _CAT_ZS:
        return 0x0020
    if cat == _CAT_PD:
        return 0x002D
    if cat == _CAT_PC:
        return 0x005F
    if (flags & Flag.NLF2LF) == Flag.NLF2LF and cat in (_CAT_ZL, _CAT_ZP):
        return 0x000A
    return cp


def decompose_char(cp: int, flags: Flag) -> Union[List[int], int]:
    """Expand one scalar value according to `flags`.

    Returns the list of resulting scalar values, or a negative status.
    """
    cat = category(cp)
    if flags & Flag.REJECTNA and cat == 0:
        return ERROR_NOTASSIGNED
    if flags & Flag.IGNORE and _IGNORABLE.match(chr(cp)):
        return []
    if flags & Flag.LUMP:
        lumped = _lump(cp, cat, flags)
        if lumped != cp:
            return decompose_char(lumped, flags)
    if flags & Flag.CASEFOLD:
        folded = chr(cp).casefold()
        if folded != chr(cp):
            units: List[int] = []
            for ch in folded:
                part = decompose_char(ord(ch), flags)
                if isinstance(part, int):
                    return part
                units.extend(part)
            return units
    if flags & (Flag.COMPOSE | Flag.DECOMPOSE):
        form = "NFKD" if flags & Flag.COMPAT else "NFD"
        units = [ord(ch) for ch in unicodedata.normalize(form, chr(cp))]
    else:
        units = [cp]
    if flags & Flag.STRIPMARK:
        units = [u for u in units if not _CAT_MN <= category(u) <= _CAT_ME]
    return units


def _combining(cp: int) -> int:
    return unicodedata.combining(chr(cp))


def _reorder(buffer: MutableSequence[int], count: int) -> None:
    # canonical ordering: stable sort of every run of non-starters
    start = 0
    while start < count:
        if not _combining(buffer[start]):
            start += 1
            continue
        end = start
        while end < count and _combining(buffer[end]):
            end += 1
        buffer[start:end] = sorted(buffer[start:end], key=_combining)
        start = end


def decompose(
    codepoints: Sequence[int],
    flags: int,
    buffer: Optional[MutableSequence[int]] = None,
    capacity: int = 0,
    transform: Optional[Transform] = None,
) -> int:
    """Decompose `codepoints` into `buffer`.

    Returns the number of scalar values the full result needs. Units are
    only written while they fit into `capacity`, so a call with no buffer
    and zero capacity is a sizing run. Combining marks are put into
    canonical order when the whole result fits.

    `transform` is applied to every input code point before it is expanded
    and must return a single scalar value.
    """
    flags = Flag(flags)
    if flags & Flag.COMPOSE and flags & Flag.DECOMPOSE:
        return ERROR_INVALIDOPTS
    if flags & Flag.STRIPMARK and not flags & (Flag.COMPOSE | Flag.DECOMPOSE):
        return ERROR_INVALIDOPTS
    if buffer is None:
        capacity = 0

    written = 0
    for cp in codepoints:
        if transform is not None:
            cp = transform(cp)
        if not is_scalar(cp):
            return ERROR_INVALIDUTF8
        expansion = decompose_char(cp, flags)
        if isinstance(expansion, int):
            return expansion
        for unit in expansion:
            if written < capacity:
                buffer[written] = unit
            written += 1

    if written <= capacity and flags & (Flag.COMPOSE | Flag.DECOMPOSE):
        _reorder(buffer, written)
    return written


def _convert_newlines(units: Sequence[int], flags: Flag) -> List[int]:
    out: List[int] = []
    i, n = 0, len(units)
    while i < n:
        uc = units[i]
        if uc == 0x000D and i + 1 < n and units[i + 1] == 0x000A:
            # CR LF counts as a single newline
            i += 1
            uc = 0x000A
        if uc in (0x000A, 0x000D, 0x0085) or (flags & Flag.STRIPCC and uc in (0x000B, 0x000C)):
            if flags & Flag.NLF2LS:
                out.append(0x000A if flags & Flag.NLF2PS else 0x2028)
            elif flags & Flag.NLF2PS:
                out.append(0x2029)
            else:
                out.append(0x0020)
        elif flags & Flag.STRIPCC and (uc < 0x0020 or 0x007F <= uc < 0x00A0):
            if uc == 0x0009:
                out.append(0x0020)
        else:
            out.append(uc)
        i += 1
    return out


def reencode(buffer: MutableSequence[int], count: int, flags: int) -> int:
    """Finish a decomposed buffer in place.

    Applies newline and control-character conversion and, under COMPOSE,
    canonical composition. Returns the new length or a negative status.
    """
    flags = Flag(flags)
    units = list(buffer[:count])
    if not all(is_scalar(u) for u in units):
        return ERROR_INVALIDUTF8
    if flags & (Flag.NLF2LS | Flag.NLF2PS | Flag.STRIPCC):
        units = _convert_newlines(units, flags)
    if flags & Flag.COMPOSE:
        composed = unicodedata.normalize("NFC", "".join(map(chr, units)))
        units = [ord(ch) for ch in composed]
    buffer[:] = units
    return len(units)


# --- grapheme breaks ------------------------------------------------------

class BoundClass(enum.IntEnum):
    START = 0
    OTHER = 1
    CR = 2
    LF = 3
    CONTROL = 4
    EXTEND = 5
    L = 6
    V = 7
    T = 8
    LV = 9
    LVT = 10
    REGIONAL_INDICATOR = 11
    SPACINGMARK = 12
    PREPEND = 13
    ZWJ = 14
    EXTENDED_PICTOGRAPHIC = 15
    # Extended_Pictographic Extend* ZWJ
    E_ZWG = 16


_BOUNDCLASS_PATTERNS = (
    (BoundClass.CR, regex.compile(r"\p{Grapheme_Cluster_Break=CR}")),
    (BoundClass.LF, regex.compile(r"\p{Grapheme_Cluster_Break=LF}")),
    (BoundClass.CONTROL, regex.compile(r"\p{Grapheme_Cluster_Break=Control}")),
    (BoundClass.EXTEND, regex.compile(r"\p{Grapheme_Cluster_Break=Extend}")),
    (BoundClass.ZWJ, regex.compile(r"\p{Grapheme_Cluster_Break=ZWJ}")),
    (BoundClass.REGIONAL_INDICATOR, regex.compile(r"\p{Grapheme_Cluster_Break=Regional_Indicator}")),
    (BoundClass.PREPEND, regex.compile(r"\p{Grapheme_Cluster_Break=Prepend}")),
    (BoundClass.SPACINGMARK, regex.compile(r"\p{Grapheme_Cluster_Break=SpacingMark}")),
    (BoundClass.L, regex.compile(r"\p{Grapheme_Cluster_Break=L}")),
    (BoundClass.V, regex.compile(r"\p{Grapheme_Cluster_Break=V}")),
    (BoundClass.T, regex.compile(r"\p{Grapheme_Cluster_Break=T}")),
    (BoundClass.LV, regex.compile(r"\p{Grapheme_Cluster_Break=LV}")),
    (BoundClass.LVT, regex.compile(r"\p{Grapheme_Cluster_Break=LVT}")),
    (BoundClass.EXTENDED_PICTOGRAPHIC, regex.compile(r"\p{Extended_Pictographic}")),
)

_HANGUL_L_ANY = (BoundClass.L, BoundClass.V, BoundClass.LV, BoundClass.LVT)
_CONTROLS = (BoundClass.CR, BoundClass.LF, BoundClass.CONTROL)


@lru_cache(maxsize=4096)
def boundclass(cp: int) -> BoundClass:
    ch = chr(cp)
    for klass, pattern in _BOUNDCLASS_PATTERNS:
        if pattern.match(ch):
            return klass
    return BoundClass.OTHER


def _break_between(lbc: BoundClass, tbc: BoundClass) -> bool:
    if lbc == BoundClass.START:                                     # GB1
        return True
    if lbc == BoundClass.CR and tbc == BoundClass.LF:               # GB3
        return False
    if lbc in _CONTROLS or tbc in _CONTROLS:                        # GB4, GB5
        return True
    if lbc == BoundClass.L and tbc in _HANGUL_L_ANY:                # GB6
        return False
    if lbc in (BoundClass.LV, BoundClass.V) and tbc in (BoundClass.V, BoundClass.T):  # GB7
        return False
    if lbc in (BoundClass.LVT, BoundClass.T) and tbc == BoundClass.T:                 # GB8
        return False
    if tbc in (BoundClass.EXTEND, BoundClass.ZWJ, BoundClass.SPACINGMARK):            # GB9, GB9a
        return False
    if lbc == BoundClass.PREPEND:                                   # GB9b
        return False
    if lbc == BoundClass.E_ZWG and tbc == BoundClass.EXTENDED_PICTOGRAPHIC:           # GB11
        return False
    if lbc == BoundClass.REGIONAL_INDICATOR and tbc == BoundClass.REGIONAL_INDICATOR:  # GB12, GB13
        return False
    return True                                                     # GB999


def grapheme_break(prev: int, next_: int) -> bool:
    """Pairwise break decision with no carried context."""
    return _break_between(boundclass(prev), boundclass(next_))


def grapheme_break_stateful(prev: int, next_: int, state: int) -> Tuple[bool, int]:
    """Break decision between `prev` and `next_` given the running `state`.

    `state` is 0 at the start of a scan. Returns the decision and the state
    to pass to the following call.
    """
    lbc = BoundClass(state) if state else boundclass(prev)
    tbc = boundclass(next_)
    brk = _break_between(lbc, tbc)

    if lbc == BoundClass.EXTENDED_PICTOGRAPHIC and tbc == BoundClass.EXTEND:
        state = BoundClass.EXTENDED_PICTOGRAPHIC
    elif lbc == BoundClass.EXTENDED_PICTOGRAPHIC and tbc == BoundClass.ZWJ:
        state = BoundClass.E_ZWG
    elif lbc == BoundClass.REGIONAL_INDICATOR and tbc == BoundClass.REGIONAL_INDICATOR:
        # pair complete, a third indicator starts a new cluster
        state = BoundClass.OTHER
    else:
        state = tbc
    return brk, int(state)


# --- display width --------------------------------------------------------

@lru_cache(maxsize=4096)
def char_width(cp: int) -> int:
    """Number of terminal columns (0, 1 or 2) for a code point."""
    return max(wcwidth(chr(cp)), 0)
