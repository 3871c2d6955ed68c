"""
Scalar value validity.

A character can be invalid three ways: out of range (above U+10FFFF or a
surrogate), malformed (it came from bytes that are not UTF-8), or overlong
(it was decoded from a non-minimal byte sequence).

Inside a `str`, a surrogate code point is a malformed character; this is
what `bytes.decode(..., "surrogateescape")` produces for undecodable bytes.
Raw bytes can be scanned with `iter_scalars` to keep overlong encodings
apart from plain malformed data.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple, Union


class Scalar(NamedTuple):
    value: int
    malformed: bool = False
    overlong: bool = False


CharLike = Union[int, str, Scalar]

# smallest value that needs a sequence of 2, 3 and 4 bytes
_MIN_VALUE = {1: 0x80, 2: 0x800, 3: 0x10000}


def in_range(v: int) -> bool:
    return 0 <= v <= 0xD7FF or 0xE000 <= v <= 0x10FFFF


def is_malformed(c: CharLike) -> bool:
    if isinstance(c, Scalar):
        return c.malformed
    if isinstance(c, str):
        return 0xD800 <= ord(c) <= 0xDFFF
    return False


def is_overlong(c: CharLike) -> bool:
    return isinstance(c, Scalar) and c.overlong


def is_valid(c: CharLike) -> bool:
    """Return whether `c` is a valid Unicode scalar value.

    >>> is_valid(0xD799)
    True
    >>> is_valid(0xD800)
    False
    """
    value = c.value if isinstance(c, Scalar) else ord(c) if isinstance(c, str) else c
    return not is_malformed(c) and not is_overlong(c) and in_range(value)


def iter_scalars(data: bytes) -> Iterator[Scalar]:
    """Decode UTF-8 `data` into tagged scalar values.

    Every byte of an invalid or truncated sequence becomes its own malformed
    record (valued with the byte). Overlong sequences decode to their value
    and are tagged overlong.
    """
    i, n = 0, len(data)
    while i < n:
        b = data[i]
        if b < 0x80:
            yield Scalar(b)
            i += 1
            continue
        if 0xC0 <= b < 0xE0:
            need, value = 1, b & 0x1F
        elif 0xE0 <= b < 0xF0:
            need, value = 2, b & 0x0F
        elif 0xF0 <= b < 0xF8:
            need, value = 3, b & 0x07
        else:
            yield Scalar(b, malformed=True)
            i += 1
            continue

        j = i + 1
        while j < n and j - i <= need and 0x80 <= data[j] < 0xC0:
            value = (value << 6) | (data[j] & 0x3F)
            j += 1
        if j - i - 1 < need:
            # every byte of a truncated sequence is its own malformed record,
            # not one record for the whole prefix
            for k in range(i, j):
                yield Scalar(data[k], malformed=True)
        else:
            yield Scalar(value, overlong=value < _MIN_VALUE[need])
        i = j


def is_valid_text(data: Union[bytes, str]) -> bool:
    if isinstance(data, str):
        return not any(is_malformed(c) for c in data)
    return all(is_valid(s) for s in iter_scalars(data))
