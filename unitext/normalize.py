"""
Unicode normalization driver.

Responsibilities:
- turn an option record (or a named normal form) into service flags
- size, fill and re-encode a decomposition through the UCD service
- identifier canonicalization via the confusable remap table
- best-effort decoding of uploaded bytes before normalization
"""

from __future__ import annotations

import hashlib
import logging
from typing import Any, Dict, Optional, Tuple

from charset_normalizer import from_bytes

from . import ucd
from .errors import ConfigurationError, NormalizationError
from .models import NewlineMode, NormalizationOptions
from .rules import CONFUSABLE_MAP, NORMAL_FORMS
from .ucd import Flag, Transform

logger = logging.getLogger(__name__)

_NEWLINE_FLAGS = {
    NewlineMode.NONE: Flag(0),
    NewlineMode.LS: Flag.NLF2LS,
    NewlineMode.PS: Flag.NLF2PS,
    NewlineMode.LF: Flag.NLF2LF,
}


def options_for_form(form: str) -> NormalizationOptions:
    """Expand "NFC", "NFD", "NFKC" or "NFKD" into an option record."""
    try:
        preset = NORMAL_FORMS[form]
    except (KeyError, TypeError):
        raise ConfigurationError(f"{form!r} is not one of NFC, NFD, NFKC, NFKD") from None
    return NormalizationOptions(**preset)


def build_options(
    *,
    newline2ls: bool = False,
    newline2ps: bool = False,
    newline2lf: bool = False,
    transform: Optional[Transform] = None,
    **flags: Any,
) -> NormalizationOptions:
    """Build an option record from keyword switches.

    The three newline switches are mutually exclusive.
    """
    if newline2ls + newline2ps + newline2lf > 1:
        raise ConfigurationError("only one newline conversion may be specified")
    if newline2ls:
        flags["newline_mode"] = NewlineMode.LS
    elif newline2ps:
        flags["newline_mode"] = NewlineMode.PS
    elif newline2lf:
        flags["newline_mode"] = NewlineMode.LF
    try:
        return NormalizationOptions(transform=transform, **flags)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e


def compose_flags(options: NormalizationOptions) -> Flag:
    """Translate an option record into UCD service flags.

    Decomposition wins when both compose and decompose are requested.
    """
    flags = Flag(0)
    if options.stable:
        flags |= Flag.STABLE
    if options.compat:
        flags |= Flag.COMPAT
    if options.decompose:
        flags |= Flag.DECOMPOSE
    elif options.compose:
        flags |= Flag.COMPOSE
    elif options.compat or options.strip_mark:
        raise ConfigurationError("compat or strip_mark requires compose or decompose")
    if options.strip_ignorable:
        flags |= Flag.IGNORE
    if options.reject_unassigned:
        flags |= Flag.REJECTNA
    flags |= _NEWLINE_FLAGS[NewlineMode(options.newline_mode)]
    if options.strip_control:
        flags |= Flag.STRIPCC
    if options.casefold:
        flags |= Flag.CASEFOLD
    if options.lump:
        flags |= Flag.LUMP
    if options.strip_mark:
        flags |= Flag.STRIPMARK
    return flags


def _check(status: int) -> int:
    if status < 0:
        raise NormalizationError(ucd.error_message(status), status)
    return status


def map_text(text: str, flags: Flag, transform: Optional[Transform] = None) -> str:
    """Run the decompose / re-encode pipeline over `text`.

    A sizing pass with no buffer comes first; the buffer it asks for is then
    filled by a second pass. Both passes call `transform` on every input
    code point, so an impure transform is caught when the counts disagree.
    """
    codepoints = [ord(c) for c in text]

    count = _check(ucd.decompose(codepoints, flags, transform=transform))
    buffer = [0] * count
    filled = _check(ucd.decompose(codepoints, flags, buffer, count, transform))
    if filled != count:
        raise NormalizationError(
            f"decomposition needed {filled} scalar values after sizing {count}; "
            "the transform must return the same result for the same input"
        )
    logger.debug("decomposed %d code points into %d (flags=%r)", len(codepoints), count, flags)

    length = _check(ucd.reencode(buffer, count, flags))
    return "".join(map(chr, buffer[:length]))


def normalize(text: str, form: Optional[str] = None, **options: Any) -> str:
    """Normalize `text`.

    Either name a normal form (``normalize(s, "NFKC")``) or pass keyword
    switches (``normalize(s, casefold=True, strip_mark=True)``); an
    ``options`` keyword may carry a ready-made `NormalizationOptions`.

    Raises `ConfigurationError` for contradictory options before any work is
    done, and `NormalizationError` when the text cannot be processed.
    """
    record = options.pop("options", None)
    if form is not None:
        if options or record is not None:
            raise ConfigurationError("a normal form cannot be combined with other options")
        record = options_for_form(form)
    elif record is None:
        record = build_options(**options)
    elif options:
        raise ConfigurationError("an option record cannot be combined with other options")

    flags = compose_flags(record)
    return map_text(text, flags, record.transform)


def is_normalized(text: str, form: str = "NFC") -> bool:
    return normalize(text, form) == text


def identifier_transform(cp: int) -> int:
    return CONFUSABLE_MAP.get(cp, cp)


def canonicalize_identifier(text: str) -> str:
    """NFC with confusable characters mapped onto their canonical forms.

    >>> canonicalize_identifier("µs")
    'μs'
    """
    return normalize(text, options=NormalizationOptions(
        stable=True, compose=True, transform=identifier_transform,
    ))


def decode_bytes(raw: bytes) -> Tuple[str, Dict[str, Any]]:
    """
    Decode uploaded bytes to text.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - A UTF-8 BOM is dropped.
    - If decoding with the detected encoding fails, fall back to UTF-8 with
      surrogateescape so undecodable bytes survive as malformed characters.
    """
    detected = None
    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    if raw.startswith(b"\xef\xbb\xbf") and decode_used.lower().replace("-", "_") in ("utf_8", "utf8"):
        decode_used = "utf-8-sig"

    decode_fallback = False
    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        logger.warning("decoding as %s failed, falling back to utf-8", decode_used)
        text = raw.decode("utf-8", errors="surrogateescape")
        decode_used = "utf-8"
        decode_fallback = True

    return text, {
        "detected": detected,
        "decode_used": decode_used,
        "decode_fallback": decode_fallback,
    }


def sha256_hex(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
