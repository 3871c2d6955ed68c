from unitext import ucd
from unitext.ucd import BoundClass, Flag


def test_category():
    assert ucd.category(ord("9")) == 9
    assert ucd.category(0x03B1) == 2
    assert ucd.category_abbrev(0x03B1) == "Ll"


def test_simple_case_mappings():
    assert ucd.to_lower(0x41) == 0x61
    assert ucd.to_upper(0xE9) == 0xC9
    assert ucd.to_title(0x1C6) == 0x1C5
    # full mapping expands, so the code point stays
    assert ucd.to_upper(0xDF) == 0xDF


def test_decompose_sizing_and_fill():
    assert ucd.decompose([0xE9, 0x61], Flag.DECOMPOSE) == 3

    buffer = [0] * 3
    assert ucd.decompose([0xE9, 0x61], Flag.DECOMPOSE, buffer, 3) == 3
    assert buffer == [0x65, 0x301, 0x61]


def test_decompose_only_writes_what_fits():
    buffer = [0]
    assert ucd.decompose([0xE9], Flag.DECOMPOSE, buffer, 1) == 2
    assert buffer == [0x65]


def test_decompose_rejects_bad_options():
    assert ucd.decompose([0x61], Flag.COMPOSE | Flag.DECOMPOSE) == ucd.ERROR_INVALIDOPTS
    assert ucd.decompose([0x61], Flag.STRIPMARK) == ucd.ERROR_INVALIDOPTS


def test_decompose_rejects_invalid_scalars():
    assert ucd.decompose([0xD800], Flag.COMPOSE) == ucd.ERROR_INVALIDUTF8
    assert ucd.decompose([0x378], Flag.REJECTNA) == ucd.ERROR_NOTASSIGNED


def test_reencode_composes_in_place():
    buffer = [0x65, 0x301, 0x61]
    assert ucd.reencode(buffer, 3, Flag.COMPOSE) == 2
    assert buffer[:2] == [0xE9, 0x61]


def test_reencode_without_compose_keeps_decomposition():
    buffer = [0x65, 0x301]
    assert ucd.reencode(buffer, 2, Flag.DECOMPOSE) == 2
    assert buffer == [0x65, 0x301]


def test_error_messages():
    assert "Unassigned" in ucd.error_message(ucd.ERROR_NOTASSIGNED)
    assert "Invalid options" in ucd.error_message(ucd.ERROR_INVALIDOPTS)
    assert ucd.error_message(-99)


def test_boundclass():
    assert ucd.boundclass(0x0D) == BoundClass.CR
    assert ucd.boundclass(0x0A) == BoundClass.LF
    assert ucd.boundclass(0x301) == BoundClass.EXTEND
    assert ucd.boundclass(0x200D) == BoundClass.ZWJ
    assert ucd.boundclass(0x1F1FA) == BoundClass.REGIONAL_INDICATOR
    assert ucd.boundclass(0x1100) == BoundClass.L
    assert ucd.boundclass(0xAC00) == BoundClass.LV
    assert ucd.boundclass(0x1F600) == BoundClass.EXTENDED_PICTOGRAPHIC
    assert ucd.boundclass(0x61) == BoundClass.OTHER


def test_stateful_break_returns_next_state():
    brk, state = ucd.grapheme_break_stateful(0x1F468, 0x200D, 0)
    assert not brk
    assert state == BoundClass.E_ZWG
    brk, state = ucd.grapheme_break_stateful(0x200D, 0x1F469, state)
    assert not brk
    assert state == BoundClass.EXTENDED_PICTOGRAPHIC


def test_char_width():
    assert ucd.char_width(0x03B1) == 1
    assert ucd.char_width(0x26F5) == 2
    assert ucd.char_width(0x301) == 0
