import string

import pytest

from unitext.case import (
    AnnotatedText,
    Annotation,
    lowercase,
    lowercase_first,
    to_lower,
    to_title,
    to_upper,
    uppercase,
    uppercase_first,
)


def test_single_characters():
    assert to_lower("A") == "a"
    assert to_lower("\u00d6") == "\u00f6"
    assert to_upper("a") == "A"
    assert to_upper("\u00ea") == "\u00ca"
    assert to_title("a") == "A"
    assert to_title("\u01c6") == "\u01c5"
    assert to_upper("\u01c6") == "\u01c4"
    assert to_lower("\u0393") == "\u03b3"


@pytest.mark.parametrize("c", "19 -_@[`{")
def test_non_letters_are_unchanged(c):
    assert to_lower(c) == c
    assert to_upper(c) == c
    assert to_title(c) == c


@pytest.mark.parametrize("c", string.ascii_letters)
def test_ascii_round_trip(c):
    assert to_upper(to_lower(c)) == to_upper(c)
    assert to_lower(to_upper(c)) == to_lower(c)


def test_only_one_to_one_mappings():
    # sharp s uppercases to two letters, so it is kept
    assert to_upper("\u00df") == "\u00df"
    assert uppercase("stra\u00dfe") == "STRA\u00dfE"


def test_simple_mapping_when_full_mapping_expands():
    assert to_lower("\u0130") == "i"
    assert to_upper("\u1f80") == "\u1f88"
    assert to_upper("\u1fa7") == "\u1faf"
    assert to_upper("\u1fb3") == "\u1fbc"
    assert to_title("\u1ff3") == "\u1ffc"
    assert uppercase("\u1f80\u03b1") == "\u1f88\u0391"
    assert lowercase("\u0130STANBUL") == "istanbul"


def test_malformed_is_unchanged():
    assert to_upper("\udcff") == "\udcff"
    assert lowercase("A\udcffB") == "a\udcffb"


def test_strings():
    assert uppercase("julia") == "JULIA"
    assert lowercase("STRINGS AND THINGS") == "strings and things"
    assert uppercase("") == ""


def test_first():
    assert uppercase_first("python") == "Python"
    assert uppercase_first("\u01c6emal") == "\u01c5emal"
    assert lowercase_first("Julia") == "julia"
    assert uppercase_first("") == ""
    assert lowercase_first("") == ""


def test_annotations_are_kept():
    spans = (Annotation(0, 5, "face", "bold"), Annotation(6, 11, "lang", "en"))
    s = AnnotatedText("Hello World", spans)

    up = uppercase(s)
    assert isinstance(up, AnnotatedText)
    assert up.text == "HELLO WORLD"
    assert up.annotations == spans

    assert lowercase(s).text == "hello world"
    assert lowercase_first(s) == AnnotatedText("hello World", spans)
    assert uppercase_first(AnnotatedText("hi", spans)).annotations == spans
