import pytest

from unitext.graphemes import (
    BreakState,
    GraphemeIterator,
    graphemes,
    is_grapheme_break,
    is_grapheme_break_stateful,
)

FAMILY = "\U0001F468\u200D\U0001F469\u200D\U0001F467"
US, FR = "\U0001F1FA\U0001F1F8", "\U0001F1EB\U0001F1F7"

CASES = [
    ("", []),
    ("abc", ["a", "b", "c"]),
    ("cafe\u0301", ["c", "a", "f", "e\u0301"]),
    ("a\r\nb", ["a", "\r\n", "b"]),
    ("\n\r", ["\n", "\r"]),
    (US + FR, [US, FR]),
    (US + "\U0001F1EB", [US, "\U0001F1EB"]),
    ("x" + FAMILY + "y", ["x", FAMILY, "y"]),
    ("\U0001F44D\U0001F3FD!", ["\U0001F44D\U0001F3FD", "!"]),
    ("\u1100\u1161\u11a8\uac00", ["\u1100\u1161\u11a8", "\uac00"]),
    ("\u0e01\u0e33", ["\u0e01\u0e33"]),
]


@pytest.mark.parametrize("s, expected", CASES)
def test_clusters(s, expected):
    assert list(graphemes(s)) == expected


@pytest.mark.parametrize("s", [s for s, _ in CASES] + ["a\udcff\u0301b", "\u0301\u0301x"])
def test_clusters_partition_the_text(s):
    g = graphemes(s)
    clusters = list(g)
    assert "".join(clusters) == s
    assert len(g) == len(clusters)
    assert all(clusters)


def test_iteration_is_deterministic():
    g = graphemes("x" + FAMILY + US + "e\u0301")
    assert list(g) == list(g)


def test_malformed_always_breaks():
    assert list(graphemes("a\udcff\u0301b")) == ["a", "\udcff", "\u0301", "b"]
    assert list(graphemes("\udcfe\udcff")) == ["\udcfe", "\udcff"]


def test_malformed_resets_state():
    state = BreakState(5)
    assert is_grapheme_break_stateful(state, "\udcff", "a")
    assert state.value == 0


def test_pairwise_break():
    assert not is_grapheme_break("e", "\u0301")
    assert not is_grapheme_break("\r", "\n")
    assert is_grapheme_break("a", "b")
    assert is_grapheme_break("a", "\udcff")
    # no context: cannot see the pictograph before the joiner
    assert is_grapheme_break("\u200d", "\U0001F469")


def test_stateful_break_sees_context():
    state = BreakState()
    assert not is_grapheme_break_stateful(state, "\U0001F468", "\u200d")
    assert not is_grapheme_break_stateful(state, "\u200d", "\U0001F469")


def test_regional_indicators_pair_up():
    state = BreakState()
    a, b, c = "\U0001F1FA", "\U0001F1F8", "\U0001F1EB"
    assert not is_grapheme_break_stateful(state, a, b)
    assert is_grapheme_break_stateful(state, b, c)


def test_independent_states():
    s1, s2 = BreakState(), BreakState()
    is_grapheme_break_stateful(s1, "\U0001F1FA", "\U0001F1F8")
    assert s2.value == 0
    assert not is_grapheme_break_stateful(s2, "\U0001F1F8", "\U0001F1EB")


def test_step_resumes_from_carried_state():
    g = graphemes("ab\u0301c")
    cluster, carried = g.step()
    assert cluster == "a"
    assert carried[1] == 1

    cluster, carried = g.step(*carried)
    assert cluster == "b\u0301"
    assert carried[1] == 3

    cluster, carried = g.step(*carried)
    assert cluster == "c"
    assert g.step(*carried) is None


def test_length_counts_clusters():
    assert len(graphemes("")) == 0
    assert len(graphemes(FAMILY + US + FR)) == 3


def test_equality_and_ordering_follow_text():
    assert graphemes("abc") == graphemes("abc")
    assert graphemes("abc") != graphemes("abd")
    assert graphemes("abc") < graphemes("abd")
    assert hash(graphemes("abc")) == hash(graphemes("abc"))
    assert len({graphemes("abc"), graphemes("abc"), graphemes("x")}) == 2
    assert graphemes("abc") != "abc"


def test_repr():
    assert repr(GraphemeIterator("e\u0301x")) == "<length-2 GraphemeIterator for 'e\u0301x'>"
