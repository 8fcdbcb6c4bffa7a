from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Mapping
from typing import Sequence as TypingSequence

import pytest

from uriparts.regexbuilder import (
    AnyChar,
    Capture,
    CharRange,
    Choice,
    Literal,
    NegatedSet,
    OneOrMore,
    Optional,
    Regex,
    Repeat,
    Sequence,
    Set,
    ZeroOrMore,
    anchored,
)


@dataclass(frozen=True)
class _TestString:
    string: str
    groupdict: Mapping[str, str | None] | None = None
    should_match: bool = True

    def __invert__(self) -> _TestString:
        return replace(self, should_match=not self.should_match)

    def run(self, regex: re.Pattern[str]) -> None:
        match = regex.match(self.string)

        # For debugging
        msg = (match, regex, self.string)

        if self.should_match:
            assert match, msg
            assert match.end() == len(self.string), msg
            if self.groupdict is not None:
                assert match.groupdict() == self.groupdict, msg
        else:
            assert not match, msg


@dataclass(init=False)
class _TestCase:
    node: Regex
    test_strings: TypingSequence[_TestString]
    flags: int

    def __init__(
        self, node: Regex, *test_strings: str | _TestString, flags: int = 0
    ) -> None:
        if len(test_strings) == 0:
            raise ValueError("no test strings provided")

        # Patterns like (/[a-z]+)*|[a-z]+ make a 0 length match on "foo"
        # unless they're forced to consume the whole string.
        self.node = anchored(node)
        self.flags = flags
        self.test_strings = [
            _TestString(ts) if isinstance(ts, str) else ts for ts in test_strings
        ]

    def run(self) -> None:
        regex = self.node.compile(self.flags)

        for test_string in self.test_strings:
            test_string.run(regex)


tc = _TestCase
ts = _TestString


@pytest.mark.parametrize(
    "test_case",
    [
        tc(Literal("foo"), ts("foo"), ~ts("afoo"), ~ts("foo\n")),
        tc(Literal("a.b[c]"), "a.b[c]", ~ts("axb[c]")),
        tc(Literal(""), "", ~ts("a")),
        tc(OneOrMore(Literal("a")), ~ts(""), "a", "aa", "aaaaaaaaaaaaaaa"),
        tc(ZeroOrMore(Literal("ab")), "", "ab", "abab", ~ts("aba")),
        tc(Set("a", "d", "f"), "a", "d", "f", ~ts("b"), ~ts("e"), ~ts("")),
        tc(Set("^"), "^", ~ts("a")),
        tc(Set("]", "["), "]", "[", ~ts("a")),
        tc(Set("-", "a"), "-", "a", ~ts("b")),
        tc(Set("\\"), "\\", ~ts("a")),
        tc(Set(0x41), "A", ~ts("B")),
        tc(OneOrMore(Set(Set(("a", "f")), "z")), "abcdef", "fz", ~ts("g")),
        tc(NegatedSet("/", "?"), "a", "#", ~ts("/"), ~ts("?"), ~ts("")),
        tc(NegatedSet("^"), "a", ~ts("^")),
        tc(ZeroOrMore(NegatedSet(*"@/")), "", "user:pass", ~ts("a@b"), ~ts("a/b")),
        tc(Choice(Literal("foo"), Literal("bar")), "foo", "bar", ~ts("foobar")),
        tc(
            Sequence(Literal("x"), Choice(Literal("foo"), Literal("bar"))),
            "xfoo",
            "xbar",
            ~ts("bar"),
        ),
        tc(
            Repeat(Literal("abc"), count=3),
            "abcabcabc",
            ~ts("abcabc"),
            ~ts("abcabcabcabc"),
        ),
        tc(
            Repeat(Literal("ab"), min=2, max=4),
            "abab",
            "abababab",
            ~ts("ab"),
            ~ts("ababababab"),
        ),
        tc(Repeat(Literal("ab"), min=2), "abab", "ab" * 100, ~ts("ab")),
        tc(Repeat(Literal("x"), max=3), "", "x", "xxx", ~ts("xxxx")),
        tc(Optional(Repeat(Literal("x"), min=2, max=4)), "", "xx", "xxxx", ~ts("x")),
        tc(
            Sequence(Literal("foo"), Optional(Literal("bar")), Literal("baz")),
            "foobaz",
            "foobarbaz",
        ),
        tc(
            Sequence(
                Capture(OneOrMore(Set("a")), name="foo"),
                Optional(Capture(OneOrMore(Set("b")), name="bar")),
            ),
            ts("aaaabb", groupdict=dict(foo="aaaa", bar="bb")),
            ts("aa", groupdict=dict(foo="aa", bar=None)),
        ),
        tc(ZeroOrMore(AnyChar()), "", "a\nb", flags=re.DOTALL),
        tc(ZeroOrMore(AnyChar()), "ab", ~ts("a\nb")),
    ],
)
def test_regex_builder_node(test_case: _TestCase) -> None:
    test_case.run()


def test_capture_name_must_by_python_name() -> None:
    with pytest.raises(ValueError):
        Capture(Literal("lol"), name="foo-bar")


def test_unnamed_capture() -> None:
    assert Capture(Literal("a")).compile().match("a").groups() == ("a",)


def test_set_cannot_be_empty() -> None:
    with pytest.raises(ValueError):
        Set()


def test_negated_set_cannot_be_merged() -> None:
    with pytest.raises(ValueError):
        Set(NegatedSet("a"))


def test_char_range_cannot_be_reversed() -> None:
    with pytest.raises(ValueError):
        CharRange.create((20, 10))


def test_char_range_create_rejects_unknown_args() -> None:
    with pytest.raises(ValueError):
        CharRange.create([1, 2, 3])  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "node,rendered",
    [
        (Set("c", "a", "b"), "[a-c]"),
        (Set(("a", "m"), ("f", "z")), "[a-z]"),
        (Set("a", "b"), "[ab]"),
        (Set("a", Set("b"), "d"), "[abd]"),
        (Set("^", "]", "-"), "[\\-\\]\\^]"),
    ],
)
def test_set_merges_ranges(node: Set, rendered: str) -> None:
    assert node.render() == rendered


def test_nested_composites_are_flattened() -> None:
    seq = Sequence(Sequence(Literal("a"), Literal("b")), Literal("c"))
    choice = Choice(Choice(Literal("a"), Literal("b")), Literal("c"))

    assert len(seq.expressions) == 3
    assert len(choice.expressions) == 3
    assert choice.render() == "a|b|c"


def test_composite_rejects_non_regex() -> None:
    with pytest.raises(TypeError):
        Sequence("abc")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "kwargs",
    [dict(min=3, max=2), dict(min=-1), dict(count=2, max=3)],
)
def test_repeat_rejects_bad_bounds(kwargs: dict[str, int]) -> None:
    with pytest.raises(ValueError):
        Repeat(Literal("a"), **kwargs)


@pytest.mark.parametrize(
    "node,rendered",
    [
        (Repeat(Literal("ab"), max=3), "(?:ab){0,3}"),
        (Optional(Set("a")), "[a]?"),
        (Sequence(Choice(Literal("a"), Literal("b")), Literal("c")), "(?:a|b)c"),
        (NegatedSet(*"/?#"), "[^#/?]"),
        (Capture(Literal("x"), name="x"), "(?P<x>x)"),
    ],
)
def test_render(node: Regex, rendered: str) -> None:
    assert node.render() == rendered


def test_repr() -> None:
    expr = Choice(Literal("foo"), Repeat(Literal("bar"), min=3, max=8))
    assert "Choice" in repr(expr)
    assert "foo|(?:bar){3,8}" in repr(expr)
