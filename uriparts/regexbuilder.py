"""
A small object model for composing regular expressions from named parts.

Grammar rules are written as trees of nodes which render to ``re`` syntax:

>>> Sequence(Literal("v"), OneOrMore(Set(("0", "9"))), Literal(".")).render()
'v[0-9]+\\\\.'

Character classes merge overlapping and adjacent ranges:

>>> Set(("a", "f"), ("d", "z"), "_", Set(("0", "9"))).render()
'[0-9_a-z]'
"""
from __future__ import annotations

import re
from abc import abstractmethod
from typing import Iterable, NamedTuple, Tuple, Union
from typing import Sequence as TypingSequence

__all__ = [
    "Regex",
    "Sequence",
    "Choice",
    "Capture",
    "Literal",
    "Set",
    "NegatedSet",
    "CharRange",
    "Repeat",
    "ZeroOrMore",
    "OneOrMore",
    "Optional",
    "Start",
    "End",
    "AnyChar",
    "anchored",
]


class Regex:
    @abstractmethod
    def render(self) -> str:
        ...

    def compile(self, flags: int = 0) -> re.Pattern[str]:
        return re.compile(self.render(), flags)

    def is_atom(self) -> bool:
        """True if a quantifier placed after the rendering applies to all of it."""
        return False

    def is_alternation(self) -> bool:
        """True if the rendering contains a top-level ``|``."""
        return False

    def render_atom(self) -> str:
        rendered = self.render()
        if self.is_atom():
            return rendered
        return "(?:{0})".format(rendered)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} -> {str(self)!r}>"


class _Composite(Regex):
    expressions: Tuple[Regex, ...]

    def __init__(self, *expressions: Regex) -> None:
        for e in expressions:
            if not isinstance(e, Regex):
                raise TypeError("not a Regex: {0!r}".format(e))
        # Sequence(Sequence(a, b), c) is the same as Sequence(a, b, c)
        self.expressions = tuple(
            sub
            for e in expressions
            for sub in (e.expressions if type(e) is type(self) else (e,))
        )

    def is_atom(self) -> bool:
        return len(self.expressions) == 1 and self.expressions[0].is_atom()


class Sequence(_Composite):
    def render(self) -> str:
        # A choice inside a sequence must be grouped or its | would split the
        # whole sequence.
        return "".join(
            e.render_atom() if e.is_alternation() else e.render()
            for e in self.expressions
        )


class Choice(_Composite):
    def render(self) -> str:
        return "|".join(e.render() for e in self.expressions)

    def is_alternation(self) -> bool:
        return len(self.expressions) > 1


class Capture(Regex):
    expression: Regex
    name: str | None

    def __init__(self, *expressions: Regex, name: str | None = None) -> None:
        """
        A capturing group matching ``expressions`` in sequence.

        Args:
            name: If given, a named group is created, accessible through
                ``match.group(name)``.
        """
        if name is not None and not is_name(name):
            raise ValueError("Invalid capture group name: {0}".format(name))
        self.expression = Sequence(*expressions)
        self.name = name

    def render(self) -> str:
        if self.name is None:
            return "({0})".format(self.expression.render())
        return "(?P<{0}>{1})".format(self.name, self.expression.render())

    def is_atom(self) -> bool:
        return True


class Literal(Regex):
    text: str

    def __init__(self, text: str) -> None:
        self.text = text

    def is_atom(self) -> bool:
        return len(self.text) == 1

    def render(self) -> str:
        return re.escape(self.text)


class CharRange(NamedTuple):
    start: int
    end: int

    @classmethod
    def create(cls, item: CharRangeLike) -> CharRange:
        if isinstance(item, CharRange):
            return item
        if isinstance(item, (int, str)):
            return cls.create((item, item))
        if isinstance(item, tuple) and len(item) == 2:
            start, end = (ord(c) if isinstance(c, str) else c for c in item)
            if end < start:
                raise ValueError(
                    "end < start. start: {0!r}, end: {1!r}".format(*item)
                )
            return cls(start, end)
        raise ValueError("Don't know how to create a CharRange from: {0!r}".format(item))

    def render(self) -> str:
        start, end = (_escape_class_char(chr(c)) for c in self)
        if self.start == self.end:
            return start
        if self.end == self.start + 1:
            return start + end
        return "{0}-{1}".format(start, end)


CharRangeLike = Union[CharRange, int, str, Tuple[Union[int, str], Union[int, str]]]


def _escape_class_char(char: str) -> str:
    # Escaping ^ everywhere saves tracking whether it comes first
    if char in "\\]-[^":
        return "\\" + char
    return char


def _merge_ranges(ranges: Iterable[CharRange]) -> list[CharRange]:
    merged: list[CharRange] = []
    for r in sorted(ranges):
        if merged and r.start <= merged[-1].end + 1:
            last = merged.pop()
            r = CharRange(last.start, max(last.end, r.end))
        merged.append(r)
    return merged


class Set(Regex):
    """
    A character class. Items may be single characters, code points,
    ``(start, end)`` ranges or other ``Set`` instances.
    """

    ranges: TypingSequence[CharRange]
    negated = False

    def __init__(self, *items: Set | CharRangeLike) -> None:
        if len(items) == 0:
            raise ValueError("empty {0}()".format(type(self).__name__))
        ranges: list[CharRange] = []
        for item in items:
            if isinstance(item, Set):
                if item.negated:
                    raise ValueError("can't merge a negated set: {0!r}".format(item))
                ranges.extend(item.ranges)
            else:
                ranges.append(CharRange.create(item))
        self.ranges = _merge_ranges(ranges)

    def render(self) -> str:
        return "[{0}{1}]".format(
            "^" if self.negated else "", "".join(r.render() for r in self.ranges)
        )

    def is_atom(self) -> bool:
        return True


class NegatedSet(Set):
    """A character class matching any character not in the given items."""

    negated = True


class Repeat(Regex):
    expression: Regex
    min: int
    max: int | None

    def __init__(
        self,
        expression: Regex,
        min: int = 0,
        max: int | None = None,
        count: int | None = None,
    ) -> None:
        """
        Match ``expression`` at least ``min`` and at most ``max`` times
        (unbounded if ``max`` is None), or exactly ``count`` times.
        """
        if count is not None:
            if (min, max) != (0, None):
                raise ValueError("count can't be combined with min or max")
            min = max = count
        if min < 0 or (max is not None and max < min):
            raise ValueError("bad repeat bounds: min={0}, max={1}".format(min, max))

        self.expression = expression
        self.min = min
        self.max = max

    @property
    def quantifier(self) -> str:
        shorthand = {(0, None): "*", (1, None): "+", (0, 1): "?"}
        if (self.min, self.max) in shorthand:
            return shorthand[(self.min, self.max)]
        if self.min == self.max:
            return "{{{0:d}}}".format(self.min)
        return "{{{0:d},{1}}}".format(self.min, "" if self.max is None else self.max)

    def render(self) -> str:
        return self.expression.render_atom() + self.quantifier


class ZeroOrMore(Repeat):
    def __init__(self, expression: Regex) -> None:
        super(ZeroOrMore, self).__init__(expression)


class OneOrMore(Repeat):
    def __init__(self, expression: Regex) -> None:
        super(OneOrMore, self).__init__(expression, min=1)


class Optional(Repeat):
    def __init__(self, expression: Regex) -> None:
        super(Optional, self).__init__(expression, max=1)


class _Token(Regex):
    token: str

    def render(self) -> str:
        return self.token

    def is_atom(self) -> bool:
        return True


class Start(_Token):
    token = "^"


class End(_Token):
    # Unlike $, doesn't match before a trailing newline
    token = r"\Z"


class AnyChar(_Token):
    # Only matches newlines when compiled with re.DOTALL
    token = "."


def anchored(expression: Regex) -> Sequence:
    """Wrap ``expression`` so it must match an entire string."""
    return Sequence(Start(), expression, End())


NAME = re.compile(r"^[a-zA-Z_]\w*$")


def is_name(string: str) -> bool:
    """Returns: True if string is a Python name/identifier."""
    return bool(NAME.match(string))
