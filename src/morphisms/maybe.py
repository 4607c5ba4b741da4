"""Optional values: ``NOTHING`` or ``just(x)``."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Final

from . import combinators as tc
from .base import curried
from .errors import EmptyStructureError, MalformedReturnError, NotApplicableError
from .typeclass import (
    Eq,
    Foldable,
    Monad,
    Monoid,
    Ord,
    Ordering,
    Traversable,
    instance,
    type_name,
)


class _Absent:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<absent>"


_ABSENT: Final = _Absent()


@instance(Eq, Ord, Monoid, Monad, Foldable, Traversable)
@dataclass(frozen=True, eq=False)
class Maybe(tc.ComparisonOperators):
    """Either the shared empty value ``NOTHING`` or a value holding one payload.

    Build values with :func:`just`; the class itself is not meant to be called.
    """

    value: object = _ABSENT

    def __repr__(self) -> str:
        if self.value is _ABSENT:
            return "Nothing"
        inner = repr(self.value)
        if " " in inner and inner[0] not in "([":
            inner = f"({inner})"
        return f"Just {inner}"

    def __hash__(self) -> int:
        if self.value is _ABSENT:
            return hash("Nothing")
        return hash(("Just", self.value))

    def __reduce__(self):
        if self.value is _ABSENT:
            return "NOTHING"
        return (Maybe, (self.value,))

    def __copy__(self) -> "Maybe":
        return self

    def type_name(self) -> str:
        if self.value is _ABSENT:
            return "Maybe"
        return f"Maybe {type_name(self.value)}"

    @staticmethod
    def is_eq(a: "Maybe", b: "Maybe") -> bool:
        if a is NOTHING or b is NOTHING:
            return a is b
        return tc.is_eq(a.value, b.value)

    @staticmethod
    def compare(a: "Maybe", b: "Maybe") -> Ordering:
        if a is NOTHING:
            return Ordering.EQ if b is NOTHING else Ordering.LT
        if b is NOTHING:
            return Ordering.GT
        return tc.compare(a.value, b.value)

    @staticmethod
    def mempty(_: "Maybe") -> "Maybe":
        return NOTHING

    @staticmethod
    def mappend(a: "Maybe", b: "Maybe") -> "Maybe":
        if a is NOTHING:
            return b
        if b is NOTHING:
            return a
        return just(tc.mappend(a.value, b.value))

    @staticmethod
    def fmap(f: Callable, m: "Maybe") -> "Maybe":
        if m is NOTHING:
            return NOTHING
        return just(f(m.value))

    @staticmethod
    def pure(_: "Maybe", x: object) -> "Maybe":
        return just(x)

    @staticmethod
    def ap(mf: "Maybe", m: "Maybe") -> "Maybe":
        if mf is NOTHING or m is NOTHING:
            return NOTHING
        if not callable(mf.value):
            raise NotApplicableError(mf, "ap")
        return just(mf.value(m.value))

    @staticmethod
    def bind(m: "Maybe", f: Callable) -> "Maybe":
        if m is NOTHING:
            return NOTHING
        result = f(m.value)
        if not isinstance(result, Maybe):
            raise MalformedReturnError(f, "bind", result)
        return result

    @staticmethod
    def foldr(f: Callable, z: object, m: "Maybe") -> object:
        if m is NOTHING:
            return z
        return f(m.value, z)

    @staticmethod
    def null(m: "Maybe") -> bool:
        return m is NOTHING

    @staticmethod
    def traverse(f: Callable, m: "Maybe") -> object:
        # The empty case has no applicative to lift into, so it lifts into Maybe.
        if m is NOTHING:
            return just(NOTHING)
        return tc.fmap(just, f(m.value))


NOTHING: Final = Maybe()


def just(x: object) -> Maybe:
    """Wrap ``x``; ``None`` and NaN collapse to ``NOTHING``."""
    if x is None or x is _ABSENT:
        return NOTHING
    if isinstance(x, float) and math.isnan(x):
        return NOTHING
    return Maybe(x)


def _require_maybe(m: object, function: str) -> Maybe:
    if not isinstance(m, Maybe):
        raise NotApplicableError(m, function, "Maybe")
    return m


@curried
def maybe(default: object, f: Callable, m: Maybe) -> object:
    """``f`` applied to the payload of ``m``, or ``default`` for ``NOTHING``."""
    _require_maybe(m, "maybe")
    if m is NOTHING:
        return default
    return f(m.value)


def is_maybe(x: object) -> bool:
    return isinstance(x, Maybe)


def is_just(m: Maybe) -> bool:
    return _require_maybe(m, "is_just") is not NOTHING


def is_nothing(m: Maybe) -> bool:
    return _require_maybe(m, "is_nothing") is NOTHING


def from_just(m: Maybe) -> object:
    _require_maybe(m, "from_just")
    if m is NOTHING:
        raise EmptyStructureError(m, "from_just")
    return m.value


@curried
def from_maybe(default: object, m: Maybe) -> object:
    _require_maybe(m, "from_maybe")
    if m is NOTHING:
        return default
    return m.value
