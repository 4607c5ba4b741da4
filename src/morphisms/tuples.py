"""Fixed-arity heterogeneous tuples with 1-based slots."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Final, Sequence

from . import combinators as tc
from .base import curried
from .errors import IndexOutOfRangeError, NotApplicableError, TypeMismatchError
from .typeclass import (
    Applicative,
    Eq,
    Foldable,
    Monoid,
    Ord,
    Ordering,
    Traversable,
    implements,
    instance,
    same_type,
    type_name,
)

# One-element construction returns the bare value instead of a 1-tuple.
COLLAPSE_SINGLE_TUPLES: Final[bool] = os.environ.get("MORPHISMS_COLLAPSE_SINGLE_TUPLES", "0") == "1"


@instance(Eq, Ord, Monoid, Applicative, Foldable, Traversable)
@dataclass(frozen=True, eq=False)
class Tuple(tc.ComparisonOperators):
    """An ordered aggregate whose arity is fixed at construction.

    Tuples of different arity are different types: comparing or combining them
    raises :class:`TypeMismatchError`. As a functor, foldable and traversable
    only the last slot is visited.
    """

    items: tuple[object, ...] = ()

    def __repr__(self) -> str:
        if len(self.items) == 1:
            return f"({self.items[0]!r},)"
        return "(" + ",".join(repr(item) for item in self.items) + ")"

    def __hash__(self) -> int:
        return hash(("Tuple",) + self.items)

    def __reduce__(self):
        if not self.items:
            return "UNIT"
        return (Tuple, (self.items,))

    def __copy__(self) -> "Tuple":
        return self

    def __iter__(self):
        return iter(self.items)

    @property
    def arity(self) -> int:
        return len(self.items)

    def type_name(self) -> str:
        return "(" + ",".join(type_name(item) for item in self.items) + ")"

    def _replace_last(self, value: object) -> "Tuple":
        return Tuple(self.items[:-1] + (value,))

    @staticmethod
    def is_eq(a: "Tuple", b: "Tuple") -> bool:
        _same_arity(a, b, "is_eq")
        return all(tc.is_eq(x, y) for x, y in zip(a.items, b.items))

    @staticmethod
    def compare(a: "Tuple", b: "Tuple") -> Ordering:
        _same_arity(a, b, "compare")
        for x, y in zip(a.items, b.items):
            order = tc.compare(x, y)
            if order is not Ordering.EQ:
                return order
        return Ordering.EQ

    @staticmethod
    def mempty(_: "Tuple") -> "Tuple":
        return UNIT

    @staticmethod
    def mappend(a: "Tuple", b: "Tuple") -> "Tuple":
        if a is UNIT:
            return b
        if b is UNIT:
            return a
        _same_arity(a, b, "mappend")
        slots = [tc.mappend(x, y) for x, y in zip(a.items[:-1], b.items[:-1])]
        x, y = a.items[-1], b.items[-1]
        if implements(x, Monoid) and same_type(x, y):
            slots.append(tc.mappend(x, y))
        else:
            slots.append(y)
        return Tuple(tuple(slots))

    @staticmethod
    def fmap(f: Callable, t: "Tuple") -> "Tuple":
        _require_slots(t, "fmap")
        return t._replace_last(f(t.items[-1]))

    @staticmethod
    def pure(witness: "Tuple", x: object) -> "Tuple":
        _require_slots(witness, "pure")
        return Tuple(tuple(tc.mempty(item) for item in witness.items[:-1]) + (x,))

    @staticmethod
    def ap(tf: "Tuple", t: "Tuple") -> "Tuple":
        _require_slots(tf, "ap")
        _same_arity(tf, t, "ap")
        f = tf.items[-1]
        if not callable(f):
            raise NotApplicableError(tf, "ap")
        slots = tuple(tc.mappend(x, y) for x, y in zip(tf.items[:-1], t.items[:-1]))
        return Tuple(slots + (f(t.items[-1]),))

    @staticmethod
    def foldr(f: Callable, z: object, t: "Tuple") -> object:
        if t is UNIT:
            return z
        return f(t.items[-1], z)

    @staticmethod
    def traverse(f: Callable, t: "Tuple") -> object:
        _require_slots(t, "traverse")
        return tc.fmap(t._replace_last, f(t.items[-1]))


UNIT: Final = Tuple()


def _same_arity(a: Tuple, b: Tuple, function: str) -> None:
    if a.arity != b.arity:
        raise TypeMismatchError(a, b, function)


def _require_slots(t: Tuple, function: str) -> None:
    if t is UNIT:
        raise NotApplicableError(t, function)


def _require_tuple(p: object, function: str) -> Tuple:
    if not isinstance(p, Tuple):
        raise NotApplicableError(p, function, "Tuple")
    return p


def tuple_of(*values: object) -> object:
    """Build a tuple: no values give ``UNIT``, two or more a tuple of that arity.

    A single value gives a 1-tuple, or the bare value itself when
    ``MORPHISMS_COLLAPSE_SINGLE_TUPLES=1``.
    """
    if not values:
        return UNIT
    if len(values) == 1 and COLLAPSE_SINGLE_TUPLES:
        return values[0]
    return Tuple(values)


@curried
def nth(p: Tuple, n: int) -> object:
    """Slot ``n`` of ``p``, counting from 1."""
    _require_tuple(p, "nth")
    if isinstance(n, bool) or not isinstance(n, int):
        raise NotApplicableError(n, "nth")
    if n < 1 or n > p.arity:
        raise IndexOutOfRangeError(n, "nth")
    return p.items[n - 1]


def fst(p: Tuple) -> object:
    _require_tuple(p, "fst")
    return nth(p, 1)


def snd(p: Tuple) -> object:
    _require_tuple(p, "snd")
    return nth(p, 2)


def swap(p: Tuple) -> Tuple:
    _require_tuple(p, "swap")
    if p.arity != 2:
        raise NotApplicableError(p, "swap")
    return Tuple((p.items[1], p.items[0]))


def is_tuple(x: object) -> bool:
    return isinstance(x, Tuple) and x is not UNIT


def is_unit(x: object) -> bool:
    return x is UNIT


def from_array_to_tuple(values: Sequence) -> object:
    if not isinstance(values, (list, tuple)):
        raise NotApplicableError(values, "from_array_to_tuple")
    return tuple_of(*values)


def from_tuple_to_array(p: Tuple) -> list:
    return list(_require_tuple(p, "from_tuple_to_array").items)


def curry(f: Callable[[Tuple], object]) -> Callable[[object, object], object]:
    """Turn a function of one pair into a function of two arguments."""
    return lambda x, y: f(tuple_of(x, y))


def uncurry(f: Callable[[object, object], object]) -> Callable[[Tuple], object]:
    """Turn a function of two arguments into a function of one pair."""
    return lambda p: f(fst(p), snd(p))
