"""Generic type-class combinators.

Each combinator validates its arguments, asks the capability registry for the
concrete implementation and delegates to it. Binary combinators first require
both operands to share a concrete type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Final

from .base import constant, flip, identity
from .errors import NotApplicableError, TypeMismatchError
from .typeclass import (
    Applicative,
    Eq,
    Foldable,
    Functor,
    Monad,
    Monoid,
    Operation,
    Ord,
    Ordering,
    Traversable,
    TypeClass,
    is_declared,
    is_native_eq,
    is_native_ord,
    native_compare,
    require,
    same_type,
)

_MISSING: Final = object()


def _dispatch(value: object, type_class: TypeClass, op: Operation, *, function: str) -> Callable[..., object]:
    require(value, type_class, function=function)
    return getattr(type(value), op.value)


def _same_type(a: object, b: object, *, function: str) -> None:
    if not same_type(a, b):
        raise TypeMismatchError(a, b, function)


# Eq


def is_eq(a: object, b: object) -> bool:
    _same_type(a, b, function="is_eq")
    if is_declared(a):
        return _dispatch(a, Eq, Operation.IS_EQ, function="is_eq")(a, b)
    if is_native_eq(a):
        return a == b
    raise NotApplicableError(a, "is_eq", Eq.name)


def is_not_eq(a: object, b: object) -> bool:
    return not is_eq(a, b)


# Ord


def compare(a: object, b: object) -> Ordering:
    _same_type(a, b, function="compare")
    if is_declared(a):
        return _dispatch(a, Ord, Operation.COMPARE, function="compare")(a, b)
    if is_native_ord(a):
        return native_compare(a, b)
    raise NotApplicableError(a, "compare", Ord.name)


def less_than(a: object, b: object) -> bool:
    return compare(a, b) is Ordering.LT


def less_than_or_equal(a: object, b: object) -> bool:
    return compare(a, b) is not Ordering.GT


def greater_than(a: object, b: object) -> bool:
    return compare(a, b) is Ordering.GT


def greater_than_or_equal(a: object, b: object) -> bool:
    return compare(a, b) is not Ordering.LT


def max(a: object, b: object) -> object:
    return b if less_than_or_equal(a, b) else a


def min(a: object, b: object) -> object:
    return a if less_than_or_equal(a, b) else b


class ComparisonOperators:
    """Mixin routing Python's comparison operators to :func:`is_eq` and :func:`compare`.

    Operands of a different class compare as ``NotImplemented``.
    """

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return is_eq(self, other)

    def __ne__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return not is_eq(self, other)

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return less_than(self, other)

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return less_than_or_equal(self, other)

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return greater_than(self, other)

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return greater_than_or_equal(self, other)


# Monoid


def mempty(a: object) -> object:
    """Identity element of ``a``'s monoid."""
    return _dispatch(a, Monoid, Operation.MEMPTY, function="mempty")(a)


def mappend(a: object, b: object) -> object:
    _same_type(a, b, function="mappend")
    return _dispatch(a, Monoid, Operation.MAPPEND, function="mappend")(a, b)


def _first_element(t: object) -> object:
    return foldr(lambda x, _: x, _MISSING, t)


def mconcat(t: object) -> object:
    """Fold a structure of monoid values right to left from the elements' identity.

    A structure with no elements folds to its own identity, e.g. ``mconcat(EMPTY)``
    is ``EMPTY``.
    """
    require(t, Foldable, function="mconcat")
    first = _first_element(t)
    if first is _MISSING:
        return mempty(t)
    return foldr(mappend, mempty(first), t)


# Functor


def fmap(f: Callable, a: object) -> object:
    return _dispatch(a, Functor, Operation.FMAP, function="fmap")(f, a)


def replace_by(x: object, a: object) -> object:
    """Replace every value inside the functor ``a`` with ``x``."""
    return fmap(constant(x), a)


# Applicative


def pure(witness: object, x: object) -> object:
    """Lift ``x`` into the applicative of ``witness``."""
    return _dispatch(witness, Applicative, Operation.PURE, function="pure")(witness, x)


def ap(f: object, a: object) -> object:
    require(f, Applicative, function="ap")
    require(a, Applicative, function="ap")
    _same_type(f, a, function="ap")
    return getattr(type(a), Operation.AP.value)(f, a)


def lift_a(f: Callable, a: object) -> object:
    return ap(pure(a, f), a)


def lift_a2(f: Callable, a: object, b: object) -> object:
    return ap(fmap(lambda x: lambda y: f(x, y), a), b)


def lift_a3(f: Callable, a: object, b: object, c: object) -> object:
    return ap(ap(fmap(lambda x: lambda y: lambda z: f(x, y, z), a), b), c)


def then(a1: object, a2: object) -> object:
    """Sequence two actions, keeping the value of the second."""
    return lift_a2(lambda _, y: y, a1, a2)


def skip(a1: object, a2: object) -> object:
    """Sequence two actions, keeping the value of the first."""
    return lift_a2(lambda x, _: x, a1, a2)


def ap_flip(f: Callable, a: object, b: object) -> object:
    return lift_a2(flip(f), a, b)


# Monad


def inject(m: object, x: object) -> object:
    """``return`` for the monad of ``m``."""
    return _dispatch(m, Monad, Operation.PURE, function="inject")(m, x)


def bind(m: object, f: Callable) -> object:
    return _dispatch(m, Monad, Operation.BIND, function="bind")(m, f)


def bind_flip(f: Callable, m: object) -> object:
    return bind(m, f)


def chain(m: object, k: object) -> object:
    """Sequence two monadic values, discarding the first value (``>>``)."""
    require(m, Monad, function="chain")
    return then(m, k)


def join(m: object) -> object:
    require(m, Monad, function="join")
    return bind(m, identity)


def lift_m(f: Callable, m: object) -> object:
    require(m, Monad, function="lift_m")
    return fmap(f, m)


@dataclass(frozen=True)
class DoBlock:
    """Fluent chain of monadic steps: ``do(m).bind(f).chain(k).inject(x).value``.

    ``inject`` sequences a final ``return x`` after the steps so far, so its
    effects (e.g. an empty list, ``NOTHING``) are kept.
    """

    value: object

    def bind(self, f: Callable) -> "DoBlock":
        return DoBlock(bind(self.value, f))

    def chain(self, k: object) -> "DoBlock":
        return DoBlock(chain(self.value, k))

    def inject(self, x: object) -> "DoBlock":
        return DoBlock(chain(self.value, inject(self.value, x)))


def do(m: object) -> DoBlock:
    require(m, Monad, function="do")
    return DoBlock(m)


# Foldable


def foldr(f: Callable, z: object, t: object) -> object:
    return _dispatch(t, Foldable, Operation.FOLDR, function="foldr")(f, z, t)


def fold_map(f: Callable, t: object) -> object:
    """Map each element to a monoid and combine the results."""
    require(t, Foldable, function="fold_map")
    return mconcat(fmap(f, t))


def fold(t: object) -> object:
    return fold_map(identity, t)


def null(t: object) -> bool:
    """True when a foldable structure holds no elements.

    Structures that can answer without a fold (lists, optional values) do so,
    which keeps ``null`` finite on infinite lists.
    """
    require(t, Foldable, function="null")
    shortcut = getattr(type(t), "null", None)
    if shortcut is not None:
        return shortcut(t)
    return foldr(lambda x, acc: False, True, t)


# Traversable


def traverse(f: Callable, t: object) -> object:
    return _dispatch(t, Traversable, Operation.TRAVERSE, function="traverse")(f, t)


def map_m(f: Callable, m: object) -> object:
    require(m, Monad, function="map_m")
    return traverse(f, m)


def sequence(m: object) -> object:
    require(m, Monad, function="sequence")
    return traverse(identity, m)
