"""Capability registry: explicit type-class declarations and value introspection.

A concrete type takes part in dispatch only by declaring, with the
:func:`instance` class decorator, which type classes it implements. The
registry records the union of operations those classes require; generic
combinators ask it whether a value supports an operation and, if so, fetch the
implementation from the value's class.

Booleans, numbers, strings and bytes never declare anything, yet they satisfy
``Eq`` and (except complex numbers) ``Ord`` through native comparison.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final, TypeVar

from .errors import NotApplicableError


class Operation(str, Enum):
    IS_EQ = "is_eq"
    COMPARE = "compare"
    MEMPTY = "mempty"
    MAPPEND = "mappend"
    FMAP = "fmap"
    PURE = "pure"
    AP = "ap"
    BIND = "bind"
    FOLDR = "foldr"
    TRAVERSE = "traverse"


@dataclass(frozen=True)
class TypeClass:
    """A named set of operations a concrete type may declare."""

    name: str
    operations: frozenset[Operation]

    def __str__(self) -> str:
        return self.name


Eq: Final = TypeClass("Eq", frozenset({Operation.IS_EQ}))
Ord: Final = TypeClass("Ord", frozenset({Operation.IS_EQ, Operation.COMPARE}))
Monoid: Final = TypeClass("Monoid", frozenset({Operation.MEMPTY, Operation.MAPPEND}))
Functor: Final = TypeClass("Functor", frozenset({Operation.FMAP}))
Applicative: Final = TypeClass("Applicative", frozenset({Operation.FMAP, Operation.PURE, Operation.AP}))
Monad: Final = TypeClass("Monad", frozenset({Operation.FMAP, Operation.PURE, Operation.AP, Operation.BIND}))
Foldable: Final = TypeClass("Foldable", frozenset({Operation.FOLDR}))
Traversable: Final = TypeClass("Traversable", frozenset({Operation.FMAP, Operation.FOLDR, Operation.TRAVERSE}))

_REGISTRY: dict[type, frozenset[Operation]] = {}
_DECLARED: dict[type, tuple[TypeClass, ...]] = {}
_FUNCTION_TYPE: Final[type] = type(lambda: None)

_T = TypeVar("_T", bound=type)


def instance(*type_classes: TypeClass) -> Callable[[_T], _T]:
    """Class decorator declaring the type classes a concrete type implements.

    Every operation the declared classes require must be defined on the class
    (normally as a staticmethod); a missing one is a programming error and is
    reported when the class is created.
    """

    def declare(cls: _T) -> _T:
        required: frozenset[Operation] = frozenset().union(*(tc.operations for tc in type_classes))
        missing = sorted(op.value for op in required if not callable(getattr(cls, op.value, None)))
        if missing:
            names = ", ".join(tc.name for tc in type_classes)
            raise TypeError(f"{cls.__name__} declares {names} but does not define {', '.join(missing)}")
        _REGISTRY[cls] = required
        _DECLARED[cls] = tuple(type_classes)
        return cls

    return declare


def _declared_operations(cls: type) -> frozenset[Operation] | None:
    for klass in cls.__mro__:
        ops = _REGISTRY.get(klass)
        if ops is not None:
            return ops
    return None


def declared_type_classes(cls: type) -> tuple[TypeClass, ...]:
    for klass in cls.__mro__:
        declared = _DECLARED.get(klass)
        if declared is not None:
            return declared
    return ()


def is_declared(value: object) -> bool:
    return _declared_operations(type(value)) is not None


def is_native_eq(value: object) -> bool:
    return isinstance(value, (bool, numbers.Number, str, bytes))


def is_native_ord(value: object) -> bool:
    return isinstance(value, (bool, numbers.Real, str, bytes))


def implements(value: object, type_class: TypeClass) -> bool:
    """Report whether ``value``'s concrete type declares every operation of ``type_class``."""
    ops = _declared_operations(type(value))
    if ops is None:
        if type_class is Eq:
            return is_native_eq(value)
        if type_class is Ord:
            return is_native_ord(value)
        return False
    return type_class.operations <= ops


def require(value: object, type_class: TypeClass, *, function: str) -> None:
    if not implements(value, type_class):
        raise NotApplicableError(value, function, type_class.name)


def operation(value: object, op: Operation, *, function: str) -> Callable[..., object]:
    """Fetch the implementation of ``op`` declared by ``value``'s concrete type."""
    ops = _declared_operations(type(value))
    if ops is None or op not in ops:
        raise NotApplicableError(value, function)
    return getattr(type(value), op.value)


def data_type(value: object) -> type:
    """Concrete type used for same-type checks.

    Declared types stand for themselves. All non-boolean numbers share one
    type, as do all plain callables.
    """
    cls = type(value)
    if _declared_operations(cls) is not None:
        return cls
    if isinstance(value, bool):
        return bool
    if isinstance(value, numbers.Number):
        return numbers.Number
    if callable(value) and not isinstance(value, type):
        return _FUNCTION_TYPE
    return cls


def same_type(a: object, b: object) -> bool:
    return data_type(a) is data_type(b)


def type_name(value: object) -> str:
    """Declared type name of a value, e.g. ``number``, ``[str]``, ``Maybe number``, ``(number,str)``."""
    if is_declared(value):
        describe = getattr(value, "type_name", None)
        if callable(describe):
            return describe()
        return type(value).__name__
    kind = data_type(value)
    if kind is numbers.Number:
        return "number"
    if kind is _FUNCTION_TYPE:
        return "function"
    return kind.__name__


def native_compare(a: object, b: object, *, function: str = "compare") -> "Ordering":
    if a < b:  # type: ignore[operator]
        return Ordering.LT
    if a == b:
        return Ordering.EQ
    if a > b:  # type: ignore[operator]
        return Ordering.GT
    raise NotApplicableError(a, function, Ord.name)


@instance(Eq, Ord, Monoid)
class Ordering(Enum):
    """Three-way comparison result; a monoid that keeps the first non-``EQ`` result."""

    LT = -1
    EQ = 0
    GT = 1

    def __repr__(self) -> str:
        return self.name

    def type_name(self) -> str:
        return "Ordering"

    @staticmethod
    def is_eq(a: "Ordering", b: "Ordering") -> bool:
        return a is b

    @staticmethod
    def compare(a: "Ordering", b: "Ordering") -> "Ordering":
        return native_compare(a.value, b.value)

    @staticmethod
    def mempty(_: "Ordering") -> "Ordering":
        return Ordering.EQ

    @staticmethod
    def mappend(a: "Ordering", b: "Ordering") -> "Ordering":
        return b if a is Ordering.EQ else a


LT: Final = Ordering.LT
EQ: Final = Ordering.EQ
GT: Final = Ordering.GT
