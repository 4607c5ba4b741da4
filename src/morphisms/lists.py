"""Persistent homogeneous cons lists.

A list is either the shared ``EMPTY`` value or a cell holding a head and a
tail. Cells built by generators keep a pending source instead of a tail: the
tail is pulled from that source the first time it is observed and memoized
afterwards, so conceptually infinite lists cost only what is consumed.

Every operation that walks the spine is a loop, so long lists never hit the
interpreter recursion limit.
"""

from __future__ import annotations

import itertools
import os
from typing import Callable, Final, Iterable, Iterator, Sequence

from . import combinators as tc
from .base import curried
from .errors import (
    EmptyStructureError,
    MalformedReturnError,
    NotApplicableError,
    TypeMismatchError,
)
from .maybe import NOTHING, Maybe, just
from .tuples import tuple_of
from .typeclass import (
    Eq,
    Foldable,
    Monad,
    Monoid,
    Ord,
    Ordering,
    Traversable,
    instance,
    same_type,
    type_name,
)

# Cells rendered by repr() before the rest of the list is elided.
REPR_MAX_CELLS: Final[int] = int(os.environ.get("MORPHISMS_REPR_MAX_CELLS", "32"))


class _Nil:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<nil>"


_NIL: Final = _Nil()


class _Failed:
    """Pending-tail marker for a source that raised while producing the tail."""

    __slots__ = ("error",)

    def __init__(self, error: BaseException) -> None:
        self.error = error


@instance(Eq, Ord, Monoid, Monad, Foldable, Traversable)
class List(tc.ComparisonOperators):
    """A cons cell, or the empty list when it holds no head.

    Use :func:`cons`, :func:`list_of` or the generators to build lists; the
    constructor performs no homogeneity check.
    """

    __slots__ = ("_head", "_tail", "_source")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, head: object = _NIL, tail: "List | None" = None, source: Iterator | None = None) -> None:
        self._head = head
        self._tail = tail
        self._source = source

    def _rest(self) -> "List":
        source = self._source
        if source is None:
            return self._tail  # type: ignore[return-value]
        if isinstance(source, _Failed):
            raise source.error
        try:
            self._tail = _pull(source, self._head)
        except BaseException as exc:
            # Later reads re-raise instead of resuming the source.
            self._source = _Failed(exc)
            raise
        self._source = None
        return self._tail

    def __iter__(self) -> Iterator[object]:
        cell = self
        while cell is not EMPTY:
            yield cell._head
            cell = cell._rest()

    def __len__(self) -> int:
        return length(self)

    def __bool__(self) -> bool:
        return self is not EMPTY

    def __repr__(self) -> str:
        if self is EMPTY:
            return "[]"
        parts: list[str] = []
        cell = self
        while cell is not EMPTY:
            if len(parts) == REPR_MAX_CELLS:
                parts.append("...")
                return "[" + ":".join(parts) + "]"
            parts.append(repr(cell._head))
            cell = cell._rest()
        parts.append("[]")
        return "[" + ":".join(parts) + "]"

    def type_name(self) -> str:
        if self is EMPTY:
            return "[]"
        return f"[{type_name(self._head)}]"

    @staticmethod
    def is_eq(a: "List", b: "List") -> bool:
        x, y = a, b
        while x is not EMPTY and y is not EMPTY:
            if not tc.is_eq(x._head, y._head):
                return False
            x, y = x._rest(), y._rest()
        return x is EMPTY and y is EMPTY

    @staticmethod
    def compare(a: "List", b: "List") -> Ordering:
        x, y = a, b
        while x is not EMPTY and y is not EMPTY:
            order = tc.compare(x._head, y._head)
            if order is not Ordering.EQ:
                return order
            x, y = x._rest(), y._rest()
        if x is EMPTY:
            return Ordering.EQ if y is EMPTY else Ordering.LT
        return Ordering.GT

    @staticmethod
    def mempty(_: "List") -> "List":
        return EMPTY

    @staticmethod
    def mappend(a: "List", b: "List") -> "List":
        return append(a, b)

    @staticmethod
    def fmap(f: Callable, xs: "List") -> "List":
        return map(f, xs)

    @staticmethod
    def pure(_: "List", x: object) -> "List":
        return List(x, EMPTY)

    @staticmethod
    def ap(fs: "List", xs: "List") -> "List":
        def applied() -> Iterator[object]:
            for f in fs:
                if not callable(f):
                    raise NotApplicableError(fs, "ap")
                for x in xs:
                    yield f(x)

        return collect(applied(), lazy=not (is_materialized(fs) and is_materialized(xs)), function="ap")

    @staticmethod
    def bind(xs: "List", f: Callable) -> "List":
        return _concat_lists(_mapped_lists(f, xs, "bind"), lazy=not is_materialized(xs))

    @staticmethod
    def foldr(f: Callable, z: object, xs: "List") -> object:
        acc = z
        for x in reversed(list(xs)):
            acc = f(x, acc)
        return acc

    @staticmethod
    def null(xs: "List") -> bool:
        return xs is EMPTY

    @staticmethod
    def traverse(f: Callable, xs: "List") -> object:
        # An empty list has no applicative to lift into, so it lifts into List.
        if xs is EMPTY:
            return List(EMPTY, EMPTY)
        results = [f(x) for x in xs]
        acc = tc.pure(results[-1], EMPTY)
        for result in reversed(results):
            acc = tc.lift_a2(cons, result, acc)
        return acc


EMPTY: Final = List()


def _pull(source: Iterator, previous: object) -> List:
    x = next(source, _NIL)
    if x is _NIL:
        return EMPTY
    if not same_type(x, previous):
        raise TypeMismatchError(previous, x, "cons")
    return List(x, None, source)


def lazy_list(values: Iterable) -> List:
    """List whose cells are pulled from ``values`` only as they are observed."""
    source = iter(values)
    x = next(source, _NIL)
    if x is _NIL:
        return EMPTY
    return List(x, None, source)


def from_sequence(values: Sequence, tail: List = EMPTY, *, function: str = "list_of") -> List:
    """Eager list of ``values`` followed by the shared ``tail``."""
    result = tail
    for x in reversed(values):
        if result is not EMPTY and not same_type(x, result._head):
            raise TypeMismatchError(x, result._head, function)
        result = List(x, result)
    return result


def collect(values: Iterable, *, lazy: bool, function: str) -> List:
    """Lazy list over ``values`` when ``lazy``, otherwise an eager one."""
    if lazy:
        return lazy_list(values)
    return from_sequence(list(values), function=function)


def is_materialized(xs: List) -> bool:
    """True when every cell of ``xs`` has already been produced."""
    cell = xs
    while cell is not EMPTY:
        if cell._source is not None:
            return False
        cell = cell._tail
    return True


def require_list(xs: object, function: str) -> List:
    if not isinstance(xs, List):
        raise NotApplicableError(xs, function, "List")
    return xs


def check_predicate(pred: Callable[[object], bool], x: object, function: str) -> bool:
    """Apply ``pred`` to ``x``, insisting on a boolean answer."""
    result = pred(x)
    if not isinstance(result, bool):
        raise MalformedReturnError(pred, function, result)
    return result


def _mapped_lists(f: Callable, xs: List, function: str) -> Iterator[List]:
    for x in xs:
        ys = f(x)
        if not isinstance(ys, List):
            raise MalformedReturnError(f, function, ys)
        yield ys


def _concat_lists(lists: Iterable[List], *, lazy: bool) -> List:
    if lazy:
        return lazy_list(itertools.chain.from_iterable(lists))
    pieces = [ys for ys in lists if ys is not EMPTY]
    if not pieces:
        return EMPTY
    if not all(is_materialized(ys) for ys in pieces[:-1]):
        return lazy_list(itertools.chain.from_iterable(pieces))
    items = [x for ys in pieces[:-1] for x in ys]
    return from_sequence(items, pieces[-1], function="concat")


# Construction and deconstruction


@curried
def cons(x: object, xs: List) -> List:
    require_list(xs, "cons")
    if xs is not EMPTY and not same_type(x, xs._head):
        raise TypeMismatchError(x, xs._head, "cons")
    return List(x, xs)


def list_of(*values: object) -> List:
    return from_sequence(values)


def is_list(x: object) -> bool:
    return isinstance(x, List)


def is_empty(xs: List) -> bool:
    return require_list(xs, "is_empty") is EMPTY


def head(xs: List) -> object:
    require_list(xs, "head")
    if xs is EMPTY:
        raise EmptyStructureError(xs, "head")
    return xs._head


def tail(xs: List) -> List:
    require_list(xs, "tail")
    if xs is EMPTY:
        raise EmptyStructureError(xs, "tail")
    return xs._rest()


def last(xs: List) -> object:
    require_list(xs, "last")
    if xs is EMPTY:
        raise EmptyStructureError(xs, "last")
    cell = xs
    while True:
        rest = cell._rest()
        if rest is EMPTY:
            return cell._head
        cell = rest


def _all_but_last(xs: List) -> Iterator[object]:
    values = iter(xs)
    previous = next(values)
    for x in values:
        yield previous
        previous = x


def init(xs: List) -> List:
    """Every element except the last."""
    require_list(xs, "init")
    if xs is EMPTY:
        raise EmptyStructureError(xs, "init")
    return collect(_all_but_last(xs), lazy=not is_materialized(xs), function="init")


def uncons(xs: List) -> Maybe:
    """``just((head, tail))``, or ``NOTHING`` for the empty list."""
    require_list(xs, "uncons")
    if xs is EMPTY:
        return NOTHING
    return just(tuple_of(xs._head, xs._rest()))


def length(xs: List) -> int:
    require_list(xs, "length")
    n = 0
    cell = xs
    while cell is not EMPTY:
        n += 1
        cell = cell._rest()
    return n


def reverse(xs: List) -> List:
    require_list(xs, "reverse")
    result = EMPTY
    for x in xs:
        result = List(x, result)
    return result


# Combining


@curried
def append(xs: List, ys: List) -> List:
    """``xs ++ ys``; the result shares ``ys``."""
    require_list(xs, "append")
    require_list(ys, "append")
    if xs is EMPTY:
        return ys
    if ys is EMPTY:
        return xs
    if not same_type(xs._head, ys._head):
        raise TypeMismatchError(xs, ys, "append")
    if not is_materialized(xs):
        return lazy_list(itertools.chain(xs, ys))
    return from_sequence(list(xs), ys, function="append")


def concat(xss: List) -> List:
    require_list(xss, "concat")
    if xss is EMPTY:
        return EMPTY
    if not isinstance(xss._head, List):
        raise NotApplicableError(xss, "concat", "List")
    return _concat_lists(xss, lazy=not is_materialized(xss))


@curried
def concat_map(f: Callable[[object], List], xs: List) -> List:
    require_list(xs, "concat_map")
    return _concat_lists(_mapped_lists(f, xs, "concat_map"), lazy=not is_materialized(xs))


# Folds and scans


@curried
def foldr(f: Callable, z: object, xs: List) -> object:
    return List.foldr(f, z, require_list(xs, "foldr"))


@curried
def foldl(f: Callable, z: object, xs: List) -> object:
    acc = z
    for x in require_list(xs, "foldl"):
        acc = f(acc, x)
    return acc


@curried
def scanl(f: Callable, z: object, xs: List) -> List:
    """Successive left-fold accumulators, starting with ``z``."""
    require_list(xs, "scanl")

    def scanned() -> Iterator[object]:
        acc = z
        yield acc
        for x in xs:
            acc = f(acc, x)
            yield acc

    return collect(scanned(), lazy=not is_materialized(xs), function="scanl")


@curried
def scanr(f: Callable, z: object, xs: List) -> List:
    """Successive right-fold accumulators, ending with ``z``."""
    require_list(xs, "scanr")
    acc = z
    results = [acc]
    for x in reversed(list(xs)):
        acc = f(x, acc)
        results.append(acc)
    results.reverse()
    return from_sequence(results, function="scanr")


# Transforms


@curried
def map(f: Callable, xs: List) -> List:
    require_list(xs, "map")
    return collect((f(x) for x in xs), lazy=not is_materialized(xs), function="map")


@curried
def filter(pred: Callable[[object], bool], xs: List) -> List:
    require_list(xs, "filter")
    kept = (x for x in xs if check_predicate(pred, x, "filter"))
    return collect(kept, lazy=not is_materialized(xs), function="filter")


# Conversions


def from_array_to_list(values: Sequence) -> List:
    if not isinstance(values, (list, tuple)):
        raise NotApplicableError(values, "from_array_to_list")
    return from_sequence(values, function="from_array_to_list")


def from_list_to_array(xs: List) -> list:
    return list(require_list(xs, "from_list_to_array"))


def from_string_to_list(s: str) -> List:
    if not isinstance(s, str):
        raise NotApplicableError(s, "from_string_to_list")
    return from_sequence(s, function="from_string_to_list")


def from_list_to_string(xs: List) -> str:
    chars = from_list_to_array(xs)
    if chars and not isinstance(chars[0], str):
        raise NotApplicableError(xs, "from_list_to_string")
    return "".join(chars)


# Maybe bridges


def list_to_maybe(xs: List) -> Maybe:
    """``just`` the head of ``xs``, or ``NOTHING`` when it is empty."""
    require_list(xs, "list_to_maybe")
    if xs is EMPTY:
        return NOTHING
    return just(xs._head)


def maybe_to_list(m: Maybe) -> List:
    if not isinstance(m, Maybe):
        raise NotApplicableError(m, "maybe_to_list", "Maybe")
    if m is NOTHING:
        return EMPTY
    return List(m.value, EMPTY)


def cat_maybes(ms: List) -> List:
    """The payloads of every ``just`` in a list of optional values."""
    require_list(ms, "cat_maybes")
    if ms is not EMPTY and not isinstance(ms._head, Maybe):
        raise NotApplicableError(ms, "cat_maybes", "Maybe")
    values = (m.value for m in ms if m is not NOTHING)
    return collect(values, lazy=not is_materialized(ms), function="cat_maybes")


@curried
def map_maybe(f: Callable[[object], Maybe], xs: List) -> List:
    """Map ``f`` over ``xs`` and keep the payloads of the ``just`` results."""
    require_list(xs, "map_maybe")

    def kept() -> Iterator[object]:
        for x in xs:
            m = f(x)
            if not isinstance(m, Maybe):
                raise MalformedReturnError(f, "map_maybe", m)
            if m is not NOTHING:
                yield m.value

    return collect(kept(), lazy=not is_materialized(xs), function="map_maybe")
