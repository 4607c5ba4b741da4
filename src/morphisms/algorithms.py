"""List algorithms: sublists, searching, sorting, set-like operations and zips."""

from __future__ import annotations

import builtins
import itertools
from typing import Callable, Iterator

from . import combinators as tc
from .base import curried
from .errors import IndexOutOfRangeError, MalformedReturnError, NotApplicableError, TypeMismatchError
from .lists import (
    EMPTY,
    List,
    check_predicate,
    collect,
    concat,
    from_sequence,
    head,
    is_materialized,
    require_list,
    tail,
)
from .maybe import NOTHING, Maybe, just
from .tuples import Tuple, fst, snd, tuple_of
from .typeclass import Ordering, same_type


def _require_count(n: object, function: str) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise NotApplicableError(n, function)
    return n


def _ordered(cmp: Callable, a: object, b: object, function: str) -> Ordering:
    result = cmp(a, b)
    if not isinstance(result, Ordering):
        raise MalformedReturnError(cmp, function, result)
    return result


def _related(eq: Callable, a: object, b: object, function: str) -> bool:
    result = eq(a, b)
    if not isinstance(result, bool):
        raise MalformedReturnError(eq, function, result)
    return result


# Sublists


@curried
def take(n: int, xs: List) -> List:
    """The first ``n`` elements; forces only the cells it returns."""
    require_list(xs, "take")
    if _require_count(n, "take") <= 0:
        return EMPTY
    return from_sequence(list(itertools.islice(xs, n)), function="take")


@curried
def drop(n: int, xs: List) -> List:
    """Everything after the first ``n`` elements, sharing the remainder."""
    require_list(xs, "drop")
    cell = xs
    for _ in range(_require_count(n, "drop")):
        if cell is EMPTY:
            break
        cell = tail(cell)
    return cell


@curried
def split_at(n: int, xs: List) -> Tuple:
    return tuple_of(take(n, xs), drop(n, xs))


@curried
def take_while(pred: Callable[[object], bool], xs: List) -> List:
    require_list(xs, "take_while")
    kept = itertools.takewhile(lambda x: check_predicate(pred, x, "take_while"), xs)
    return collect(kept, lazy=not is_materialized(xs), function="take_while")


@curried
def drop_while(pred: Callable[[object], bool], xs: List) -> List:
    require_list(xs, "drop_while")
    cell = xs
    while cell is not EMPTY and check_predicate(pred, head(cell), "drop_while"):
        cell = tail(cell)
    return cell


@curried
def span(pred: Callable[[object], bool], xs: List) -> Tuple:
    """``(take_while(pred, xs), drop_while(pred, xs))``"""
    return tuple_of(take_while(pred, xs), drop_while(pred, xs))


@curried
def span_not(pred: Callable[[object], bool], xs: List) -> Tuple:
    """Split ``xs`` at the first element satisfying ``pred``."""
    return span(lambda x: not check_predicate(pred, x, "span_not"), xs)


@curried
def strip_prefix(prefix: List, xs: List) -> Maybe:
    """``just`` the rest of ``xs`` after ``prefix``, or ``NOTHING`` if it does not start with it."""
    require_list(prefix, "strip_prefix")
    require_list(xs, "strip_prefix")
    p, cell = prefix, xs
    while p is not EMPTY:
        if cell is EMPTY or not tc.is_eq(head(p), head(cell)):
            return NOTHING
        p, cell = tail(p), tail(cell)
    return just(cell)


def _runs(eq: Callable, xs: List) -> Iterator[List]:
    cell = xs
    while cell is not EMPTY:
        first = head(cell)
        run = [first]
        cell = tail(cell)
        while cell is not EMPTY and _related(eq, first, head(cell), "group_by"):
            run.append(head(cell))
            cell = tail(cell)
        yield from_sequence(run, function="group_by")


@curried
def group_by(eq: Callable[[object, object], bool], xs: List) -> List:
    """Consecutive runs of elements related by ``eq`` to the first of their run."""
    require_list(xs, "group_by")
    return collect(_runs(eq, xs), lazy=not is_materialized(xs), function="group_by")


def group(xs: List) -> List:
    return group_by(tc.is_eq, xs)


# Indexing and searching


@curried
def index(xs: List, n: int) -> object:
    """Element at 0-based position ``n``."""
    require_list(xs, "index")
    if _require_count(n, "index") < 0:
        raise IndexOutOfRangeError(n, "index")
    cell = xs
    for _ in range(n):
        if cell is EMPTY:
            break
        cell = tail(cell)
    if cell is EMPTY:
        raise IndexOutOfRangeError(n, "index")
    return head(cell)


@curried
def find(pred: Callable[[object], bool], xs: List) -> Maybe:
    for x in require_list(xs, "find"):
        if check_predicate(pred, x, "find"):
            return just(x)
    return NOTHING


@curried
def find_index(pred: Callable[[object], bool], xs: List) -> Maybe:
    for i, x in enumerate(require_list(xs, "find_index")):
        if check_predicate(pred, x, "find_index"):
            return just(i)
    return NOTHING


@curried
def find_indices(pred: Callable[[object], bool], xs: List) -> List:
    """Ascending positions of every element satisfying ``pred``."""
    require_list(xs, "find_indices")
    positions = (i for i, x in enumerate(xs) if check_predicate(pred, x, "find_indices"))
    return collect(positions, lazy=not is_materialized(xs), function="find_indices")


@curried
def elem_index(x: object, xs: List) -> Maybe:
    return find_index(lambda y: tc.is_eq(x, y), xs)


@curried
def elem_indices(x: object, xs: List) -> List:
    return find_indices(lambda y: tc.is_eq(x, y), xs)


@curried
def lookup(key: object, assocs: List) -> Maybe:
    """Second slot of the first pair in ``assocs`` whose first slot equals ``key``."""
    for pair in require_list(assocs, "lookup"):
        if tc.is_eq(key, fst(pair)):
            return just(snd(pair))
    return NOTHING


# Ordering


@curried
def sort_by(cmp: Callable[[object, object], Ordering], xs: List) -> List:
    """Stable insertion sort under the three-way comparator ``cmp``."""
    require_list(xs, "sort_by")
    ordered: list = []
    for x in reversed(list(xs)):
        i = 0
        while i < len(ordered) and _ordered(cmp, x, ordered[i], "sort_by") is Ordering.GT:
            i += 1
        ordered.insert(i, x)
    return from_sequence(ordered, function="sort_by")


def sort(xs: List) -> List:
    return sort_by(tc.compare, xs)


def _merge_sorted(cmp: Callable, values: list) -> list:
    if len(values) <= 1:
        return values
    mid = len(values) // 2
    left = _merge_sorted(cmp, values[:mid])
    right = _merge_sorted(cmp, values[mid:])
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if _ordered(cmp, left[i], right[j], "merge_sort_by") is Ordering.GT:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


@curried
def merge_sort_by(cmp: Callable[[object, object], Ordering], xs: List) -> List:
    """Stable top-down merge sort; ties keep the left element first."""
    require_list(xs, "merge_sort_by")
    return from_sequence(_merge_sorted(cmp, list(xs)), function="merge_sort_by")


def merge_sort(xs: List) -> List:
    return merge_sort_by(tc.compare, xs)


@curried
def insert_by(cmp: Callable[[object, object], Ordering], x: object, xs: List) -> List:
    """Insert ``x`` before the first element it is not greater than."""
    require_list(xs, "insert_by")
    prefix = []
    cell = xs
    while cell is not EMPTY and _ordered(cmp, x, head(cell), "insert_by") is Ordering.GT:
        prefix.append(head(cell))
        cell = tail(cell)
    prefix.append(x)
    return from_sequence(prefix, cell, function="insert_by")


@curried
def insert(x: object, xs: List) -> List:
    return insert_by(tc.compare, x, xs)


# Set-like operations


def _first_occurrences(eq: Callable, xs: List) -> Iterator[object]:
    seen: list = []
    for x in xs:
        if not any(_related(eq, kept, x, "nub_by") for kept in seen):
            seen.append(x)
            yield x


@curried
def nub_by(eq: Callable[[object, object], bool], xs: List) -> List:
    """Keep only the first of every group of ``eq``-related elements."""
    require_list(xs, "nub_by")
    return collect(_first_occurrences(eq, xs), lazy=not is_materialized(xs), function="nub_by")


def nub(xs: List) -> List:
    return nub_by(tc.is_eq, xs)


@curried
def delete_l_by(eq: Callable[[object, object], bool], x: object, xs: List) -> List:
    """Remove the first element ``eq``-related to ``x``; the rest is shared."""
    require_list(xs, "delete_l_by")
    prefix = []
    cell = xs
    while cell is not EMPTY:
        y = head(cell)
        if _related(eq, x, y, "delete_l_by"):
            return from_sequence(prefix, tail(cell), function="delete_l_by")
        prefix.append(y)
        cell = tail(cell)
    return xs


@curried
def delete_l(x: object, xs: List) -> List:
    return delete_l_by(tc.is_eq, x, xs)


@curried
def delete_firsts_by(eq: Callable[[object, object], bool], xs: List, ys: List) -> List:
    """List difference: each element of ``ys`` removes one related element of ``xs``."""
    require_list(xs, "delete_firsts_by")
    result = xs
    for y in require_list(ys, "delete_firsts_by"):
        result = delete_l_by(eq, y, result)
    return result


@curried
def delete_firsts(xs: List, ys: List) -> List:
    return delete_firsts_by(tc.is_eq, xs, ys)


# Transforms


def _interspersed(sep: object, xs: List) -> Iterator[object]:
    for i, x in enumerate(xs):
        if i:
            yield sep
        yield x


@curried
def intersperse(sep: object, xs: List) -> List:
    require_list(xs, "intersperse")
    if xs is not EMPTY and not same_type(sep, head(xs)):
        raise TypeMismatchError(sep, head(xs), "intersperse")
    return collect(_interspersed(sep, xs), lazy=not is_materialized(xs), function="intersperse")


@curried
def intercalate(sep: List, xss: List) -> List:
    """Join the lists of ``xss`` with ``sep`` between each pair."""
    require_list(sep, "intercalate")
    return concat(intersperse(sep, xss))


def transpose(xss: List) -> List:
    """Swap rows and columns; short rows contribute nothing past their end."""
    require_list(xss, "transpose")
    if xss is EMPTY:
        return EMPTY
    if not isinstance(head(xss), List):
        raise NotApplicableError(xss, "transpose", "List")
    rows = [list(row) for row in xss]
    width = max((len(row) for row in rows), default=0)
    columns = [
        from_sequence([row[j] for row in rows if j < len(row)], function="transpose")
        for j in range(width)
    ]
    return from_sequence(columns, function="transpose")


# Zips


@curried
def zip_with(f: Callable[[object, object], object], xs: List, ys: List) -> List:
    """Combine elements pairwise, stopping at the shorter list."""
    require_list(xs, "zip_with")
    require_list(ys, "zip_with")
    combined = (f(x, y) for x, y in builtins.zip(xs, ys))
    return collect(combined, lazy=not (is_materialized(xs) and is_materialized(ys)), function="zip_with")


@curried
def zip_with3(f: Callable[[object, object, object], object], xs: List, ys: List, zs: List) -> List:
    require_list(xs, "zip_with3")
    require_list(ys, "zip_with3")
    require_list(zs, "zip_with3")
    combined = (f(x, y, z) for x, y, z in builtins.zip(xs, ys, zs))
    lazy = not (is_materialized(xs) and is_materialized(ys) and is_materialized(zs))
    return collect(combined, lazy=lazy, function="zip_with3")


@curried
def zip(xs: List, ys: List) -> List:
    return zip_with(tuple_of, xs, ys)


@curried
def zip3(xs: List, ys: List, zs: List) -> List:
    return zip_with3(tuple_of, xs, ys, zs)
