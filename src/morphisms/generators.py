"""Ranges and lazily generated, possibly infinite, lists."""

from __future__ import annotations

import itertools
import math
from typing import Callable, Iterator

from . import combinators as tc
from .base import curried, identity
from .errors import EmptyStructureError
from .lists import (
    EMPTY,
    List,
    check_predicate,
    from_sequence,
    lazy_list,
    require_list,
)


def _successor(x):
    return x + 1


@curried
def list_range(
    start,
    end,
    step: Callable | None = None,
    predicate: Callable[[object], bool] | None = None,
) -> List:
    """Eager list from ``start`` up to, but excluding, ``end``.

    ``step`` produces each next value (default ``x + 1``); values rejected by
    ``predicate`` are skipped but still advance the range.
    """
    step = _successor if step is None else step
    values = []
    x = start
    while tc.less_than(x, end):
        if predicate is None or check_predicate(predicate, x, "list_range"):
            values.append(x)
        x = step(x)
    return from_sequence(values, function="list_range")


@curried
def list_filter(start, end, predicate: Callable[[object], bool]) -> List:
    return list_range(start, end, _successor, predicate)


def _stepped(start, end, step: Callable) -> Iterator[object]:
    x = start
    while True:
        yield x
        x = step(x)
        if end is not None and tc.greater_than(x, end):
            return


@curried
def list_range_lazy_by(start, end, step: Callable) -> List:
    """Lazy list from ``start`` up to and including ``end``, advancing with ``step``."""
    if tc.greater_than(start, end):
        return EMPTY
    return lazy_list(_stepped(start, end, step))


@curried
def list_range_lazy(start, end) -> List:
    return list_range_lazy_by(start, end, _successor)


@curried
def list_inf_by(start, step: Callable) -> List:
    return list_range_lazy_by(start, math.inf, step)


def list_inf(start) -> List:
    """``start, start + 1, start + 2, ...``"""
    return list_inf_by(start, _successor)


@curried
def iterate(f: Callable, x) -> List:
    """``x, f(x), f(f(x)), ...``"""
    return lazy_list(_stepped(x, None, f))


def repeat(x) -> List:
    return lazy_list(_stepped(x, None, identity))


@curried
def replicate(n: int, x) -> List:
    return from_sequence([x] * n if n > 0 else [], function="replicate")


def cycle(xs: List) -> List:
    """Infinite repetition of the finite list ``xs``."""
    require_list(xs, "cycle")
    if xs is EMPTY:
        raise EmptyStructureError(xs, "cycle")
    return lazy_list(itertools.cycle(xs))
