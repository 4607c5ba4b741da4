"""Basic function combinators shared by the type-class and list modules."""

from __future__ import annotations

import functools
import inspect
from typing import Callable

from .errors import MalformedReturnError


def curried(f: Callable) -> Callable:
    """Let ``f`` take its required positional arguments a few at a time.

    ``take(3)(xs)`` is ``take(3, xs)``. A call that supplies every required
    argument runs ``f`` at once; a shorter call returns a partial application.
    """
    required = tuple(
        parameter.name
        for parameter in inspect.signature(f).parameters.values()
        if parameter.kind in (parameter.POSITIONAL_ONLY, parameter.POSITIONAL_OR_KEYWORD)
        and parameter.default is parameter.empty
    )

    @functools.wraps(f)
    def wrapper(*args: object, **kwargs: object) -> object:
        supplied = len(args) + sum(1 for name in required[len(args):] if name in kwargs)
        if supplied >= len(required):
            return f(*args, **kwargs)
        return functools.partial(wrapper, *args, **kwargs)

    return wrapper


def identity(a: object) -> object:
    return a


def constant(a: object) -> Callable:
    """Function that ignores its argument and returns ``a``."""
    return lambda *_: a


def flip(f: Callable) -> Callable:
    """Swap the two arguments of a binary function; the result is curried."""

    @curried
    def flipped(x: object, y: object) -> object:
        return f(y, x)

    return flipped


@curried
def compose(f: Callable, g: Callable) -> Callable:
    """``compose(f, g)(x) == f(g(x))``."""
    return lambda x: f(g(x))


@curried
def until(pred: Callable[[object], bool], f: Callable, x: object) -> object:
    """Apply ``f`` to ``x`` until ``pred`` holds."""
    while True:
        test = pred(x)
        if not isinstance(test, bool):
            raise MalformedReturnError(pred, "until", test)
        if test:
            return x
        x = f(x)


def even(a: object) -> bool:
    return a % 2 == 0


def odd(a: object) -> bool:
    return a % 2 != 0
