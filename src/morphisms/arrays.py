"""Conversions between JAX arrays and (nested) lists."""

from __future__ import annotations

import numbers

import jax.numpy as jnp

from .errors import NotApplicableError
from .lists import EMPTY, List, from_sequence, require_list


def _nested_list(values: object) -> object:
    if isinstance(values, list):
        return from_sequence([_nested_list(v) for v in values], function="from_jax_array_to_list")
    return values


def from_jax_array_to_list(arr) -> List:
    """Rows of a JAX array as a list; an array of rank ``k`` becomes ``k`` nested lists."""
    array = jnp.asarray(arr)
    if array.ndim == 0:
        raise NotApplicableError(arr, "from_jax_array_to_list")
    return _nested_list(array.tolist())


def _plain_values(xs: List) -> list:
    values = []
    for x in xs:
        if isinstance(x, List):
            values.append(_plain_values(x))
        elif isinstance(x, numbers.Number):
            values.append(x)
        else:
            raise NotApplicableError(xs, "from_list_to_jax_array")
    return values


def from_list_to_jax_array(xs: List, dtype=None):
    """JAX array holding the numbers of ``xs``; nested lists must be rectangular."""
    require_list(xs, "from_list_to_jax_array")
    if xs is EMPTY:
        return jnp.asarray([], dtype=dtype)
    values = _plain_values(xs)
    try:
        return jnp.asarray(values, dtype=dtype)
    except (TypeError, ValueError) as exc:
        raise NotApplicableError(xs, "from_list_to_jax_array") from exc
