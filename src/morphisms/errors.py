"""Structured error types for type-class dispatch and list operations."""

from __future__ import annotations

from dataclasses import dataclass


class MorphismError(Exception):
    """Base class for structured morphisms errors."""


def describe(value: object) -> str:
    """Short textual form of an operand for error messages."""
    if isinstance(value, type):
        return value.__name__
    if callable(value):
        name = getattr(value, "__name__", None)
        if isinstance(name, str):
            return f"function {name}"
    text = repr(value)
    if len(text) > 120:
        text = text[:117] + "..."
    return text


@dataclass(frozen=True)
class TypeMismatchError(MorphismError):
    """Two operands that must share a concrete type do not."""

    left: object
    right: object
    function: str

    def __str__(self) -> str:
        return (
            f"Arguments '{describe(self.left)}' and '{describe(self.right)}' "
            f"to function '{self.function}' are not the same type"
        )


@dataclass(frozen=True)
class NotApplicableError(MorphismError):
    """The value's type does not declare the capability an operation needs."""

    value: object
    function: str
    type_class: str | None = None

    def __str__(self) -> str:
        expected = ""
        if self.type_class is not None:
            expected = f"; expected an instance of {self.type_class}"
        return f"'{describe(self.value)}' is not a valid argument to function '{self.function}'{expected}"


@dataclass(frozen=True)
class EmptyStructureError(MorphismError):
    """An operation needs a non-empty list or optional value."""

    value: object
    function: str

    def __str__(self) -> str:
        return f"'{describe(self.value)}' is empty, but '{self.function}' expects a non-empty structure"


@dataclass(frozen=True)
class IndexOutOfRangeError(MorphismError):
    """A requested position does not exist."""

    index: object
    function: str

    def __str__(self) -> str:
        return f"Index '{self.index}' is out of range in function '{self.function}'"


@dataclass(frozen=True)
class MalformedReturnError(MorphismError):
    """A caller-supplied function broke its return contract."""

    callee: object
    function: str
    returned: object = None

    def __str__(self) -> str:
        return (
            f"Unexpected return value '{describe(self.returned)}' from '{describe(self.callee)}' "
            f"called by function '{self.function}'"
        )
