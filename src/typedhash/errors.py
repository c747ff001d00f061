"""
Errors raised while resolving, encoding and hashing EIP-712 typed data.

All of them derive from TypedDataError, itself a ValueError, so callers that
only care about "bad input" can catch ValueError.
"""

from __future__ import annotations


class TypedDataError(ValueError):
    """Base class for typed-data failures."""


class MalformedInputError(TypedDataError):
    """The input document or a type definition is structurally invalid."""


class UnknownTypeError(TypedDataError):
    """A type name is referenced but not declared."""

    def __init__(self, type_name: str, referenced_by: str | None = None) -> None:
        self.type_name = type_name
        self.referenced_by = referenced_by
        if referenced_by is None:
            msg = f"Type {type_name!r} is not defined"
        else:
            msg = f"Type {type_name!r} referenced by {referenced_by!r} is not defined"
        super().__init__(msg)


class DependencyCycleError(TypedDataError):
    """The struct-reference graph contains a cycle."""

    def __init__(self, cycle: list[str]) -> None:
        self.cycle = cycle
        super().__init__(f"Type dependency cycle: {' -> '.join(cycle)}")


class MissingFieldError(TypedDataError):
    """A declared field is absent from a value map."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Missing value for field {path!r}")


class TypeMismatchError(TypedDataError):
    """A value's shape does not fit its declared field type."""

    def __init__(self, path: str, type_name: str, detail: str) -> None:
        self.path = path
        self.type_name = type_name
        super().__init__(f"Field {path!r} of type {type_name!r}: {detail}")


class NumericRangeError(TypedDataError):
    """A numeric value does not fit the declared bit width."""

    def __init__(self, path: str, type_name: str, value: int) -> None:
        self.path = path
        self.type_name = type_name
        self.value = value
        super().__init__(f"Field {path!r}: {value} is out of range for {type_name}")


class EmptyDomainError(TypedDataError):
    """No recognized EIP712Domain field was supplied."""


__all__: tuple[str, ...] = (
    "DependencyCycleError",
    "EmptyDomainError",
    "MalformedInputError",
    "MissingFieldError",
    "NumericRangeError",
    "TypeMismatchError",
    "TypedDataError",
    "UnknownTypeError",
)
