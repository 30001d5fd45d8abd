"""Specification pattern primitives."""

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T", contravariant=True)


@runtime_checkable
class ISpecification(Protocol[T]):
    """
    Protocol for the Specification pattern.
    Used to encapsulate filter rules for querying entities of one type.
    """

    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Check whether *candidate* matches.
        Used by in-memory sources; SQL sources compile ``to_dict()`` instead.
        """
        ...

    def to_dict(self) -> dict[str, Any]:
        """
        Return a dictionary representation of the specification.
        Useful for handing criteria to a store-specific compiler.
        """
        ...
