"""Composable specifications.

Composition is AND-only: criteria fold their filter list left to right
with ``&``.  There is no OR/NOT composite; adding one needs a
proper predicate-expression tree on both the memory and SQL sides.
"""

from typing import Any, Generic, TypeVar

from shopfront_core.domain.specification import ISpecification

T = TypeVar("T", contravariant=True)


class BaseSpecification(Generic[T], ISpecification[T]):
    """Base class for specifications with AND composition support."""

    def __and__(self, other: ISpecification[T]) -> "AndSpecification[T]":
        return AndSpecification(self, other)

    def merge(self, other: ISpecification[T]) -> "AndSpecification[T]":
        """Merge with another specification using logical AND."""
        return AndSpecification(self, other)


class AndSpecification(BaseSpecification[T]):
    """Logical AND composite specification.

    Nested ``AndSpecification`` children are flattened so chains of ``&``
    produce a single level.
    """

    def __init__(self, *specifications: ISpecification[T]) -> None:
        flat: list[ISpecification[T]] = []
        for spec in specifications:
            if isinstance(spec, AndSpecification):
                flat.extend(spec.specifications)
            else:
                flat.append(spec)
        self.specifications: tuple[ISpecification[T], ...] = tuple(flat)

    def is_satisfied_by(self, candidate: T) -> bool:
        return all(spec.is_satisfied_by(candidate) for spec in self.specifications)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "and",
            "conditions": [spec.to_dict() for spec in self.specifications],
        }
