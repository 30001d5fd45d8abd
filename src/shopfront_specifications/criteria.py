"""
Criteria: the declarative description of one query.

A ``Criteria`` bundles *what* to match (AND-ed filter specifications and
an optional single-entity filter) with *how* results are shaped
(relations to include, one sort key, a paging window).  It is consumed by
:mod:`shopfront_specifications.evaluator`, never by the specifications
themselves.

Instances are immutable; every modifier returns a new ``Criteria``::

    criteria = (
        Criteria[Product]()
        .where(brand_is_2)
        .include("product_brand", "product_type")
        .order_by_descending("price")
        .paginate(skip=6, take=6)
    )
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from shopfront_core.domain.ordering import SortKey

from .base import AndSpecification

if TYPE_CHECKING:
    from shopfront_core.domain.specification import ISpecification

T = TypeVar("T")


@dataclass(frozen=True)
class Criteria(Generic[T]):
    """
    Immutable query criteria for one entity type.

    Attributes:
        filters: Specifications combined with logical AND, in order.
        includes: Relation names to load eagerly with each result.
        order: The single active sort key (``None`` = natural order).
        skip: Rows to skip when paging is enabled.
        take: Page size; ``None`` disables paging.
        single: Extra filter applied only in single-entity lookups.
        tie_breaker: Stable field appended to every ordering so pages are
            reproducible.
    """

    filters: tuple[ISpecification[T], ...] = ()
    includes: tuple[str, ...] = ()
    order: SortKey | None = None
    skip: int = 0
    take: int | None = None
    single: ISpecification[T] | None = None
    tie_breaker: str = field(default="id")

    def __post_init__(self) -> None:
        if self.skip < 0:
            raise ValueError(f"skip must be >= 0, got {self.skip}")
        if self.take is not None and self.take <= 0:
            raise ValueError(f"take must be > 0 when paging, got {self.take}")

    # -- state ---------------------------------------------------------------

    @property
    def is_paging_enabled(self) -> bool:
        return self.take is not None

    @property
    def predicate(self) -> ISpecification[T] | None:
        """AND of every filter (and the single filter, if set)."""
        specs = list(self.filters)
        if self.single is not None:
            specs.append(self.single)
        if not specs:
            return None
        if len(specs) == 1:
            return specs[0]
        return AndSpecification(*specs)

    # -- modifiers -----------------------------------------------------------

    def where(self, *specifications: ISpecification[T]) -> Criteria[T]:
        """Return a copy with *specifications* AND-ed onto the filters."""
        return replace(self, filters=(*self.filters, *specifications))

    def include(self, *relations: str) -> Criteria[T]:
        """Return a copy that eagerly loads *relations* (duplicates ignored)."""
        merged = list(self.includes)
        for relation in relations:
            if relation not in merged:
                merged.append(relation)
        return replace(self, includes=tuple(merged))

    def order_by(self, field_name: str) -> Criteria[T]:
        """Sort ascending by *field_name*, replacing any previous sort key."""
        return replace(self, order=SortKey.ascending(field_name))

    def order_by_descending(self, field_name: str) -> Criteria[T]:
        """Sort descending by *field_name*, replacing any previous sort key."""
        return replace(self, order=SortKey.descending(field_name))

    def with_order(self, key: SortKey | None) -> Criteria[T]:
        return replace(self, order=key)

    def paginate(self, skip: int, take: int) -> Criteria[T]:
        """
        Enable paging.

        Raises:
            ValueError: If ``skip < 0`` or ``take <= 0``.
        """
        return replace(self, skip=skip, take=take)

    def without_paging(self) -> Criteria[T]:
        return replace(self, skip=0, take=None)

    def for_single(self, specification: ISpecification[T]) -> Criteria[T]:
        """Return a copy that resolves to at most one entity."""
        return replace(self, single=specification)

    # -- serialisation -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a JSON-compatible dictionary (for logs and debugging)."""
        result: dict[str, Any] = {}
        if self.filters:
            result["filters"] = [spec.to_dict() for spec in self.filters]
        if self.single is not None:
            result["single"] = self.single.to_dict()
        if self.includes:
            result["includes"] = list(self.includes)
        if self.order is not None:
            result["order"] = self.order.to_dict()
        if self.is_paging_enabled:
            result["skip"] = self.skip
            result["take"] = self.take
        return result
