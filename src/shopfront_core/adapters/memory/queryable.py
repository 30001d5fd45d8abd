"""InMemoryQueryable: list-backed query source for fakes and unit tests."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ...primitives.exceptions import UnknownFieldError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from ...domain.ordering import SortKey
    from ...domain.specification import ISpecification

T = TypeVar("T")

_MISSING = object()


class InMemoryQueryable(Generic[T]):
    """In-memory implementation of ``IQueryable[T]``.

    Filters with ``ISpecification.is_satisfied_by`` and sorts with stable
    Python sorts, so rows that compare equal keep their source order.
    ``None`` values sort before any other value in ascending order.

    Relations named by ``include`` are attached through *resolvers*
    (``relation name -> callable(entity) -> related``); a relation with no
    resolver must already be an attribute of the entity.

    Resolved relations are set on the source entities themselves, not on
    copies, so they stay visible to every holder of those objects.  Only
    rows that survive filtering and paging are touched.
    """

    def __init__(
        self,
        items: Iterable[T],
        *,
        resolvers: Mapping[str, Callable[[T], Any]] | None = None,
    ) -> None:
        self._items: tuple[T, ...] = tuple(items)
        self._resolvers: dict[str, Callable[[T], Any]] = dict(resolvers or {})
        self._filters: tuple[ISpecification[Any], ...] = ()
        self._includes: tuple[str, ...] = ()
        self._order: tuple[SortKey, ...] = ()
        self._skip = 0
        self._take: int | None = None

    # -- composition ---------------------------------------------------------

    def where(self, specification: ISpecification[Any]) -> InMemoryQueryable[T]:
        return self._replace(_filters=(*self._filters, specification))

    def include(self, relation: str) -> InMemoryQueryable[T]:
        if relation in self._includes:
            return self
        return self._replace(_includes=(*self._includes, relation))

    def order_by(self, *keys: SortKey) -> InMemoryQueryable[T]:
        return self._replace(_order=tuple(keys))

    def skip(self, count: int) -> InMemoryQueryable[T]:
        return self._replace(_skip=max(0, count))

    def take(self, count: int) -> InMemoryQueryable[T]:
        return self._replace(_take=max(0, count))

    # -- terminals -----------------------------------------------------------

    async def to_list(self) -> list[T]:
        return self._materialise()

    async def first(self) -> T | None:
        rows = self._materialise()
        return rows[0] if rows else None

    async def count(self) -> int:
        return len(self._materialise())

    # -- internals -----------------------------------------------------------

    def _replace(self, **changes: Any) -> InMemoryQueryable[T]:
        clone = copy.copy(self)
        for name, value in changes.items():
            setattr(clone, name, value)
        return clone

    def _materialise(self) -> list[T]:
        rows = [
            item
            for item in self._items
            if all(spec.is_satisfied_by(item) for spec in self._filters)
        ]
        # Stable sorts applied last key first give lexicographic ordering.
        for key in reversed(self._order):
            rows.sort(
                key=lambda item, f=key.field: _sort_value(item, f),
                reverse=key.is_descending,
            )
        rows = rows[self._skip :]
        if self._take is not None:
            rows = rows[: self._take]
        for relation in self._includes:
            for item in rows:
                self._attach(item, relation)
        return rows

    def _attach(self, item: T, relation: str) -> None:
        resolver = self._resolvers.get(relation)
        if resolver is not None:
            setattr(item, relation, resolver(item))
        elif getattr(item, relation, _MISSING) is _MISSING:
            raise UnknownFieldError(
                relation, type(item).__name__, _public_fields(item)
            )


def _sort_value(item: Any, field: str) -> tuple[bool, Any]:
    value = getattr(item, field, _MISSING)
    if value is _MISSING:
        raise UnknownFieldError(field, type(item).__name__, _public_fields(item))
    return (value is not None, value)


def _public_fields(item: Any) -> list[str]:
    names = getattr(item, "__dict__", {}).keys()
    return [name for name in names if not name.startswith("_")]
