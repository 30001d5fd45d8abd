"""IQueryable: the abstract, store-agnostic query source."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from ..domain.ordering import SortKey
    from ..domain.specification import ISpecification

T = TypeVar("T")


@runtime_checkable
class IQueryable(Protocol[T]):
    """
    Deferred query over one entity collection.

    Every composing method returns a *new* queryable and leaves the
    receiver untouched, so a partially built query can be branched (one
    branch counted, another paged).  Nothing touches the store until one
    of the async terminals (``to_list``, ``first``, ``count``) is awaited.

    Implementations: ``InMemoryQueryable`` (sequence of objects) and
    ``SQLAlchemyQueryable`` (``Select`` bound to an ``AsyncSession``).
    """

    def where(self, specification: ISpecification[Any]) -> IQueryable[T]: ...

    def include(self, relation: str) -> IQueryable[T]: ...

    def order_by(self, *keys: SortKey) -> IQueryable[T]: ...

    def skip(self, count: int) -> IQueryable[T]: ...

    def take(self, count: int) -> IQueryable[T]: ...

    async def to_list(self) -> list[T]: ...

    async def first(self) -> T | None: ...

    async def count(self) -> int: ...
