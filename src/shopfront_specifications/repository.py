"""SpecificationRepository: generic read repository driven by ``Criteria``."""

from __future__ import annotations

import builtins
import contextlib
import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from shopfront_core.domain.ordering import SortKey
from shopfront_core.ports.repository import IReadRepository

from .evaluator import evaluate, evaluate_count, evaluate_single

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from contextlib import AbstractAsyncContextManager

    from shopfront_core.ports.queryable import IQueryable

    from .criteria import Criteria

logger = logging.getLogger("shopfront.repository")

T = TypeVar("T")


class SpecificationRepository(IReadRepository[T], Generic[T]):
    """
    Read-only repository for one entity type.

    The repository owns no connection: *source_factory* is called once per
    operation and must return an async context manager yielding a fresh
    ``IQueryable[T]``.  Connection pooling, transactions and timeouts
    belong to whoever provides that factory.

    Every operation is exactly one store round trip.  ``count`` and
    ``list`` are separate calls, so a paged request costs two::

        total = await repo.count(criteria)
        page = await repo.list(criteria)

    ``list_all`` orders by *tie_breaker* so repeated calls agree.

    Store failures are logged and re-raised unchanged; there are no retries.
    """

    def __init__(
        self,
        source_factory: Callable[[], AbstractAsyncContextManager[IQueryable[T]]],
        *,
        name: str | None = None,
        tie_breaker: str = "id",
    ) -> None:
        self._source_factory = source_factory
        self._name = name or type(self).__name__
        self._tie_breaker = tie_breaker

    async def list_all(self) -> builtins.list[T]:
        """Return every entity, unfiltered, ordered by the tie-breaker field."""
        with self._logged("list_all"):
            async with self._source_factory() as source:
                return await source.order_by(
                    SortKey.ascending(self._tie_breaker)
                ).to_list()

    async def list(self, criteria: Criteria[Any]) -> builtins.list[T]:
        """Return the entities matching *criteria* (sorted and paged)."""
        with self._logged("list"):
            async with self._source_factory() as source:
                return await evaluate(source, criteria)

    async def get(self, criteria: Criteria[Any]) -> T | None:
        """Return the first entity matching *criteria*, or ``None``."""
        with self._logged("get"):
            async with self._source_factory() as source:
                return await evaluate_single(source, criteria)

    async def count(self, criteria: Criteria[Any]) -> int:
        """Count entities matching the filters of *criteria*, ignoring paging."""
        with self._logged("count"):
            async with self._source_factory() as source:
                return await evaluate_count(source, criteria)

    @contextlib.contextmanager
    def _logged(self, operation: str) -> Iterator[None]:
        try:
            yield
        except Exception:
            logger.exception("%s.%s failed", self._name, operation)
            raise
