from __future__ import annotations

import contextlib
from collections.abc import AsyncIterator, Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from shopfront_specifications.repository import SpecificationRepository

from .queryable import SQLAlchemyQueryable

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from .specifications.strategy import SQLAlchemyOperatorRegistry

T = TypeVar("T")
SessionFactory = Callable[[], "AsyncSession"]


class SQLAlchemyRepository(SpecificationRepository[T], Generic[T]):
    """
    Read repository over one mapped model.

    *session_factory* is typically an ``async_sessionmaker``; every
    operation opens its own short-lived session and closes it before
    returning, so entities come back detached.  Anything the caller needs
    from a relation must be requested through ``Criteria.include``::

        repo = SQLAlchemyRepository(Product, async_sessionmaker(engine))
        products = await repo.list(criteria)
    """

    def __init__(
        self,
        model_cls: type[T],
        session_factory: SessionFactory,
        *,
        registry: SQLAlchemyOperatorRegistry | None = None,
    ) -> None:
        self.model_cls = model_cls
        self._session_factory = session_factory
        self._registry = registry
        super().__init__(self._open_source, name=f"{model_cls.__name__}Repository")

    @contextlib.asynccontextmanager
    async def _open_source(self) -> AsyncIterator[SQLAlchemyQueryable[T]]:
        session: Any = self._session_factory()
        async with session:
            yield SQLAlchemyQueryable(
                session, self.model_cls, registry=self._registry
            )
