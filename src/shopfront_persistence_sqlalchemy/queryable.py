"""SQLAlchemyQueryable: ``IQueryable`` over an ``AsyncSession`` and a ``Select``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from shopfront_core.primitives.exceptions import UnknownFieldError

from .specifications.compiler import (
    build_order_by,
    build_sqla_filter,
    relationship_names,
)

if TYPE_CHECKING:
    from sqlalchemy import Select
    from sqlalchemy.ext.asyncio import AsyncSession

    from shopfront_core.domain.ordering import SortKey
    from shopfront_core.domain.specification import ISpecification

    from .specifications.strategy import SQLAlchemyOperatorRegistry

T = TypeVar("T")


class SQLAlchemyQueryable(Generic[T]):
    """
    Deferred ``SELECT`` over one mapped model.

    Composition only rewrites the wrapped statement; the session is touched
    by the terminals, each of which issues one ``execute``.  Included
    relations are loaded with ``selectinload`` so they never multiply rows
    and therefore never disturb ``LIMIT``/``OFFSET``.
    """

    def __init__(
        self,
        session: AsyncSession,
        model: type[T],
        *,
        registry: SQLAlchemyOperatorRegistry | None = None,
        stmt: Select[Any] | None = None,
    ) -> None:
        self._session = session
        self._model = model
        self._registry = registry
        self._stmt: Select[Any] = stmt if stmt is not None else select(model)

    @property
    def statement(self) -> Select[Any]:
        return self._stmt

    # -- composition ---------------------------------------------------------

    def where(self, specification: ISpecification[Any]) -> SQLAlchemyQueryable[T]:
        data = specification.to_dict()
        if not data:
            return self
        clause = build_sqla_filter(self._model, data, registry=self._registry)
        return self._with(self._stmt.where(clause))

    def include(self, relation: str) -> SQLAlchemyQueryable[T]:
        return self._with(self._stmt.options(self._loader(relation)))

    def order_by(self, *keys: SortKey) -> SQLAlchemyQueryable[T]:
        clauses = build_order_by(self._model, keys)
        return self._with(self._stmt.order_by(None).order_by(*clauses))

    def skip(self, count: int) -> SQLAlchemyQueryable[T]:
        return self._with(self._stmt.offset(max(0, count)))

    def take(self, count: int) -> SQLAlchemyQueryable[T]:
        return self._with(self._stmt.limit(max(0, count)))

    # -- terminals -----------------------------------------------------------

    async def to_list(self) -> list[T]:
        result = await self._session.execute(self._stmt)
        return list(result.scalars().all())

    async def first(self) -> T | None:
        result = await self._session.execute(self._stmt.limit(1))
        return result.scalars().first()

    async def count(self) -> int:
        subquery = self._stmt.order_by(None).subquery()
        stmt = select(func.count()).select_from(subquery)
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    # -- internals -----------------------------------------------------------

    def _with(self, stmt: Select[Any]) -> SQLAlchemyQueryable[T]:
        return SQLAlchemyQueryable(
            self._session, self._model, registry=self._registry, stmt=stmt
        )

    def _loader(self, relation: str) -> Any:
        """Build a ``selectinload`` chain for a (possibly dotted) relation path."""
        model: type[Any] = self._model
        loader: Any = None
        for part in relation.split("."):
            names = relationship_names(model)
            if part not in names:
                raise UnknownFieldError(part, model.__name__, sorted(names))
            attr = getattr(model, part)
            loader = selectinload(attr) if loader is None else loader.selectinload(attr)
            model = attr.property.mapper.class_
        return loader
