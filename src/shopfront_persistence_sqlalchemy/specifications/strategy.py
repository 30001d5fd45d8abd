"""SQLAlchemy operator strategies: specification operator -> SQL clause."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from shopfront_specifications.strategy import OperatorRegistry

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

    from shopfront_specifications.operators import SpecificationOperator


class SQLAlchemyOperator(ABC):
    """Compiles one operator into a SQLAlchemy boolean expression."""

    @property
    @abstractmethod
    def name(self) -> SpecificationOperator: ...

    @abstractmethod
    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        """
        Args:
            column: A mapped column or instrumented attribute.
            value: The value carried by the specification.
        """
        ...


class SQLAlchemyOperatorRegistry(OperatorRegistry[SQLAlchemyOperator]):
    """Registry consulted by :func:`build_sqla_filter` for leaf nodes."""

    def apply(
        self,
        name: SpecificationOperator,
        column: Any,
        value: Any,
    ) -> ColumnElement[bool]:
        return self.require(name).apply(column, value)
