"""Comparison operators for SQLAlchemy: =, !=, >, <, >=, <=."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, cast

from shopfront_specifications.operators import SpecificationOperator

from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement


class ComparisonOperator(SQLAlchemyOperator):
    """Binary comparison using the column's overloaded Python operator."""

    def __init__(
        self, name: SpecificationOperator, compare: Callable[[Any, Any], Any]
    ) -> None:
        self._name = name
        self._compare = compare

    @property
    def name(self) -> SpecificationOperator:
        return self._name

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", self._compare(column, value))


def comparison_operators() -> tuple[ComparisonOperator, ...]:
    return (
        ComparisonOperator(SpecificationOperator.EQ, operator.eq),
        ComparisonOperator(SpecificationOperator.NE, operator.ne),
        ComparisonOperator(SpecificationOperator.GT, operator.gt),
        ComparisonOperator(SpecificationOperator.LT, operator.lt),
        ComparisonOperator(SpecificationOperator.GE, operator.ge),
        ComparisonOperator(SpecificationOperator.LE, operator.le),
    )
