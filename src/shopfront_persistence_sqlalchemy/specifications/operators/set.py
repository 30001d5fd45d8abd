"""Membership and range operators for SQLAlchemy: in, not_in, between."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from shopfront_specifications.operators import SpecificationOperator

from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement


class MembershipOperator(SQLAlchemyOperator):
    def __init__(self, *, negate: bool = False) -> None:
        self._negate = negate

    @property
    def name(self) -> SpecificationOperator:
        if self._negate:
            return SpecificationOperator.NOT_IN
        return SpecificationOperator.IN

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        clause = column.not_in(value) if self._negate else column.in_(value)
        return cast("ColumnElement[bool]", clause)


class BetweenOperator(SQLAlchemyOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.BETWEEN

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        low, high = value
        return cast("ColumnElement[bool]", column.between(low, high))


def set_operators() -> tuple[SQLAlchemyOperator, ...]:
    return (
        MembershipOperator(),
        MembershipOperator(negate=True),
        BetweenOperator(),
    )
