"""Null checks for SQLAlchemy: ``IS NULL`` / ``IS NOT NULL``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from shopfront_specifications.operators import SpecificationOperator

from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement


class NullCheckOperator(SQLAlchemyOperator):
    def __init__(self, *, is_null: bool) -> None:
        self._is_null = is_null

    @property
    def name(self) -> SpecificationOperator:
        if self._is_null:
            return SpecificationOperator.IS_NULL
        return SpecificationOperator.IS_NOT_NULL

    def apply(self, column: Any, _value: Any) -> ColumnElement[bool]:
        clause = column.is_(None) if self._is_null else column.is_not(None)
        return cast("ColumnElement[bool]", clause)
