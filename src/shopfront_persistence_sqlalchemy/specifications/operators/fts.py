"""Full-text search for SQLAlchemy.

Compiles to PostgreSQL ``to_tsvector(column) @@ plainto_tsquery(value)``;
other dialects have no equivalent and fail when the query runs.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, func

from shopfront_specifications.operators import SpecificationOperator

from ..strategy import SQLAlchemyOperator


class FtsOperator(SQLAlchemyOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.FTS

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        query = func.plainto_tsquery(str(value))
        return func.to_tsvector(column).bool_op("@@")(query)
