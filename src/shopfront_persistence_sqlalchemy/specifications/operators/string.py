"""Text matching operators for SQLAlchemy.

``%`` and ``_`` in the value are escaped, so searching for ``50%`` matches
that literal text instead of acting as a wildcard.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from shopfront_specifications.operators import SpecificationOperator

from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement


class TextMatchOperator(SQLAlchemyOperator):
    """Delegates to a ``LIKE``-based column method such as ``icontains``."""

    def __init__(self, name: SpecificationOperator, method: str) -> None:
        self._name = name
        self._method = method

    @property
    def name(self) -> SpecificationOperator:
        return self._name

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        match = getattr(column, self._method)
        return cast("ColumnElement[bool]", match(str(value), autoescape=True))


def text_operators() -> tuple[TextMatchOperator, ...]:
    return (
        TextMatchOperator(SpecificationOperator.CONTAINS, "contains"),
        TextMatchOperator(SpecificationOperator.ICONTAINS, "icontains"),
        TextMatchOperator(SpecificationOperator.STARTSWITH, "startswith"),
        TextMatchOperator(SpecificationOperator.ISTARTSWITH, "istartswith"),
    )
