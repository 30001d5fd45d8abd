"""
Translate serialised specifications and sort keys into SQLAlchemy clauses.

``build_sqla_filter`` consumes the dictionary form of a specification
(``spec.to_dict()``): ``{"op": "and", "conditions": [...]}`` for AND
nodes and ``{"op", "attr", "val"}`` for leaves.  A dotted ``attr`` such as
``product_brand.name`` is compiled on the related model and wrapped in
``has()`` (scalar relation) or ``any()`` (collection).

``build_order_by`` maps ``SortKey`` values onto ``asc``/``desc`` clauses.

Names are checked against the mapper, so an unknown column or relation
raises ``UnknownFieldError`` before any SQL is emitted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import ColumnElement, and_, asc, desc, true
from sqlalchemy import inspect as sa_inspect

from shopfront_core.primitives.exceptions import UnknownFieldError
from shopfront_specifications.exceptions import (
    OperatorNotFoundError,
    ValidationError,
)
from shopfront_specifications.operators import SpecificationOperator

from .operators import DEFAULT_SQLA_REGISTRY

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from shopfront_core.domain.ordering import SortKey

    from .strategy import SQLAlchemyOperatorRegistry


def build_sqla_filter(
    model: type[Any],
    data: Mapping[str, Any],
    *,
    registry: SQLAlchemyOperatorRegistry | None = None,
) -> ColumnElement[bool]:
    """
    Compile *data* into a boolean expression over *model*.

    An AND node without conditions compiles to ``true()``.

    Raises:
        UnknownFieldError: ``attr`` names no mapped column or relation.
        OperatorNotFoundError: ``op`` is not a known operator.
        ValidationError: A leaf has no ``attr``.
    """
    return _Compiler(registry or DEFAULT_SQLA_REGISTRY).compile(model, data)


def build_order_by(model: type[Any], keys: Iterable[SortKey]) -> list[Any]:
    """
    Translate sort keys into ``ORDER BY`` clauses.

    Raises:
        UnknownFieldError: If a key names no mapped column of *model*.
    """
    return [
        desc(column) if key.is_descending else asc(column)
        for key, column in ((k, _mapped_column(model, k.field)) for k in keys)
    ]


def column_names(model: type[Any]) -> set[str]:
    return {attr.key for attr in sa_inspect(model).column_attrs}


def relationship_names(model: type[Any]) -> set[str]:
    return set(sa_inspect(model).relationships.keys())


def _mapped_column(model: type[Any], name: str) -> Any:
    columns = column_names(model)
    if name not in columns:
        raise UnknownFieldError(name, model.__name__, sorted(columns))
    return getattr(model, name)


def _relation(model: type[Any], name: str) -> Any:
    relations = relationship_names(model)
    if name not in relations:
        raise UnknownFieldError(name, model.__name__, sorted(relations))
    return getattr(model, name)


class _Compiler:
    def __init__(self, registry: SQLAlchemyOperatorRegistry) -> None:
        self.registry = registry

    def compile(
        self, model: type[Any], node: Mapping[str, Any]
    ) -> ColumnElement[bool]:
        op = str(node.get("op", "")).lower()
        if op == SpecificationOperator.AND:
            parts = [self.compile(model, child) for child in node.get("conditions", [])]
            return and_(*parts) if parts else true()
        return self._leaf(model, op, node.get("attr"), node.get("val"))

    def _leaf(
        self, model: type[Any], op: str, attr: str | None, value: Any
    ) -> ColumnElement[bool]:
        if not attr:
            raise ValidationError(
                f"Leaf condition '{op}' has no 'attr'", path="attr"
            )

        head, dot, rest = attr.partition(".")
        if dot:
            relation = _relation(model, head)
            prop = relation.property
            inner = self._leaf(prop.mapper.class_, op, rest, value)
            wrapped = relation.any(inner) if prop.uselist else relation.has(inner)
            return cast("ColumnElement[bool]", wrapped)

        column = _mapped_column(model, attr)
        return self.registry.apply(self._operator(op), column, value)

    def _operator(self, op: str) -> SpecificationOperator:
        try:
            return SpecificationOperator(op)
        except ValueError:
            supported = [o.value for o in self.registry.supported_operators]
            raise OperatorNotFoundError(op, supported) from None
