"""Comparison operators: =, !=, >, <, >=, <=."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from ..operators import SpecificationOperator
from ..strategy import MemoryOperator


class ComparisonOperator(MemoryOperator):
    """
    Binary comparison backed by a function from :mod:`operator`.

    Ordering comparisons (``>``, ``<``...) are ``False`` whenever either
    side is ``None``, mirroring SQL where ``NULL > x`` is never true.
    """

    def __init__(
        self,
        name: SpecificationOperator,
        compare: Callable[[Any, Any], Any],
        *,
        ordering: bool = True,
    ) -> None:
        self._name = name
        self._compare = compare
        self._ordering = ordering

    @property
    def name(self) -> SpecificationOperator:
        return self._name

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if self._ordering and (field_value is None or condition_value is None):
            return False
        return bool(self._compare(field_value, condition_value))


def comparison_operators() -> tuple[ComparisonOperator, ...]:
    return (
        ComparisonOperator(SpecificationOperator.EQ, operator.eq, ordering=False),
        ComparisonOperator(SpecificationOperator.NE, operator.ne, ordering=False),
        ComparisonOperator(SpecificationOperator.GT, operator.gt),
        ComparisonOperator(SpecificationOperator.LT, operator.lt),
        ComparisonOperator(SpecificationOperator.GE, operator.ge),
        ComparisonOperator(SpecificationOperator.LE, operator.le),
    )
