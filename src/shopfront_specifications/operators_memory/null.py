"""Null checks: is_null, is_not_null."""

from __future__ import annotations

from typing import Any

from ..operators import SpecificationOperator
from ..strategy import MemoryOperator


class NullCheckOperator(MemoryOperator):
    """The condition value is ignored."""

    def __init__(self, *, is_null: bool) -> None:
        self._is_null = is_null

    @property
    def name(self) -> SpecificationOperator:
        if self._is_null:
            return SpecificationOperator.IS_NULL
        return SpecificationOperator.IS_NOT_NULL

    def evaluate(self, field_value: Any, _condition_value: Any) -> bool:
        return (field_value is None) is self._is_null
