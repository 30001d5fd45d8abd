"""Membership and range operators: in, not_in, between."""

from __future__ import annotations

from typing import Any

from ..operators import SpecificationOperator
from ..strategy import MemoryOperator


class MembershipOperator(MemoryOperator):
    """``field in values`` (or its negation for ``not_in``)."""

    def __init__(self, *, negate: bool = False) -> None:
        self._negate = negate

    @property
    def name(self) -> SpecificationOperator:
        if self._negate:
            return SpecificationOperator.NOT_IN
        return SpecificationOperator.IN

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return (field_value in condition_value) is not self._negate


class BetweenOperator(MemoryOperator):
    """Inclusive ``(low, high)`` range; ``None`` is never in range."""

    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.BETWEEN

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        low, high = condition_value
        return field_value is not None and bool(low <= field_value <= high)


def set_operators() -> tuple[MemoryOperator, ...]:
    return (
        MembershipOperator(),
        MembershipOperator(negate=True),
        BetweenOperator(),
    )
