from __future__ import annotations

import pytest

from shopfront_specifications import (
    MemoryOperator,
    MemoryOperatorRegistry,
    OperatorNotFoundError,
    SpecificationOperator,
)
from shopfront_specifications.operators_memory import ComparisonOperator


class AlwaysTrue(MemoryOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.EQ

    def evaluate(self, field_value, condition_value) -> bool:
        return True


def test_register_replaces_existing_strategy(registry) -> None:
    assert not registry.evaluate(SpecificationOperator.EQ, 1, 2)
    registry.register(AlwaysTrue())
    assert registry.evaluate(SpecificationOperator.EQ, 1, 2)


def test_require_unknown_operator() -> None:
    registry = MemoryOperatorRegistry(AlwaysTrue())
    assert registry.has(SpecificationOperator.EQ)
    assert registry.get(SpecificationOperator.IN) is None
    with pytest.raises(OperatorNotFoundError) as exc_info:
        registry.require(SpecificationOperator.IN)
    assert exc_info.value.valid_operators == ["="]


@pytest.mark.parametrize(
    ("op", "field_value", "condition_value", "expected"),
    [
        (SpecificationOperator.GT, None, 1, False),
        (SpecificationOperator.LE, 1, None, False),
        (SpecificationOperator.EQ, None, None, True),
        (SpecificationOperator.NE, None, 1, True),
        (SpecificationOperator.GE, 2, 2, True),
    ],
)
def test_comparisons_and_none(
    registry, op, field_value, condition_value, expected
) -> None:
    assert registry.evaluate(op, field_value, condition_value) is expected


def test_comparison_operator_name() -> None:
    assert ComparisonOperator(SpecificationOperator.LT, min).name is (
        SpecificationOperator.LT
    )
