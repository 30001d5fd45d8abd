"""
In-memory operator strategies and the default registry.

Usage::

    from shopfront_specifications.operators_memory import build_default_registry

    registry = build_default_registry()
    registry.evaluate(SpecificationOperator.ICONTAINS, "Blue Hat", "hat")
"""

from __future__ import annotations

from ..strategy import MemoryOperatorRegistry
from .fts import FtsOperator
from .null import NullCheckOperator
from .set import BetweenOperator, MembershipOperator, set_operators
from .standard import ComparisonOperator, comparison_operators
from .string import TextMatchOperator, text_operators


def build_default_registry() -> MemoryOperatorRegistry:
    """
    Create a registry holding every built-in leaf operator.

    Returns a fresh instance on every call; inject it wherever
    specifications are built.  ``and`` is structural and has no strategy.
    """
    return MemoryOperatorRegistry(
        *comparison_operators(),
        *set_operators(),
        *text_operators(),
        NullCheckOperator(is_null=True),
        NullCheckOperator(is_null=False),
        FtsOperator(),
    )


__all__ = [
    "BetweenOperator",
    "ComparisonOperator",
    "FtsOperator",
    "MembershipOperator",
    "MemoryOperatorRegistry",
    "NullCheckOperator",
    "TextMatchOperator",
    "build_default_registry",
]
