"""
SQLAlchemy operator strategies and the default registry.

Usage::

    from shopfront_persistence_sqlalchemy.specifications.operators import (
        DEFAULT_SQLA_REGISTRY,
    )

    clause = DEFAULT_SQLA_REGISTRY.apply(SpecificationOperator.EQ, Product.id, 7)
"""

from __future__ import annotations

from ..strategy import SQLAlchemyOperatorRegistry
from .fts import FtsOperator
from .null import NullCheckOperator
from .set import BetweenOperator, MembershipOperator, set_operators
from .standard import ComparisonOperator, comparison_operators
from .string import TextMatchOperator, text_operators


def build_default_sqla_registry() -> SQLAlchemyOperatorRegistry:
    """Create a registry with every built-in leaf operator."""
    return SQLAlchemyOperatorRegistry(
        *comparison_operators(),
        *set_operators(),
        *text_operators(),
        NullCheckOperator(is_null=True),
        NullCheckOperator(is_null=False),
        FtsOperator(),
    )


DEFAULT_SQLA_REGISTRY: SQLAlchemyOperatorRegistry = build_default_sqla_registry()

__all__ = [
    "BetweenOperator",
    "ComparisonOperator",
    "DEFAULT_SQLA_REGISTRY",
    "FtsOperator",
    "MembershipOperator",
    "NullCheckOperator",
    "SQLAlchemyOperatorRegistry",
    "TextMatchOperator",
    "build_default_sqla_registry",
]
