"""SQLAlchemy 2.x async adapter for shopfront criteria."""

from .queryable import SQLAlchemyQueryable
from .repository import SQLAlchemyRepository
from .specifications import (
    DEFAULT_SQLA_REGISTRY,
    SQLAlchemyOperator,
    SQLAlchemyOperatorRegistry,
    build_default_sqla_registry,
    build_order_by,
    build_sqla_filter,
)

__all__ = [
    "DEFAULT_SQLA_REGISTRY",
    "SQLAlchemyOperator",
    "SQLAlchemyOperatorRegistry",
    "SQLAlchemyQueryable",
    "SQLAlchemyRepository",
    "build_default_sqla_registry",
    "build_order_by",
    "build_sqla_filter",
]
