"""Ports and primitives shared by every shopfront package."""

from __future__ import annotations

from .adapters.memory import InMemoryQueryable
from .domain import ISpecification, SortDirection, SortKey
from .ports import IQueryable, IReadRepository
from .primitives import ShopfrontError, UnknownFieldError

__all__ = [
    "IQueryable",
    "IReadRepository",
    "ISpecification",
    "InMemoryQueryable",
    "ShopfrontError",
    "SortDirection",
    "SortKey",
    "UnknownFieldError",
]
