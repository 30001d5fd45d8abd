"""Domain primitives: specification protocol and sort keys."""

from __future__ import annotations

from .ordering import SortDirection, SortKey
from .specification import ISpecification

__all__: list[str] = [
    "ISpecification",
    "SortDirection",
    "SortKey",
]
