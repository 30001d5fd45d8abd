"""Sort keys used by criteria and queryable sources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortKey:
    """
    A single ``(field, direction)`` ordering instruction.

    ``SortKey.parse("-price")`` follows the usual ``-`` prefix convention
    for descending order.
    """

    field: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def ascending(cls, field: str) -> SortKey:
        return cls(field, SortDirection.ASC)

    @classmethod
    def descending(cls, field: str) -> SortKey:
        return cls(field, SortDirection.DESC)

    @classmethod
    def parse(cls, expr: str) -> SortKey:
        expr = expr.strip()
        if expr.startswith("-"):
            return cls.descending(expr[1:])
        return cls.ascending(expr)

    @property
    def is_descending(self) -> bool:
        return self.direction is SortDirection.DESC

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "dir": self.direction.value}

    def __str__(self) -> str:
        return f"-{self.field}" if self.is_descending else self.field
