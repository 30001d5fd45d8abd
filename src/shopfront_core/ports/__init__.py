from .queryable import IQueryable
from .repository import IReadRepository

__all__ = [
    "IQueryable",
    "IReadRepository",
]
