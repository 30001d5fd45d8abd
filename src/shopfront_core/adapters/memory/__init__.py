from .queryable import InMemoryQueryable

__all__ = [
    "InMemoryQueryable",
]
