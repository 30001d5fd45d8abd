"""Root exceptions for the shopfront packages."""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class ShopfrontError(Exception):
    """Root exception for every shopfront package."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class UnknownFieldError(ShopfrontError):
    """
    A queryable source was asked to sort by, or include, a name the
    entity does not expose.

    Uses fuzzy matching to suggest similar valid names::

        Unknown field 'prise' on 'Product'. Did you mean: price?
    """

    def __init__(
        self,
        field: str,
        entity_name: str,
        available_fields: list[str],
        cutoff: float = 0.6,
    ) -> None:
        self.field = field
        self.entity_name = entity_name
        self.available_fields = available_fields
        self.suggestions = get_close_matches(
            field, available_fields, n=3, cutoff=cutoff
        )

        message = f"Unknown field '{field}' on '{entity_name}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNKNOWN_FIELD",
            "field": self.field,
            "entity": self.entity_name,
            "suggestions": self.suggestions,
            "available_fields": sorted(self.available_fields),
        }
