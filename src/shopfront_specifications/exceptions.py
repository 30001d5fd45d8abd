"""
Errors raised while building or evaluating specifications.

They signal programming mistakes (a misspelt operator, a malformed
specification dictionary), never bad user input; each carries a
``to_dict()`` body.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any

from shopfront_core.primitives.exceptions import ShopfrontError


class SpecificationError(ShopfrontError):
    """Root of the specification errors."""


class ValidationError(SpecificationError):
    """A specification dictionary is structurally invalid."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def to_dict(self) -> dict[str, Any]:
        return {"error": "VALIDATION_ERROR", "message": self.message, "path": self.path}


class OperatorNotFoundError(SpecificationError):
    """
    No strategy is registered for an operator.

    Close spellings among the registered operators are offered::

        Unknown operator 'icontain'. Did you mean: icontains, contains?
    """

    def __init__(self, operator: str, valid_operators: list[str]) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(operator, valid_operators, n=3)

        parts = [f"Unknown operator '{operator}'."]
        if self.suggestions:
            parts.append(f"Did you mean: {', '.join(self.suggestions)}?")
        super().__init__(" ".join(parts))

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_NOT_FOUND",
            "operator": self.operator,
            "suggestions": self.suggestions,
            "valid_operators": sorted(self.valid_operators),
        }
