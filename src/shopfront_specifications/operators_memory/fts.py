"""Full-text search for in-memory sources.

Approximates store-side full-text search: every whitespace-separated
query token must occur in the text, case-insensitively.  No stemming.
"""

from __future__ import annotations

from typing import Any

from ..operators import SpecificationOperator
from ..strategy import MemoryOperator


class FtsOperator(MemoryOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.FTS

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        text = str(field_value).lower()
        return all(token in text for token in str(condition_value).lower().split())
