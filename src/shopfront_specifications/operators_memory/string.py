"""Text matching operators: contains, icontains, startswith, istartswith."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from ..operators import SpecificationOperator
from ..strategy import MemoryOperator


class TextMatchOperator(MemoryOperator):
    """
    Matches the string form of the field against the condition value.

    With ``fold_case`` both sides are lower-cased first, the same folding
    SQL ``lower(...) LIKE lower(...)`` applies.  ``None`` never matches.
    """

    def __init__(
        self,
        name: SpecificationOperator,
        match: Callable[[str, str], bool],
        *,
        fold_case: bool = False,
    ) -> None:
        self._name = name
        self._match = match
        self._fold_case = fold_case

    @property
    def name(self) -> SpecificationOperator:
        return self._name

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        text, needle = str(field_value), str(condition_value)
        if self._fold_case:
            text, needle = text.lower(), needle.lower()
        return self._match(text, needle)


def text_operators() -> tuple[TextMatchOperator, ...]:
    return (
        TextMatchOperator(SpecificationOperator.CONTAINS, operator.contains),
        TextMatchOperator(
            SpecificationOperator.ICONTAINS, operator.contains, fold_case=True
        ),
        TextMatchOperator(SpecificationOperator.STARTSWITH, str.startswith),
        TextMatchOperator(
            SpecificationOperator.ISTARTSWITH, str.startswith, fold_case=True
        ),
    )
