"""
Operator strategies.

Each :class:`SpecificationOperator` is implemented by one small strategy
object per backend.  :class:`OperatorRegistry` is the lookup both
backends share; :class:`MemoryOperatorRegistry` adds in-memory
evaluation on top, the SQLAlchemy adapter adds clause compilation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar

from .exceptions import OperatorNotFoundError

if TYPE_CHECKING:
    from .operators import SpecificationOperator


class OperatorStrategy(Protocol):
    @property
    def name(self) -> SpecificationOperator: ...


S = TypeVar("S", bound=OperatorStrategy)


class OperatorRegistry(Generic[S]):
    """
    Strategies keyed by the operator they handle.

    Registering a second strategy for the same operator replaces the first.
    """

    def __init__(self, *strategies: S) -> None:
        self._operators: dict[SpecificationOperator, S] = {}
        self.register_all(*strategies)

    def register(self, strategy: S) -> None:
        self._operators[strategy.name] = strategy

    def register_all(self, *strategies: S) -> None:
        for strategy in strategies:
            self.register(strategy)

    def get(self, name: SpecificationOperator) -> S | None:
        return self._operators.get(name)

    def has(self, name: SpecificationOperator) -> bool:
        return name in self._operators

    @property
    def supported_operators(self) -> set[SpecificationOperator]:
        return set(self._operators)

    def require(self, name: SpecificationOperator) -> S:
        """
        Return the strategy for *name*.

        Raises:
            OperatorNotFoundError: If nothing is registered for *name*.
        """
        strategy = self._operators.get(name)
        if strategy is None:
            raise OperatorNotFoundError(
                str(name.value), [op.value for op in self._operators]
            )
        return strategy


class MemoryOperator(ABC):
    """Evaluates one operator against plain Python values."""

    @property
    @abstractmethod
    def name(self) -> SpecificationOperator: ...

    @abstractmethod
    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        """
        Args:
            field_value: The value resolved from the candidate object.
            condition_value: The value carried by the specification.
        """
        ...


class MemoryOperatorRegistry(OperatorRegistry[MemoryOperator]):
    """
    Registry used by :class:`AttributeSpecification` for in-memory checks::

        registry = build_default_registry()
        registry.evaluate(SpecificationOperator.EQ, actual, expected)
    """

    def evaluate(
        self,
        name: SpecificationOperator,
        field_value: Any,
        condition_value: Any,
    ) -> bool:
        return self.require(name).evaluate(field_value, condition_value)
