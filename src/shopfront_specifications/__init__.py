from .ast import AttributeSpecification
from .base import AndSpecification, BaseSpecification
from .criteria import Criteria
from .evaluator import (
    evaluate,
    evaluate_count,
    evaluate_single,
    get_count_query,
    get_query,
    get_single_query,
)
from .exceptions import (
    OperatorNotFoundError,
    SpecificationError,
    ValidationError,
)
from .operators import SpecificationOperator
from .operators_memory import build_default_registry
from .repository import SpecificationRepository
from .strategy import MemoryOperator, MemoryOperatorRegistry, OperatorRegistry

__all__ = [
    # Core types
    "SpecificationOperator",
    "AttributeSpecification",
    "BaseSpecification",
    "AndSpecification",
    # Criteria
    "Criteria",
    # Evaluator
    "evaluate",
    "evaluate_count",
    "evaluate_single",
    "get_count_query",
    "get_query",
    "get_single_query",
    # Repository
    "SpecificationRepository",
    # Operator strategy
    "MemoryOperator",
    "MemoryOperatorRegistry",
    "OperatorRegistry",
    "build_default_registry",
    # Exceptions
    "SpecificationError",
    "ValidationError",
    "OperatorNotFoundError",
]
