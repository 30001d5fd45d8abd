"""Leaf specifications: one attribute, one operator, one value."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from .base import BaseSpecification
from .operators import SpecificationOperator

if TYPE_CHECKING:
    from .strategy import MemoryOperatorRegistry

T = TypeVar("T", contravariant=True)


class AttributeSpecification(BaseSpecification[T]):
    """
    ``<attr> <op> <val>`` on a candidate entity.

    *attr* may be a dotted path (``product_brand.name``).  In-memory
    checks go through the injected *registry*; store-backed sources read
    :meth:`to_dict` and compile it themselves, so the registry never
    reaches SQL::

        spec = AttributeSpecification("price", "<=", 20, registry=registry)
        spec.is_satisfied_by(product)
        spec.to_dict()  # {"op": "<=", "attr": "price", "val": 20}

    Raises:
        ValueError: If *op* is not a :class:`SpecificationOperator` value.
    """

    def __init__(
        self,
        attr: str,
        op: SpecificationOperator | str,
        val: Any,
        *,
        registry: MemoryOperatorRegistry,
    ) -> None:
        self.attr = attr
        self.op = SpecificationOperator(op)
        self.val = val
        self._registry = registry

    def is_satisfied_by(self, candidate: T) -> bool:
        value = resolve_path(candidate, self.attr)
        return self._registry.evaluate(self.op, value, self.val)

    def to_dict(self) -> dict[str, Any]:
        return {"op": self.op.value, "attr": self.attr, "val": self.val}

    def __repr__(self) -> str:
        return f"AttributeSpecification({self.attr!r} {self.op.value} {self.val!r})"


def resolve_path(obj: Any, path: str) -> Any:
    """
    Follow a dotted attribute path through objects and mappings.

    A missing link anywhere along the path yields ``None`` rather than
    raising, so ``is_null`` on ``product_brand.name`` holds for a product
    with no brand.
    """
    for part in path.split("."):
        if obj is None:
            return None
        obj = obj.get(part) if isinstance(obj, dict) else getattr(obj, part, None)
    return obj
