"""IReadRepository: generic read-side repository protocol."""

from __future__ import annotations

import builtins
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class IReadRepository(Protocol[T]):
    """
    Generic read-only repository over one entity type.

    ``criteria`` is a ``Criteria[T]`` from ``shopfront_specifications``
    (typed as ``Any`` here so the core stays independent of it)::

        products = await repo.list(criteria)
        total = await repo.count(criteria)
        product = await repo.get(criteria.for_single(id_spec))

    Each call is one round trip to the store.  ``get`` returns ``None``
    when nothing matches; store failures propagate to the caller.
    """

    async def list_all(self) -> builtins.list[T]: ...

    async def list(self, criteria: Any) -> builtins.list[T]: ...

    async def get(self, criteria: Any) -> T | None: ...

    async def count(self, criteria: Any) -> int: ...
