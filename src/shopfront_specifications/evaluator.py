"""
Specification evaluator: apply a :class:`Criteria` to an ``IQueryable``.

The application order is fixed because the steps interact:

1. filters (AND), plus the single-entity filter in single mode
2. includes (never change cardinality or order)
3. ordering: the active sort key followed by the criteria's tie-breaker,
   or the tie-breaker alone
4. paging (skip, then take) when enabled

Paging therefore always runs after filtering and sorting, and every page
is reproducible because the ordering is total.

The functions here are pure query composition; nothing touches the store
until a terminal (``to_list`` / ``first`` / ``count``) is awaited.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from shopfront_core.domain.ordering import SortKey

if TYPE_CHECKING:
    from shopfront_core.ports.queryable import IQueryable

    from .criteria import Criteria

logger = logging.getLogger("shopfront.specifications")

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Query composition
# ---------------------------------------------------------------------------


def apply_filters(
    source: IQueryable[T],
    criteria: Criteria[Any],
    *,
    single: bool = False,
) -> IQueryable[T]:
    """Apply the criteria's filters (and, in single mode, its single filter)."""
    query = source
    for spec in criteria.filters:
        query = query.where(spec)
    if single and criteria.single is not None:
        query = query.where(criteria.single)
    return query


def apply_includes(source: IQueryable[T], criteria: Criteria[Any]) -> IQueryable[T]:
    query = source
    for relation in criteria.includes:
        query = query.include(relation)
    return query


def ordering(criteria: Criteria[Any]) -> tuple[SortKey, ...]:
    """Return the total ordering used for *criteria*."""
    tie = SortKey.ascending(criteria.tie_breaker)
    if criteria.order is None:
        return (tie,)
    if criteria.order.field == criteria.tie_breaker:
        return (criteria.order,)
    return (criteria.order, tie)


def get_query(source: IQueryable[T], criteria: Criteria[Any]) -> IQueryable[T]:
    """Compose the multi-entity query for *criteria*."""
    query = apply_filters(source, criteria)
    query = apply_includes(query, criteria)
    query = query.order_by(*ordering(criteria))
    if criteria.is_paging_enabled:
        query = query.skip(criteria.skip).take(criteria.take or 0)
    return query


def get_single_query(source: IQueryable[T], criteria: Criteria[Any]) -> IQueryable[T]:
    """
    Compose the single-entity query for *criteria*.

    The criteria's sort key and paging window are ignored; only the
    tie-breaker orders candidates so "the first match" is well defined.
    """
    query = apply_filters(source, criteria, single=True)
    query = apply_includes(query, criteria)
    return query.order_by(SortKey.ascending(criteria.tie_breaker))


def get_count_query(source: IQueryable[T], criteria: Criteria[Any]) -> IQueryable[T]:
    """Compose the count query: filters only, no includes, sorting or paging."""
    return apply_filters(source, criteria)


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------


async def evaluate(source: IQueryable[T], criteria: Criteria[Any]) -> list[T]:
    """Run the multi-entity query and return the matching entities."""
    logger.debug("Evaluating criteria %s", criteria.to_dict())
    return await get_query(source, criteria).to_list()


async def evaluate_single(source: IQueryable[T], criteria: Criteria[Any]) -> T | None:
    """Run the single-entity query; ``None`` when nothing matches."""
    logger.debug("Evaluating single-entity criteria %s", criteria.to_dict())
    return await get_single_query(source, criteria).first()


async def evaluate_count(source: IQueryable[T], criteria: Criteria[Any]) -> int:
    """Count entities matching the criteria's filters, ignoring paging."""
    return await get_count_query(source, criteria).count()
