from __future__ import annotations

from dataclasses import dataclass

import pytest

from shopfront_core.adapters.memory import InMemoryQueryable
from shopfront_core.domain.ordering import SortKey
from shopfront_specifications import (
    AttributeSpecification,
    Criteria,
    evaluate,
    evaluate_count,
    evaluate_single,
)
from shopfront_specifications.evaluator import ordering


@dataclass
class Row:
    id: int
    name: str
    price: int


@pytest.fixture
def rows() -> list[Row]:
    # prices repeat so ordering by price alone is ambiguous
    return [
        Row(5, "e", 10),
        Row(2, "b", 20),
        Row(4, "d", 10),
        Row(1, "a", 30),
        Row(3, "c", 20),
    ]


@pytest.fixture
def source(rows: list[Row]) -> InMemoryQueryable[Row]:
    return InMemoryQueryable(rows)


class TestOrdering:
    def test_tie_breaker_alone(self) -> None:
        assert ordering(Criteria()) == (SortKey.ascending("id"),)

    def test_active_key_then_tie_breaker(self) -> None:
        criteria: Criteria[Row] = Criteria().order_by_descending("price")
        assert ordering(criteria) == (
            SortKey.descending("price"),
            SortKey.ascending("id"),
        )

    def test_sort_on_tie_breaker_field_is_not_repeated(self) -> None:
        criteria: Criteria[Row] = Criteria().order_by_descending("id")
        assert ordering(criteria) == (SortKey.descending("id"),)


@pytest.mark.asyncio
async def test_evaluate_sorts_with_tie_breaker(source) -> None:
    result = await evaluate(source, Criteria().order_by("price"))
    assert [r.id for r in result] == [4, 5, 2, 3, 1]


@pytest.mark.asyncio
async def test_paging_applies_after_filter_and_sort(source, registry) -> None:
    criteria: Criteria[Row] = (
        Criteria()
        .where(AttributeSpecification("price", "<", 30, registry=registry))
        .order_by_descending("price")
        .paginate(skip=1, take=2)
    )
    result = await evaluate(source, criteria)
    # filtered + sorted: 2, 3, 4, 5
    assert [r.id for r in result] == [3, 4]


@pytest.mark.asyncio
async def test_pages_partition_the_result(source) -> None:
    seen: list[int] = []
    for skip in range(0, 6, 2):
        page = await evaluate(source, Criteria().order_by("price").paginate(skip, 2))
        assert len(page) <= 2
        seen.extend(r.id for r in page)
    assert seen == [4, 5, 2, 3, 1]


@pytest.mark.asyncio
async def test_evaluate_is_deterministic(source) -> None:
    criteria: Criteria[Row] = Criteria().order_by("price").paginate(0, 3)
    first = [r.id for r in await evaluate(source, criteria)]
    second = [r.id for r in await evaluate(source, criteria)]
    assert first == second


@pytest.mark.asyncio
async def test_count_ignores_paging_and_sort(source, registry) -> None:
    spec = AttributeSpecification("price", "<=", 20, registry=registry)
    paged: Criteria[Row] = (
        Criteria().where(spec).order_by_descending("name").paginate(skip=2, take=1)
    )
    assert await evaluate_count(source, paged) == 4
    assert await evaluate_count(source, paged.without_paging()) == 4


@pytest.mark.asyncio
async def test_evaluate_single(source, registry) -> None:
    criteria: Criteria[Row] = Criteria().for_single(
        AttributeSpecification("id", "=", 3, registry=registry)
    )
    found = await evaluate_single(source, criteria)
    assert found is not None and found.name == "c"


@pytest.mark.asyncio
async def test_evaluate_single_ignores_sort_and_paging(source, registry) -> None:
    criteria: Criteria[Row] = (
        Criteria()
        .order_by_descending("price")
        .paginate(skip=4, take=1)
        .for_single(AttributeSpecification("price", "=", 20, registry=registry))
    )
    found = await evaluate_single(source, criteria)
    # lowest id among the matches
    assert found is not None and found.id == 2


@pytest.mark.asyncio
async def test_evaluate_single_missing_returns_none(source, registry) -> None:
    criteria: Criteria[Row] = Criteria().for_single(
        AttributeSpecification("id", "=", 99, registry=registry)
    )
    assert await evaluate_single(source, criteria) is None


@pytest.mark.asyncio
async def test_adding_filters_never_grows_result(source, registry) -> None:
    loose: Criteria[Row] = Criteria().where(
        AttributeSpecification("price", "<=", 20, registry=registry)
    )
    strict = loose.where(
        AttributeSpecification("name", "in", ["b", "e"], registry=registry)
    )
    loose_ids = {r.id for r in await evaluate(source, loose)}
    strict_ids = {r.id for r in await evaluate(source, strict)}
    assert strict_ids <= loose_ids
    assert strict_ids == {2, 5}
