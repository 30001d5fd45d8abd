from __future__ import annotations

import contextlib
import logging
from collections.abc import AsyncIterator

import pytest

from shopfront_core.ports.repository import IReadRepository
from shopfront_specifications import (
    AttributeSpecification,
    Criteria,
    SpecificationRepository,
)


@pytest.fixture
def repo(product_source) -> SpecificationRepository:
    return SpecificationRepository(product_source, name="ProductRepository")


def test_satisfies_read_repository_protocol(repo) -> None:
    assert isinstance(repo, IReadRepository)


@pytest.mark.asyncio
async def test_list_all_returns_everything_in_id_order(
    make_source, products
) -> None:
    repo: SpecificationRepository = SpecificationRepository(
        make_source(list(reversed(products)))
    )
    assert [p.id for p in await repo.list_all()] == list(range(1, 11))


@pytest.mark.asyncio
async def test_list_applies_criteria(repo, registry) -> None:
    criteria = (
        Criteria()
        .where(AttributeSpecification("product_type_id", "=", 2, registry=registry))
        .include("product_brand")
        .order_by_descending("price")
    )
    result = await repo.list(criteria)
    assert [p.id for p in result] == [9, 7, 8]
    assert [p.product_brand.name for p in result] == ["React", "NetCore", "React"]


@pytest.mark.asyncio
async def test_get_and_count(repo, registry) -> None:
    by_id = Criteria().for_single(
        AttributeSpecification("id", "=", 4, registry=registry)
    )
    product = await repo.get(by_id)
    assert product is not None and product.name == "Net Core Super Board"

    missing = Criteria().for_single(
        AttributeSpecification("id", "=", 404, registry=registry)
    )
    assert await repo.get(missing) is None
    assert await repo.count(Criteria().paginate(skip=6, take=6)) == 10


@pytest.mark.asyncio
async def test_each_call_opens_a_fresh_source(make_source) -> None:
    opened: list[int] = []
    inner = make_source([1, 2, 3])

    @contextlib.asynccontextmanager
    async def counting_source() -> AsyncIterator:
        opened.append(1)
        async with inner() as source:
            yield source

    repo: SpecificationRepository[int] = SpecificationRepository(counting_source)
    await repo.count(Criteria())
    await repo.count(Criteria())
    assert len(opened) == 2


@pytest.mark.asyncio
async def test_store_errors_propagate_and_are_logged(caplog) -> None:
    class StoreUnavailable(RuntimeError):
        pass

    @contextlib.asynccontextmanager
    async def broken_source() -> AsyncIterator:
        raise StoreUnavailable("connection refused")
        yield  # pragma: no cover

    repo: SpecificationRepository[object] = SpecificationRepository(
        broken_source, name="BrokenRepository"
    )
    with caplog.at_level(logging.ERROR, logger="shopfront.repository"):
        with pytest.raises(StoreUnavailable):
            await repo.count(Criteria())

    assert "BrokenRepository.count failed" in caplog.text
