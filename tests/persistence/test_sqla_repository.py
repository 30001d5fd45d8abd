from __future__ import annotations

import logging

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from shopfront_catalog.models import Product, ProductBrand
from shopfront_persistence_sqlalchemy import SQLAlchemyRepository
from shopfront_specifications import AttributeSpecification, Criteria


@pytest.fixture
def repo(session_factory) -> SQLAlchemyRepository[Product]:
    return SQLAlchemyRepository(Product, session_factory)


@pytest.mark.asyncio
async def test_list_all(session_factory) -> None:
    brands = await SQLAlchemyRepository(ProductBrand, session_factory).list_all()
    assert [(b.id, b.name) for b in brands] == [
        (1, "Angular"),
        (2, "NetCore"),
        (3, "React"),
    ]


@pytest.mark.asyncio
async def test_list_returns_detached_entities_with_includes(repo, registry) -> None:
    criteria = (
        Criteria()
        .where(AttributeSpecification("product_brand_id", "=", 3, registry=registry))
        .include("product_brand", "product_type")
        .order_by("name")
    )
    result = await repo.list(criteria)
    # session is closed here; included relations are still readable
    assert [(p.name, p.product_type.name) for p in result] == [
        ("Green React Woolen Hat", "Hats"),
        ("Purple React Woolen Hat", "Hats"),
        ("React Board Super Whizzy Fast", "Boards"),
    ]
    assert {p.product_brand.name for p in result} == {"React"}


@pytest.mark.asyncio
async def test_get(repo, registry) -> None:
    criteria = Criteria().include("product_brand").for_single(
        AttributeSpecification("id", "=", 7, registry=registry)
    )
    product = await repo.get(criteria)
    assert product is not None
    assert (product.name, product.product_brand.name) == ("Core Blue Hat", "NetCore")


@pytest.mark.asyncio
async def test_get_missing_returns_none(repo, registry) -> None:
    criteria = Criteria().for_single(
        AttributeSpecification("id", "=", 1234, registry=registry)
    )
    assert await repo.get(criteria) is None


@pytest.mark.asyncio
async def test_count_ignores_paging(repo, registry) -> None:
    criteria = (
        Criteria()
        .where(AttributeSpecification("price", ">=", 150, registry=registry))
        .order_by_descending("price")
        .paginate(skip=3, take=1)
    )
    assert await repo.count(criteria) == 5
    assert len(await repo.list(criteria)) == 1


@pytest.mark.asyncio
async def test_store_errors_propagate(caplog) -> None:
    # no tables created
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    repo = SQLAlchemyRepository(Product, async_sessionmaker(engine))
    try:
        with caplog.at_level(logging.ERROR, logger="shopfront.repository"):
            with pytest.raises(OperationalError):
                await repo.list_all()
        assert "ProductRepository.list_all failed" in caplog.text
    finally:
        await engine.dispose()
