"""Shared fixtures: operator registry, catalog data and an aiosqlite store."""

from __future__ import annotations

import contextlib
from collections.abc import AsyncGenerator, AsyncIterator, Callable, Iterable
from decimal import Decimal
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from shopfront_catalog.models import Base, Product, ProductBrand, ProductType
from shopfront_core.adapters.memory import InMemoryQueryable
from shopfront_specifications.operators_memory import build_default_registry

BRANDS = [(1, "Angular"), (2, "NetCore"), (3, "React")]
TYPES = [(1, "Boards"), (2, "Hats"), (3, "Gloves")]

# (id, name, price, brand_id, type_id)
PRODUCTS = [
    (1, "Angular Speedster Board 2000", "200.00", 1, 1),
    (2, "Green Angular Board 3000", "150.00", 1, 1),
    (3, "Core Board Speed Rush 3", "180.00", 2, 1),
    (4, "Net Core Super Board", "300.00", 2, 1),
    (5, "React Board Super Whizzy Fast", "250.00", 3, 1),
    (6, "Typescript Entry Board", "120.00", 1, 1),
    (7, "Core Blue Hat", "10.00", 2, 2),
    (8, "Green React Woolen Hat", "8.00", 3, 2),
    (9, "Purple React Woolen Hat", "15.00", 3, 2),
    (10, "Blue Code Gloves", "15.00", 2, 3),
]


def make_brands() -> list[ProductBrand]:
    return [ProductBrand(id=i, name=n) for i, n in BRANDS]


def make_types() -> list[ProductType]:
    return [ProductType(id=i, name=n) for i, n in TYPES]


def make_products() -> list[Product]:
    return [
        Product(
            id=pid,
            name=name,
            description=f"{name} description",
            price=Decimal(price),
            picture_url=f"images/products/{pid}.png",
            product_brand_id=brand_id,
            product_type_id=type_id,
        )
        for pid, name, price, brand_id, type_id in PRODUCTS
    ]


SourceFactory = Callable[[], contextlib.AbstractAsyncContextManager[Any]]


def memory_source(
    items: Iterable[Any],
    resolvers: dict[str, Callable[[Any], Any]] | None = None,
) -> SourceFactory:
    rows = list(items)

    @contextlib.asynccontextmanager
    async def factory() -> AsyncIterator[InMemoryQueryable[Any]]:
        yield InMemoryQueryable(rows, resolvers=resolvers)

    return factory


@pytest.fixture
def registry():
    """Default in-memory operator registry for building specs."""
    return build_default_registry()


@pytest.fixture
def brands() -> list[ProductBrand]:
    return make_brands()


@pytest.fixture
def product_types() -> list[ProductType]:
    return make_types()


@pytest.fixture
def products() -> list[Product]:
    return make_products()


@pytest.fixture
def product_resolvers(
    brands: list[ProductBrand], product_types: list[ProductType]
) -> dict[str, Callable[[Any], Any]]:
    brand_by_id = {b.id: b for b in brands}
    type_by_id = {t.id: t for t in product_types}
    return {
        "product_brand": lambda p: brand_by_id[p.product_brand_id],
        "product_type": lambda p: type_by_id[p.product_type_id],
    }


@pytest.fixture
def product_source(
    products: list[Product], product_resolvers: dict[str, Callable[[Any], Any]]
) -> SourceFactory:
    return memory_source(products, product_resolvers)


@pytest.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        session.add_all([*make_brands(), *make_types()])
        await session.flush()
        session.add_all(make_products())
        await session.commit()

    yield factory
    await engine.dispose()


@pytest.fixture
def make_source() -> Callable[..., SourceFactory]:
    """Build an in-memory source factory over arbitrary rows."""
    return memory_source
