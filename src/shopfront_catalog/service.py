"""ProductCatalog: paged product listing, single lookup and facet lists."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from shopfront_persistence_sqlalchemy.repository import SQLAlchemyRepository

from .builder import ProductCriteriaBuilder
from .dtos import BrandToReturn, Pagination, ProductToReturn, TypeToReturn
from .models import Product, ProductBrand, ProductType
from .params import ProductQueryParams, fits_store_int

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy.ext.asyncio import AsyncSession

    from shopfront_core.ports.repository import IReadRepository

    from .config import CatalogQueryConfig

logger = logging.getLogger("shopfront.catalog")


class ProductCatalog:
    """
    Read-side catalog service.

    ``get_products`` costs two sequential round trips: a count over the
    filters, then the page itself.  They are not isolated from each
    other, so a write landing in between can make ``count`` disagree with
    the page contents by that write.
    """

    def __init__(
        self,
        products: IReadRepository[Product],
        brands: IReadRepository[ProductBrand],
        types: IReadRepository[ProductType],
        config: CatalogQueryConfig,
        *,
        builder: ProductCriteriaBuilder | None = None,
    ) -> None:
        self._products = products
        self._brands = brands
        self._types = types
        self.config = config
        self.builder = builder or ProductCriteriaBuilder(config)

    @classmethod
    def from_session_factory(
        cls,
        session_factory: Callable[[], AsyncSession],
        config: CatalogQueryConfig,
    ) -> ProductCatalog:
        """Wire the catalog to SQLAlchemy repositories sharing *session_factory*."""
        return cls(
            SQLAlchemyRepository(Product, session_factory),
            SQLAlchemyRepository(ProductBrand, session_factory),
            SQLAlchemyRepository(ProductType, session_factory),
            config,
        )

    async def get_products(
        self, params: ProductQueryParams | None = None
    ) -> Pagination[ProductToReturn]:
        params = params or ProductQueryParams()
        criteria = self.builder.build(params)
        window = self.builder.page_window(params)

        total = await self._products.count(criteria)
        products = await self._products.list(criteria)
        logger.debug(
            "Listed %d of %d products (page %d, size %d)",
            len(products),
            total,
            window.page_index,
            window.page_size,
        )
        return Pagination[ProductToReturn](
            page_index=window.page_index,
            page_size=window.page_size,
            count=total,
            data=[self._project(p) for p in products],
        )

    async def get_product(self, product_id: int) -> ProductToReturn | None:
        """Return one product, or ``None`` when no product has *product_id*."""
        if not fits_store_int(product_id):
            logger.debug("Product id %s is out of range", product_id)
            return None
        product = await self._products.get(self.builder.for_product(product_id))
        if product is None:
            logger.debug("Product %s not found", product_id)
            return None
        return self._project(product)

    async def get_brands(self) -> list[BrandToReturn]:
        return [BrandToReturn.from_entity(b) for b in await self._brands.list_all()]

    async def get_types(self) -> list[TypeToReturn]:
        return [TypeToReturn.from_entity(t) for t in await self._types.list_all()]

    async def count_products(self, params: ProductQueryParams | None = None) -> int:
        """Total matches for *params*, ignoring its page window and sort."""
        criteria = self.builder.build(params or ProductQueryParams())
        return await self._products.count(criteria)

    def _project(self, product: Product) -> ProductToReturn:
        return ProductToReturn.from_entity(product, api_url=self.config.api_url)
