"""FastAPI router for the product catalog.

Query values are read straight from the request and coerced by
:class:`ProductQueryParams`, so malformed ``pageIndex`` or ``brandId``
values fall back to defaults instead of producing a 422.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ...dtos import (
    ApiResponse,
    BrandToReturn,
    Pagination,
    ProductToReturn,
    TypeToReturn,
)
from ...params import ProductQueryParams
from ...service import ProductCatalog


def create_products_router(
    get_catalog: Callable[..., Any],
    *,
    prefix: str = "/products",
    tags: Sequence[str] = ("products",),
) -> APIRouter:
    """
    Build the products router.

    Args:
        get_catalog: FastAPI dependency returning a :class:`ProductCatalog`.
        prefix: Route prefix.
        tags: OpenAPI tags.

    Example:
        ```python
        app = FastAPI()
        app.include_router(create_products_router(lambda: catalog), prefix="/api")
        ```
    """
    router = APIRouter(prefix=prefix, tags=list(tags))

    @router.get("", response_model=Pagination[ProductToReturn])
    async def get_products(
        request: Request,
        catalog: ProductCatalog = Depends(get_catalog),
    ) -> Pagination[ProductToReturn]:
        params = ProductQueryParams.from_query_params(request.query_params)
        return await catalog.get_products(params)

    # Registered before "/{product_id}" so the literal paths win.
    @router.get("/brands", response_model=list[BrandToReturn])
    async def get_product_brands(
        catalog: ProductCatalog = Depends(get_catalog),
    ) -> list[BrandToReturn]:
        return await catalog.get_brands()

    @router.get("/types", response_model=list[TypeToReturn])
    async def get_product_types(
        catalog: ProductCatalog = Depends(get_catalog),
    ) -> list[TypeToReturn]:
        return await catalog.get_types()

    @router.get(
        "/{product_id}",
        response_model=ProductToReturn,
        responses={404: {"model": ApiResponse}},
    )
    async def get_product(
        product_id: int,
        catalog: ProductCatalog = Depends(get_catalog),
    ) -> Any:
        product = await catalog.get_product(product_id)
        if product is None:
            body = ApiResponse.for_status(404)
            return JSONResponse(status_code=404, content=body.model_dump(by_alias=True))
        return product

    return router
