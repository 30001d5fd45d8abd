"""
Response models for the catalog.

Field names are snake_case in Python and camelCase on the wire
(``pageIndex``, ``pictureUrl``...); build with either, dump with
``model_dump(by_alias=True)``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from .models import Product, ProductBrand, ProductType

T = TypeVar("T")

_STATUS_MESSAGES = {
    400: "A bad request, you have made",
    401: "Authorized, you are not",
    404: "Resource found, it was not",
    500: "Errors are the path to the dark side",
}


class CatalogModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class BrandToReturn(CatalogModel):
    id: int
    name: str

    @classmethod
    def from_entity(cls, brand: ProductBrand) -> BrandToReturn:
        return cls(id=brand.id, name=brand.name)


class TypeToReturn(CatalogModel):
    id: int
    name: str

    @classmethod
    def from_entity(cls, product_type: ProductType) -> TypeToReturn:
        return cls(id=product_type.id, name=product_type.name)


class ProductToReturn(CatalogModel):
    """A product flattened for clients: brand and type become their names."""

    id: int
    name: str
    description: str = ""
    price: Decimal
    picture_url: str = ""
    product_type: str
    product_brand: str

    @field_serializer("price", when_used="json")
    def _price_as_number(self, price: Decimal) -> float:
        return float(price)

    @classmethod
    def from_entity(cls, product: Product, *, api_url: str = "") -> ProductToReturn:
        """
        Project a product whose brand and type relations are loaded.

        The picture path is prefixed with *api_url* when both are set.
        """
        return cls(
            id=product.id,
            name=product.name,
            description=product.description or "",
            price=product.price,
            picture_url=resolve_picture_url(product.picture_url, api_url),
            product_type=product.product_type.name,
            product_brand=product.product_brand.name,
        )


class Pagination(CatalogModel, Generic[T]):
    """One page of results plus the total number of matches."""

    page_index: int
    page_size: int
    count: int
    data: list[T] = Field(default_factory=list)


class ApiResponse(CatalogModel):
    """Error body returned by the HTTP surface."""

    status_code: int
    message: str

    @classmethod
    def for_status(cls, status_code: int, message: str | None = None) -> ApiResponse:
        return cls(
            status_code=status_code,
            message=message or _STATUS_MESSAGES.get(status_code, ""),
        )


def resolve_picture_url(picture_url: str | None, api_url: str) -> str:
    if not picture_url:
        return ""
    if not api_url:
        return picture_url
    return f"{api_url.rstrip('/')}/{picture_url.lstrip('/')}"
