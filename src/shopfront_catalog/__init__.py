"""Product catalog: models, criteria building, projection and paged queries."""

from .builder import PageWindow, ProductCriteriaBuilder, normalise_search
from .config import DEFAULT_SORT_TABLE, CatalogQueryConfig
from .dtos import (
    ApiResponse,
    BrandToReturn,
    Pagination,
    ProductToReturn,
    TypeToReturn,
)
from .models import Base, Product, ProductBrand, ProductType
from .params import ProductQueryParams
from .service import ProductCatalog

__all__ = [
    # Configuration
    "CatalogQueryConfig",
    "DEFAULT_SORT_TABLE",
    # Models
    "Base",
    "Product",
    "ProductBrand",
    "ProductType",
    # Query building
    "PageWindow",
    "ProductCriteriaBuilder",
    "ProductQueryParams",
    "normalise_search",
    # Projection
    "ApiResponse",
    "BrandToReturn",
    "Pagination",
    "ProductToReturn",
    "TypeToReturn",
    # Service
    "ProductCatalog",
]
