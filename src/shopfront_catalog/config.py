"""Catalog query configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from shopfront_core.domain.ordering import SortKey

DEFAULT_SORT_TABLE: Mapping[str, SortKey] = MappingProxyType(
    {
        "name": SortKey.ascending("name"),
        "priceAsc": SortKey.ascending("price"),
        "priceDesc": SortKey.descending("price"),
    }
)


@dataclass(frozen=True)
class CatalogQueryConfig:
    """
    Tunables for building and serving catalog queries.

    Passed explicitly to :class:`ProductCriteriaBuilder` and
    :class:`ProductCatalog`; there is no module-level default instance.

    Attributes:
        default_page_size: Page size used when the request omits one or
            sends a non-positive value.
        max_page_size: Upper bound; larger requests are clamped to it.
        sort_table: Sort token -> sort key.  Unknown tokens fall back to
            ``default_sort``.
        default_sort: Token used when the request has no (known) sort.
        search_field: Field matched case-insensitively by ``search``.
        brand_field / type_field: Foreign-key fields filtered by brand and
            type ids.
        id_field: Field used for single-product lookups.
        includes: Relations loaded with every product.
        api_url: Base URL prefixed to relative picture paths.
    """

    default_page_size: int = 6
    max_page_size: int = 50
    sort_table: Mapping[str, SortKey] = field(
        default_factory=lambda: DEFAULT_SORT_TABLE
    )
    default_sort: str = "name"
    search_field: str = "name"
    brand_field: str = "product_brand_id"
    type_field: str = "product_type_id"
    id_field: str = "id"
    includes: tuple[str, ...] = ("product_brand", "product_type")
    api_url: str = ""

    def __post_init__(self) -> None:
        if self.max_page_size < 1:
            raise ValueError(f"max_page_size must be >= 1, got {self.max_page_size}")
        if not 0 < self.default_page_size <= self.max_page_size:
            raise ValueError(
                "default_page_size must be between 1 and max_page_size "
                f"({self.max_page_size}), got {self.default_page_size}"
            )
        if self.default_sort not in self.sort_table:
            raise ValueError(
                f"default_sort {self.default_sort!r} is not in sort_table "
                f"({', '.join(self.sort_table)})"
            )

    def resolve_sort(self, token: str | None) -> SortKey:
        """Map a request sort token to a sort key (unknown -> default)."""
        if token and token in self.sort_table:
            return self.sort_table[token]
        return self.sort_table[self.default_sort]

    def clamp_page_size(self, size: int | None) -> int:
        if size is None or size < 1:
            return self.default_page_size
        return min(size, self.max_page_size)
