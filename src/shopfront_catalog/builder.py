"""
ProductCriteriaBuilder: turns listing parameters into product criteria.

Every input is total: malformed or out-of-range values fall back to
defaults instead of raising, so any request produces a valid
:class:`~shopfront_specifications.criteria.Criteria`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple

from shopfront_specifications.ast import AttributeSpecification
from shopfront_specifications.criteria import Criteria
from shopfront_specifications.operators import SpecificationOperator
from shopfront_specifications.operators_memory import build_default_registry

from .models import Product
from .params import STORE_INT_MAX, fits_store_int

if TYPE_CHECKING:
    from shopfront_specifications.strategy import MemoryOperatorRegistry

    from .config import CatalogQueryConfig
    from .params import ProductQueryParams

logger = logging.getLogger("shopfront.catalog")


class PageWindow(NamedTuple):
    page_index: int
    page_size: int

    @property
    def skip(self) -> int:
        return (self.page_index - 1) * self.page_size


class ProductCriteriaBuilder:
    """Builds ``Criteria[Product]`` from :class:`ProductQueryParams`."""

    def __init__(
        self,
        config: CatalogQueryConfig,
        *,
        registry: MemoryOperatorRegistry | None = None,
    ) -> None:
        self.config = config
        self._registry = registry or build_default_registry()

    def build(self, params: ProductQueryParams) -> Criteria[Product]:
        """
        Build listing criteria.

        Filters are AND-ed: search text (case-insensitive substring of the
        product name), brand id and type id.  ``None`` or ``0`` for an id
        means "all" and adds no filter, as does an id outside the signed
        64-bit range.  Sorting uses the configured sort
        table and paging is always enabled.
        """
        config = self.config
        criteria: Criteria[Product] = Criteria[Product]().include(*config.includes)

        search = normalise_search(params.search)
        if search:
            criteria = criteria.where(
                self._spec(config.search_field, SpecificationOperator.ICONTAINS, search)
            )
        if _usable_id(params.brand_id):
            criteria = criteria.where(
                self._spec(
                    config.brand_field, SpecificationOperator.EQ, params.brand_id
                )
            )
        if _usable_id(params.type_id):
            criteria = criteria.where(
                self._spec(config.type_field, SpecificationOperator.EQ, params.type_id)
            )

        window = self.page_window(params)
        criteria = criteria.with_order(config.resolve_sort(params.sort))
        criteria = criteria.paginate(skip=window.skip, take=window.page_size)
        logger.debug("Built product criteria %s", criteria.to_dict())
        return criteria

    def for_product(self, product_id: int) -> Criteria[Product]:
        """Single-product criteria: id match plus the standard includes."""
        return (
            Criteria[Product]()
            .include(*self.config.includes)
            .for_single(
                self._spec(self.config.id_field, SpecificationOperator.EQ, product_id)
            )
        )

    def page_window(self, params: ProductQueryParams) -> PageWindow:
        """
        Effective (page index, page size) after clamping.

        The page index is capped so the row offset stays within the signed
        64-bit range; such a page lies past the last row and comes back
        empty.
        """
        page_size = self.config.clamp_page_size(params.page_size)
        last_index = STORE_INT_MAX // page_size + 1
        return PageWindow(
            page_index=min(max(1, params.page_index), last_index),
            page_size=page_size,
        )

    def _spec(
        self, attr: str, op: SpecificationOperator, value: object
    ) -> AttributeSpecification[Product]:
        return AttributeSpecification(attr, op, value, registry=self._registry)


def _usable_id(value: int | None) -> bool:
    return value is not None and value != 0 and fits_store_int(value)


def normalise_search(search: str | None) -> str:
    """Trim and lower-case search text; ``None`` becomes ``""``."""
    if search is None:
        return ""
    return search.strip().lower()
