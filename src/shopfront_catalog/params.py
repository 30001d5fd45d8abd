"""ProductQueryParams: coerced product listing parameters."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

# Signed 64-bit range accepted by the backing stores.
STORE_INT_MIN = -(2**63)
STORE_INT_MAX = 2**63 - 1

QUERY_KEYS = {
    "brand_id": "brandId",
    "type_id": "typeId",
    "search": "search",
    "sort": "sort",
    "page_index": "pageIndex",
    "page_size": "pageSize",
}


@dataclass(frozen=True)
class ProductQueryParams:
    """
    Caller-supplied listing parameters.

    Values are kept as received (after type coercion); range handling
    such as clamping the page size or treating brand ``0`` as "all"
    belongs to :class:`~shopfront_catalog.builder.ProductCriteriaBuilder`.
    """

    brand_id: int | None = None
    type_id: int | None = None
    search: str | None = None
    sort: str | None = None
    page_index: int = 1
    page_size: int | None = None

    @classmethod
    def from_query_params(cls, query_params: Mapping[str, Any]) -> ProductQueryParams:
        """
        Build from raw query-string values (camelCase keys).

        Never raises: values that do not parse as integers, or that fall
        outside the signed 64-bit range, are treated as missing.
        """
        page_index = _to_int(query_params.get(QUERY_KEYS["page_index"]))
        return cls(
            brand_id=_to_int(query_params.get(QUERY_KEYS["brand_id"])),
            type_id=_to_int(query_params.get(QUERY_KEYS["type_id"])),
            search=_to_str(query_params.get(QUERY_KEYS["search"])),
            sort=_to_str(query_params.get(QUERY_KEYS["sort"])),
            page_index=page_index if page_index is not None else 1,
            page_size=_to_int(query_params.get(QUERY_KEYS["page_size"])),
        )


def _to_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return parsed if fits_store_int(parsed) else None


def fits_store_int(value: int) -> bool:
    return STORE_INT_MIN <= value <= STORE_INT_MAX


def _to_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)
