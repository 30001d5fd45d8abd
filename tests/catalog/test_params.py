from __future__ import annotations

import pytest

from shopfront_catalog import ProductQueryParams


def test_empty_mapping_gives_defaults() -> None:
    assert ProductQueryParams.from_query_params({}) == ProductQueryParams()


def test_parses_camel_case_keys() -> None:
    params = ProductQueryParams.from_query_params(
        {
            "brandId": "2",
            "typeId": "3",
            "search": "  Hat ",
            "sort": "priceDesc",
            "pageIndex": "4",
            "pageSize": "12",
        }
    )
    assert params == ProductQueryParams(
        brand_id=2,
        type_id=3,
        search="  Hat ",
        sort="priceDesc",
        page_index=4,
        page_size=12,
    )


@pytest.mark.parametrize("raw", ["abc", "", "1.5", None, True])
def test_unparsable_integers_fall_back(raw) -> None:
    params = ProductQueryParams.from_query_params(
        {"brandId": raw, "pageIndex": raw, "pageSize": raw}
    )
    assert params.brand_id is None
    assert params.page_index == 1
    assert params.page_size is None


def test_out_of_range_values_are_kept_for_the_builder() -> None:
    params = ProductQueryParams.from_query_params({"pageIndex": "-3", "pageSize": "0"})
    assert (params.page_index, params.page_size) == (-3, 0)


@pytest.mark.parametrize("raw", ["9223372036854775808", "-9223372036854775809"])
def test_integers_beyond_64_bits_fall_back(raw) -> None:
    params = ProductQueryParams.from_query_params(
        {"typeId": raw, "pageIndex": raw, "pageSize": raw}
    )
    assert params.type_id is None
    assert params.page_index == 1
    assert params.page_size is None


def test_64_bit_bounds_are_kept() -> None:
    params = ProductQueryParams.from_query_params({"brandId": "9223372036854775807"})
    assert params.brand_id == 2**63 - 1
