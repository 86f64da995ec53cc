"""Option discovery: distinct values, ordering and width buckets."""

from product_configurator.engine.filtering import apply_filters
from product_configurator.engine.options import (
    available_options,
    sort_option_values,
    unique_values,
    width_buckets,
)


class TestSortOptionValues:
    def test_numeric_values_sorted_numerically(self):
        assert sort_option_values(["10", "2", "6", "1"]) == ["1", "2", "6", "10"]

    def test_text_values_sorted_lexically(self):
        values = ["vidro + veneziana", "lambri", "vidro", "vidro + lambri", "veneziana"]
        assert sort_option_values(values) == [
            "lambri", "veneziana", "vidro", "vidro + lambri", "vidro + veneziana",
        ]

    def test_mixed_values_sorted_lexically(self):
        assert sort_option_values(["b", "10", "2"]) == ["10", "2", "b"]


class TestUniqueValues:
    def test_distinct_values(self, catalog):
        assert unique_values("category", catalog.products) == ["janela", "porta"]

    def test_nulls_excluded(self, catalog, selections):
        selections["category"] = "janela"
        products = apply_filters(selections, catalog)
        assert unique_values("shade_motorization", products) == ["manual", "motorizada"]

    def test_all_null_gives_no_options(self, make_product):
        products = [make_product("a"), make_product("b")]
        assert unique_values("shade_motorization", products) == []

    def test_leaf_counts_are_numeric_strings(self, catalog):
        assert unique_values("leaf_count", catalog.products) == ["1", "2", "3", "4", "6"]


class TestWidthBuckets:
    def test_buckets_follow_catalog_breakpoints(self, catalog, selections):
        selections.update(category="janela", opening_system="maxim-ar")
        products = apply_filters(selections, catalog)
        assert width_buckets(products) == ["0.4-0.8", "0.8-1", "1-1.2", "1.2-2", "2-3"]

    def test_unpopulated_gap_is_dropped(self, make_product):
        products = [
            make_product("a", min_width=0.5, max_width=1.0),
            make_product("b", min_width=2.0, max_width=3.0),
        ]
        assert width_buckets(products) == ["0.5-1", "2-3"]

    def test_identical_intervals_give_one_bucket(self, make_product):
        products = [make_product("a"), make_product("b")]
        assert width_buckets(products) == ["0.7-2"]

    def test_no_products(self):
        assert width_buckets([]) == []

    def test_available_options_dispatches_width(self, make_product):
        products = [make_product("a", min_width=1, max_width=3)]
        assert available_options("width", products) == ["1-3"]
        assert available_options("material", products) == ["vidro"]
