"""Filtering primitive: exact matches, null attributes and width intervals."""

import pytest

from product_configurator.engine.filtering import apply_filters, intervals_overlap, matches_selection


class TestIntervalsOverlap:
    def test_overlapping_intervals(self):
        assert intervals_overlap(0.7, 2.0, 1.0, 3.0) is True

    def test_touching_intervals_do_not_overlap(self):
        assert intervals_overlap(0.7, 2.0, 2.0, 3.0) is False
        assert intervals_overlap(2.0, 3.0, 0.7, 2.0) is False

    def test_contained_interval(self):
        assert intervals_overlap(0.5, 4.0, 1.0, 1.2) is True


class TestMatchesSelection:
    def test_unset_matches_everything(self, make_product):
        assert matches_selection(make_product("a"), "category", None) is True

    def test_exact_string_match(self, make_product):
        product = make_product("a", category="porta")
        assert matches_selection(product, "category", "porta") is True
        assert matches_selection(product, "category", "janela") is False

    def test_numeric_attribute_compared_as_string(self, make_product):
        product = make_product("a", leaf_count=3)
        assert matches_selection(product, "leaf_count", "3") is True
        assert matches_selection(product, "leaf_count", "3.0") is False

    def test_missing_value_never_matches_concrete_selection(self, make_product):
        product = make_product("a", shade_motorization=None)
        assert matches_selection(product, "shade_motorization", "manual") is False

    def test_width_overlap(self, make_product):
        product = make_product("a", min_width=0.7, max_width=2.0)
        assert matches_selection(product, "width", "1-3") is True

    def test_width_half_open_boundary(self, make_product):
        product = make_product("a", min_width=0.7, max_width=2.0)
        assert matches_selection(product, "width", "2-3") is False

    @pytest.mark.parametrize("value", ["abc", "1-", "-2", "1-2-3", "wide"])
    def test_malformed_width_fails_open(self, make_product, value):
        product = make_product("a", min_width=0.7, max_width=2.0)
        assert matches_selection(product, "width", value) is True


class TestApplyFilters:
    def test_no_selections_keeps_catalog(self, catalog, selections):
        assert apply_filters(selections, catalog) == catalog.products

    def test_keeps_catalog_order(self, catalog, selections):
        selections["category"] = "janela"
        result = apply_filters(selections, catalog)
        assert len(result) == 10
        assert [p.slug for p in result] == [p.slug for p in catalog if p.category == "janela"]

    def test_every_set_attribute_must_match(self, catalog, selections):
        selections.update(category="janela", opening_system="janela-correr", shade="sim")
        result = apply_filters(selections, catalog)
        assert {p.shade_motorization for p in result} == {"motorizada", "manual"}

    def test_contradiction_yields_nothing(self, catalog, selections):
        selections.update(category="porta", opening_system="maxim-ar")
        assert apply_filters(selections, catalog) == ()

    def test_missing_keys_are_unset(self, catalog):
        assert len(apply_filters({"category": "porta"}, catalog)) == 17
