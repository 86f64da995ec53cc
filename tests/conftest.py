"""Shared fixtures for the configurator test suite."""

import pytest

from product_configurator.data.models.product import Product, Catalog
from product_configurator.data.repositories.catalog_repository import load_catalog
from product_configurator.engine.selections import empty_selections


FINAL_SLUG = "janelasa/janela-de-correr-2-folhas-com-persiana-integrada-motorizada-30.php"


@pytest.fixture(scope="session")
def catalog():
    """The packaged 27-product sample catalog."""
    return load_catalog()


@pytest.fixture
def selections():
    """A selections map with every attribute unset."""
    return empty_selections()


@pytest.fixture
def make_product():
    """Factory for catalog products with sensible defaults."""
    def _make(slug, **overrides):
        fields = dict(
            slug=slug,
            image=f"/assets/images/{slug}.webp",
            category="janela",
            opening_system="janela-correr",
            shade="nao",
            shade_motorization=None,
            material="vidro",
            min_width=0.7,
            max_width=2.0,
            leaf_count=2,
        )
        fields.update(overrides)
        return Product(**fields)
    return _make


@pytest.fixture
def make_catalog(make_product):
    """Build a Catalog from (slug, overrides) pairs."""
    def _make(*entries):
        return Catalog.from_products([make_product(slug, **overrides) for slug, overrides in entries])
    return _make
