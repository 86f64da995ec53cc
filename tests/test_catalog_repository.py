"""Catalog loading from CSV."""

import pandas as pd
import pytest

from product_configurator.data.models.product import Catalog
from product_configurator.data.repositories.catalog_repository import (
    CatalogError,
    CatalogRepository,
    load_catalog,
)

from conftest import FINAL_SLUG


def write_catalog(path, rows):
    pd.DataFrame(rows).to_csv(path, index=False)
    return str(path)


ROW = {
    "slug": "portas/porta-de-giro-1-folha-veneziana-8.php",
    "image": "/assets/images/porta_de_giro_1folha_veneziana.webp",
    "categoria": "porta",
    "sistema": "giro",
    "persiana": "nao",
    "persianaMotorizada": None,
    "material": "veneziana",
    "minLargura": 0.5,
    "maxLargura": 1,
    "folhasNumber": 1,
}


class TestPackagedCatalog:
    def test_loads_all_products(self, catalog):
        assert isinstance(catalog, Catalog)
        assert len(catalog) == 27

    def test_product_fields(self, catalog):
        product = catalog.get(FINAL_SLUG)
        assert product.category == "janela"
        assert product.opening_system == "janela-correr"
        assert product.shade == "sim"
        assert product.shade_motorization == "motorizada"
        assert product.material == "vidro"
        assert product.min_width == 0.7
        assert product.max_width == 2.0
        assert product.leaf_count == 2
        assert product.product_url == "https://fabricadoaluminio.com.br/produto/" + FINAL_SLUG

    def test_products_without_shade_have_no_motorization(self, catalog):
        for product in catalog:
            if product.shade == "nao":
                assert product.shade_motorization is None

    def test_leaf_count_is_int(self, catalog):
        assert all(isinstance(product.leaf_count, int) for product in catalog)

    def test_unknown_slug(self, catalog):
        assert catalog.get("portas/unknown.php") is None


class TestCatalogRepository:
    def test_reads_custom_file(self, tmp_path):
        path = write_catalog(tmp_path / "catalog.csv", [ROW])
        products = CatalogRepository(path).get_all()
        assert len(products) == 1
        assert products[0].shade_motorization is None
        assert products[0].max_width == 1.0

    def test_raw_data_keeps_catalog_columns(self, tmp_path):
        path = write_catalog(tmp_path / "catalog.csv", [ROW])
        df = CatalogRepository(path).get_raw_data()
        assert "minLargura" in df.columns
        assert len(df) == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError):
            load_catalog(str(tmp_path / "missing.csv"))

    def test_missing_columns(self, tmp_path):
        row = {key: value for key, value in ROW.items() if key != "sistema"}
        path = write_catalog(tmp_path / "catalog.csv", [row])
        with pytest.raises(CatalogError, match="sistema"):
            load_catalog(path)

    def test_invalid_width(self, tmp_path):
        path = write_catalog(tmp_path / "catalog.csv", [dict(ROW, maxLargura="wide")])
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_empty_catalog_file(self, tmp_path):
        path = tmp_path / "catalog.csv"
        path.write_text(",".join(ROW.keys()) + "\n")
        with pytest.raises(CatalogError):
            load_catalog(str(path))
