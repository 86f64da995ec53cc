"""
Repositories for the product configurator.
"""
from product_configurator.data.repositories.catalog_repository import (
    CatalogRepository,
    CatalogError,
    load_catalog
)
