"""
Door & Window Product Configurator Package.

This package provides a guided wizard that narrows a catalog of doors and
windows down to a single product, one question at a time.
"""
from product_configurator.engine.decision_engine import compute_next_state
from product_configurator.data.repositories.catalog_repository import load_catalog
from product_configurator.main import ConfiguratorSession, run_configurator

__version__ = "1.0.0"
