"""
Application-wide configuration settings for the product configurator.
"""
import os
from product_configurator.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Catalog source
PACKAGED_CATALOG_PATH = os.path.join(_PACKAGE_DIR, "data", "catalog", "products.csv")
DEFAULT_CATALOG_PATH = os.environ.get("CONFIGURATOR_CATALOG_PATH", PACKAGED_CATALOG_PATH)

# Product links and pictures
BASE_PRODUCT_URL = os.environ.get(
    "CONFIGURATOR_BASE_PRODUCT_URL", "https://fabricadoaluminio.com.br/produto/"
)
PLACEHOLDER_IMAGE = os.environ.get("CONFIGURATOR_PLACEHOLDER_IMAGE", "/assets/placeholder.webp")

# Running display name: "shade = sim" is shown as this literal, "shade = nao" is omitted
SHADE_PRESENT_LABEL = os.environ.get("CONFIGURATOR_SHADE_LABEL", "Persiana")

# Export settings
EXPORT_FILENAME = "final_products.csv"

logger.debug(f"Using catalog path: {DEFAULT_CATALOG_PATH}")
