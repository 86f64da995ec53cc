"""
Attribute accessors for catalog products.

Each schema attribute maps to a fixed accessor, so the engine never reads
product fields by runtime name.
"""
from typing import Callable, Dict, Optional, Tuple
from product_configurator.config.facet_config import (
    FACET_ORDER,
    RANGE_FACETS,
    CATEGORY,
    OPENING_SYSTEM,
    SHADE,
    SHADE_MOTORIZATION,
    MATERIAL,
    LEAF_COUNT,
)
from product_configurator.data.models.product import Product

# Discrete attributes: return the product's value as a string, or None when undefined
VALUE_ACCESSORS: Dict[str, Callable[[Product], Optional[str]]] = {
    CATEGORY: lambda product: product.category,
    OPENING_SYSTEM: lambda product: product.opening_system,
    SHADE: lambda product: product.shade,
    SHADE_MOTORIZATION: lambda product: product.shade_motorization,
    MATERIAL: lambda product: product.material,
    LEAF_COUNT: lambda product: str(product.leaf_count),
}

if set(VALUE_ACCESSORS) | RANGE_FACETS != set(FACET_ORDER) or set(VALUE_ACCESSORS) & RANGE_FACETS:
    raise ValueError("Every attribute in FACET_ORDER needs exactly one accessor")


def get_value(product: Product, attribute: str) -> Optional[str]:
    """
    Read a discrete attribute from a product.

    Args:
        product (Product): The product to read
        attribute (str): A discrete attribute identifier

    Returns:
        Optional[str]: The value as a string, or None if the product does not define it
    """
    value = VALUE_ACCESSORS[attribute](product)
    if value is None:
        return None
    return str(value)


def get_width_interval(product: Product) -> Tuple[float, float]:
    """
    Read the [min, max) width interval of a product.
    """
    return float(product.min_width), float(product.max_width)
