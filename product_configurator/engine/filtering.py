"""
Catalog filtering against a selections snapshot.
"""
from typing import Iterable, Mapping, Optional, Tuple
from product_configurator.config.facet_config import FACET_ORDER, RANGE_FACETS
from product_configurator.data.models.product import Product
from product_configurator.engine.accessors import get_value, get_width_interval
from product_configurator.utils.validation import parse_width_range


def intervals_overlap(low_a: float, high_a: float, low_b: float, high_b: float) -> bool:
    """
    Check whether two half-open intervals [low_a, high_a) and [low_b, high_b) intersect.
    """
    return low_a < high_b and low_b < high_a


def matches_selection(product: Product, attribute: str, selected: Optional[str]) -> bool:
    """
    Check whether a product is consistent with one attribute selection.

    An unset selection always matches. A width selection matches when the
    product's interval overlaps it; a malformed width selection matches
    everything. Any other selection matches only a product that defines the
    attribute with exactly that value.

    Args:
        product (Product): The product to test
        attribute (str): The attribute identifier
        selected (Optional[str]): The selected value, or None if unset

    Returns:
        bool: True if the product is consistent with the selection
    """
    if selected is None:
        return True

    if attribute in RANGE_FACETS:
        interval = parse_width_range(selected)
        if interval is None:
            return True
        sel_min, sel_max = interval
        product_min, product_max = get_width_interval(product)
        return intervals_overlap(product_min, product_max, sel_min, sel_max)

    value = get_value(product, attribute)
    if value is None:
        return False
    return value == selected


def apply_filters(selections: Mapping[str, Optional[str]], products: Iterable[Product]) -> Tuple[Product, ...]:
    """
    Keep the products consistent with every set attribute.

    Args:
        selections (Mapping[str, Optional[str]]): The selections snapshot
        products (Iterable[Product]): Products to filter, in catalog order

    Returns:
        Tuple[Product, ...]: Matching products, in their original order
    """
    return tuple(
        product for product in products
        if all(
            matches_selection(product, attribute, selections.get(attribute))
            for attribute in FACET_ORDER
        )
    )
