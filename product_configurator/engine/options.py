"""
Option discovery: which answers are still possible for an attribute.
"""
from typing import Iterable, List, Sequence
import numpy as np
from product_configurator.config.facet_config import RANGE_FACETS
from product_configurator.data.models.product import Product
from product_configurator.engine.accessors import get_value, get_width_interval
from product_configurator.engine.filtering import intervals_overlap
from product_configurator.utils.validation import parse_number, format_width_range


def sort_option_values(values: Iterable[str]) -> List[str]:
    """
    Sort option values numerically when all of them are numbers, lexically otherwise.
    """
    values = list(values)
    numbers = [parse_number(value) for value in values]
    if values and all(number is not None for number in numbers):
        return [value for _, value in sorted(zip(numbers, values))]
    return sorted(values)


def unique_values(attribute: str, products: Iterable[Product]) -> List[str]:
    """
    Get the distinct values a discrete attribute takes across products.

    Args:
        attribute (str): A discrete attribute identifier
        products (Iterable[Product]): The currently filtered products

    Returns:
        List[str]: Sorted distinct values; products without a value are ignored
    """
    values = {get_value(product, attribute) for product in products}
    values.discard(None)
    return sort_option_values(values)


def width_buckets(products: Sequence[Product]) -> List[str]:
    """
    Split the width axis at every product boundary and keep the populated pieces.

    Adjacent buckets share a boundary, so they partition the covered range at
    the catalog's own breakpoints.

    Args:
        products (Sequence[Product]): The currently filtered products

    Returns:
        List[str]: Buckets as "min-max" strings, in ascending order
    """
    if not products:
        return []

    intervals = [get_width_interval(product) for product in products]
    boundaries = np.unique(np.array(intervals, dtype=float))

    buckets = []
    for low, high in zip(boundaries[:-1], boundaries[1:]):
        low, high = float(low), float(high)
        if any(intervals_overlap(p_min, p_max, low, high) for p_min, p_max in intervals):
            buckets.append(format_width_range(low, high))
    return buckets


def available_options(attribute: str, products: Sequence[Product]) -> List[str]:
    """
    Get the values still available for an attribute.

    Args:
        attribute (str): The attribute identifier
        products (Sequence[Product]): The currently filtered products

    Returns:
        List[str]: Option values, in presentation order
    """
    if attribute in RANGE_FACETS:
        return width_buckets(products)
    return unique_values(attribute, products)
