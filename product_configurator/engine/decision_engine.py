"""
Decision engine for the guided configurator.

Given the full selections snapshot and the catalog, works out the next
question to ask or the final product list. Everything is recomputed from
scratch on each call; nothing is kept between calls.
"""
from typing import Dict, List, Mapping, Optional, Sequence
from product_configurator.config.app_config import PLACEHOLDER_IMAGE
from product_configurator.config.facet_config import FACET_DEFINITIONS, FACET_ORDER
from product_configurator.data.models.product import Catalog, Product
from product_configurator.data.models.wizard import EngineResult, Option, QuestionState
from product_configurator.engine.filtering import apply_filters, matches_selection
from product_configurator.engine.labels import format_option_label
from product_configurator.engine.options import available_options
from product_configurator.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


def _representative_picture(attribute: str, value: str, products: Sequence[Product]) -> str:
    """Image of the first filtered product offering this option, or the placeholder."""
    for product in products:
        if matches_selection(product, attribute, value):
            return product.image or PLACEHOLDER_IMAGE
    return PLACEHOLDER_IMAGE


def build_question(attribute: str, values: List[str], products: Sequence[Product]) -> QuestionState:
    """
    Build the question for an attribute with more than one available value.

    Args:
        attribute (str): The attribute to ask about
        values (List[str]): Available option values, in presentation order
        products (Sequence[Product]): The currently filtered products

    Returns:
        QuestionState: The question with one Option per value
    """
    options = tuple(
        Option(
            label=format_option_label(attribute, value),
            value=value,
            picture=_representative_picture(attribute, value, products),
        )
        for value in values
    )
    return QuestionState(
        attribute=attribute,
        question=FACET_DEFINITIONS[attribute].title,
        options=options,
    )


def compute_next_state(selections: Mapping[str, Optional[str]], catalog: Catalog) -> EngineResult:
    """
    Compute the next wizard state.

    Walks the attributes in schema order. Set attributes are skipped, attributes
    with no remaining values are skipped, attributes with a single remaining
    value are auto-selected (possibly cascading to a final product), and the
    first attribute with several values becomes the next question.

    Args:
        selections (Mapping[str, Optional[str]]): The full selections snapshot
        catalog (Catalog): The product catalog

    Returns:
        EngineResult: Either the next question or the final products (possibly empty)
    """
    current_selections: Dict[str, Optional[str]] = {
        attribute: selections.get(attribute) for attribute in FACET_ORDER
    }
    products = apply_filters(current_selections, catalog)

    if len(products) == 1:
        logger.info(f"Final product found: {products[0].slug}")
        return EngineResult.final(products)

    if not products:
        logger.warning("Zero products found for current selections.")
        return EngineResult.final(())

    for attribute in FACET_ORDER:
        if current_selections[attribute] is not None:
            continue

        values = available_options(attribute, products)

        if not values:
            logger.debug(f"Skip attribute: {attribute} (0 options left)")
            continue

        if len(values) == 1:
            logger.debug(f"Auto-select: {attribute} = {values[0]}")
            current_selections[attribute] = values[0]
            products = apply_filters(current_selections, catalog)

            if len(products) == 1:
                logger.info(f"Final product (auto-select chained): {products[0].slug}")
                return EngineResult.final(products)
            continue

        logger.debug(f"Stop and ask: {attribute} ({len(values)} options)")
        return EngineResult.question(build_question(attribute, values, products))

    logger.info(f"Flow completed with {len(products)} products.")
    return EngineResult.final(products)
