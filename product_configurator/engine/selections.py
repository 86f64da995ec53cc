"""
Selections (the Master List): one slot per schema attribute.

All functions return a new mapping and leave their input untouched.
"""
from typing import Any, Dict, Mapping, Optional
from product_configurator.config.facet_config import FACET_ORDER, FACET_ALIASES
from product_configurator.utils.validation import is_null_marker, format_number
from product_configurator.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

Selections = Dict[str, Optional[str]]


def empty_selections() -> Selections:
    """
    Create a selections map with every attribute unset.
    """
    return {attribute: None for attribute in FACET_ORDER}


def normalize_selections(partial: Optional[Mapping[str, Optional[str]]] = None) -> Selections:
    """
    Build a full selections map from a partial one.

    Args:
        partial (Optional[Mapping[str, Optional[str]]]): Known attribute values

    Returns:
        Selections: A map with every schema attribute; unknown keys are dropped
    """
    selections = empty_selections()
    for attribute, value in (partial or {}).items():
        if attribute in selections and value is not None:
            selections[attribute] = str(value)
    return selections


def resolve_attribute(key: str) -> Optional[str]:
    """
    Map a schema identifier or an extractor alias to a schema identifier.

    Args:
        key (str): Attribute key as supplied by the caller

    Returns:
        Optional[str]: The schema identifier, or None if the key is not recognized
    """
    if key in FACET_ORDER:
        return key
    return FACET_ALIASES.get(key)


def _reset_after(selections: Selections, index: int, keep=frozenset()) -> None:
    for attribute in FACET_ORDER[index + 1:]:
        if attribute not in keep:
            selections[attribute] = None


def set_selection(selections: Mapping[str, Optional[str]], attribute: str, value: Optional[str]) -> Selections:
    """
    Set (or clear) one attribute and reset every attribute after it.

    Args:
        selections (Mapping[str, Optional[str]]): The current selections
        attribute (str): Schema identifier of the attribute to change
        value (Optional[str]): The new value, or None to clear it

    Returns:
        Selections: The updated selections

    Raises:
        KeyError: If the attribute is not part of the schema
    """
    if attribute not in FACET_ORDER:
        raise KeyError(f"Unknown attribute: {attribute}")

    updated = normalize_selections(selections)
    updated[attribute] = None if value is None else str(value)
    _reset_after(updated, FACET_ORDER.index(attribute))
    return updated


def merge_facets(selections: Mapping[str, Optional[str]], facets: Mapping[str, Any]) -> Selections:
    """
    Merge a batch of extracted facets into the selections.

    Only recognized, non-null values are merged. Attributes after the earliest
    changed one are reset unless the batch supplies them too.

    Args:
        selections (Mapping[str, Optional[str]]): The current selections
        facets (Mapping[str, Any]): Attribute (or extractor key) to value-or-null

    Returns:
        Selections: The updated selections
    """
    updated = normalize_selections(selections)

    incoming: Dict[str, str] = {}
    for key, value in facets.items():
        attribute = resolve_attribute(key)
        if attribute is None:
            logger.debug(f"Ignoring unrecognized facet key: {key}")
            continue
        if is_null_marker(value):
            continue
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            incoming[attribute] = format_number(value)
        else:
            incoming[attribute] = str(value).strip()

    changed = [attribute for attribute, value in incoming.items() if updated[attribute] != value]
    if not changed:
        return updated

    updated.update(incoming)
    earliest = min(FACET_ORDER.index(attribute) for attribute in changed)
    _reset_after(updated, earliest, keep=frozenset(incoming))

    logger.debug(f"Merged facets: {incoming}")
    return updated
