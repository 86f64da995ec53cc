"""
Human-readable labels for option values and the running product name.
"""
from typing import Mapping, Optional
from product_configurator.config.app_config import SHADE_PRESENT_LABEL
from product_configurator.config.facet_config import (
    FACET_DEFINITIONS,
    FACET_ORDER,
    RANGE_FACETS,
    SHADE,
    SHADE_YES,
    SHADE_NO,
)
from product_configurator.utils.validation import parse_width_range, format_number


def format_option_label(attribute: str, value: str) -> str:
    """
    Get the label shown for one value of an attribute.

    Args:
        attribute (str): The attribute identifier
        value (str): The raw option value

    Returns:
        str: The label from the attribute's table or format, or the raw value on a miss
    """
    definition = FACET_DEFINITIONS.get(attribute)
    if definition is None:
        return value

    if definition.label_format:
        if attribute in RANGE_FACETS:
            interval = parse_width_range(value)
            if interval is None:
                return value
            return definition.label_format.format(
                min=format_number(interval[0]), max=format_number(interval[1])
            )
        return definition.label_format.format(value=value)

    return definition.labels.get(value, value)


def name_label(attribute: str, value: str, shade_label: str = SHADE_PRESENT_LABEL) -> str:
    """
    Get the part of the display name contributed by one answer.

    "With shade" gives shade_label, "no shade" gives an empty string, and
    every other answer gives its option label.
    """
    if attribute == SHADE:
        if value == SHADE_YES:
            return shade_label
        if value == SHADE_NO:
            return ""
    return format_option_label(attribute, value)


def build_display_name(selections: Mapping[str, Optional[str]], shade_label: str = SHADE_PRESENT_LABEL) -> str:
    """
    Build the running product name from the current selections.

    Labels of set attributes are joined in schema order. "No shade" adds
    nothing; "with shade" adds shade_label instead of the answer's label.

    Args:
        selections (Mapping[str, Optional[str]]): The selections snapshot
        shade_label (str): Literal used when a shade is present

    Returns:
        str: The display name, e.g. "Janela Correr Persiana Motorizada"
    """
    parts = []
    for attribute in FACET_ORDER:
        value = selections.get(attribute)
        if value is None:
            continue
        parts.append(name_label(attribute, value, shade_label))
    return " ".join(part for part in parts if part)
