"""
Validation and parsing utilities for the product configurator.
"""
import math
from typing import Any, List, Optional, Tuple
import pandas as pd

# Markers the facet extractor uses for "not mentioned"
NULL_MARKERS = {"", "null", "none"}


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a value as a finite float.

    Args:
        value (Any): The value to parse

    Returns:
        Optional[float]: The parsed number, or None if the value is not numeric
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip())
    except (ValueError, TypeError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def format_number(value: float) -> str:
    """
    Render a number the way it appears in option values ("2", "0.7", "1.25").

    Args:
        value (float): The number to render

    Returns:
        str: Shortest string form, without a trailing ".0"
    """
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def parse_width_range(value: Optional[str]) -> Optional[Tuple[float, float]]:
    """
    Parse a width interval selection of the form "min-max".

    Args:
        value (Optional[str]): The interval string, e.g. "0.7-2"

    Returns:
        Optional[Tuple[float, float]]: (min, max), or None if the string is malformed
    """
    if not isinstance(value, str):
        return None

    parts = value.split('-')
    if len(parts) != 2:
        return None

    low = parse_number(parts[0]) if parts[0].strip() else None
    high = parse_number(parts[1]) if parts[1].strip() else None
    if low is None or high is None:
        return None
    return low, high


def format_width_range(low: float, high: float) -> str:
    """
    Build the "min-max" value string for a width interval.
    """
    return f"{format_number(low)}-{format_number(high)}"


def is_null_marker(value: Any) -> bool:
    """
    Check whether an extracted facet value means "no value".

    Args:
        value (Any): The value returned by the extractor

    Returns:
        bool: True for None, NaN, blank strings and literal "null" markers
    """
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, str):
        return value.strip().lower() in NULL_MARKERS
    return False


def validate_dataframe(df: pd.DataFrame, required_columns: List[str]) -> bool:
    """
    Validate that a DataFrame contains the required columns.

    Args:
        df (pd.DataFrame): The DataFrame to validate
        required_columns (List[str]): List of required column names

    Returns:
        bool: True if all required columns exist, False otherwise
    """
    if df is None or df.empty:
        return False

    missing_columns = [col for col in required_columns if col not in df.columns]
    return len(missing_columns) == 0
