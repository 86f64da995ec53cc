"""
Utility package for the product configurator.
"""
from product_configurator.utils.validation import (
    parse_number,
    format_number,
    parse_width_range,
    format_width_range,
    is_null_marker,
    validate_dataframe
)
from product_configurator.utils.logging_config import setup_logging, get_logger
