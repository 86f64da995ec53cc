"""
Decision engine package.
"""
from product_configurator.engine.decision_engine import compute_next_state, build_question
from product_configurator.engine.filtering import apply_filters, matches_selection, intervals_overlap
from product_configurator.engine.options import available_options, width_buckets, unique_values
from product_configurator.engine.labels import format_option_label, name_label, build_display_name
from product_configurator.engine.selections import (
    empty_selections,
    normalize_selections,
    set_selection,
    merge_facets
)
