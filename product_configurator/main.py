"""
Session glue for the product configurator.

The session owns the selections (Master List) and re-runs the decision engine
on the full snapshot after every change.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from product_configurator.config.facet_config import FACET_ORDER
from product_configurator.data.models.product import Catalog, Product
from product_configurator.data.models.wizard import EngineResult
from product_configurator.data.repositories.catalog_repository import load_catalog
from product_configurator.engine.decision_engine import compute_next_state
from product_configurator.engine.labels import build_display_name, name_label
from product_configurator.engine.selections import (
    Selections,
    empty_selections,
    set_selection,
    merge_facets,
)
from product_configurator.exporters.csv_exporter import CSVExporter
from product_configurator.utils.logging_config import setup_logging, get_logger

logger = get_logger(__name__)


class ConfiguratorSession:
    """
    One user's walk through the configurator.
    """

    def __init__(self, catalog: Optional[Catalog] = None, catalog_path: Optional[str] = None):
        """
        Initialize the session with every attribute unset.

        Args:
            catalog (Optional[Catalog]): Catalog to use; loaded from catalog_path when None
            catalog_path (Optional[str]): Path to a catalog CSV (default: the packaged catalog)
        """
        self.catalog = catalog if catalog is not None else load_catalog(catalog_path)
        self.selections: Selections = empty_selections()
        self._chosen: List[str] = []  # Attributes answered by the user, in answer order
        self.state: EngineResult = self._refresh()

    def _refresh(self) -> EngineResult:
        self.state = compute_next_state(self.selections, self.catalog)
        self._chosen = [attribute for attribute in self._chosen if self.selections[attribute] is not None]
        return self.state

    def select(self, attribute: str, value: Optional[str]) -> EngineResult:
        """
        Set one attribute (resetting everything after it) and recompute.

        Args:
            attribute (str): Schema identifier of the attribute
            value (Optional[str]): The chosen value, or None to clear it

        Returns:
            EngineResult: The new state
        """
        self.selections = set_selection(self.selections, attribute, value)
        if attribute in self._chosen:
            self._chosen.remove(attribute)
        if value is not None:
            self._chosen.append(attribute)
        logger.debug(f"Selected {attribute} = {value}")
        return self._refresh()

    def choose_option(self, index: int) -> EngineResult:
        """
        Pick one option of the current question.

        Args:
            index (int): Zero-based position in the current question's options

        Returns:
            EngineResult: The new state

        Raises:
            ValueError: If there is no open question
            IndexError: If the index is out of range
        """
        question = self.state.current_question
        if question is None:
            raise ValueError("No open question: the configuration is already final")
        if not 0 <= index < len(question.options):
            raise IndexError(f"Option {index} out of range (0-{len(question.options) - 1})")
        return self.select(question.attribute, question.options[index].value)

    def apply_facets(self, facets: Mapping[str, Any]) -> EngineResult:
        """
        Merge a batch of extracted facets and recompute.

        Args:
            facets (Mapping[str, Any]): Attribute (or extractor key) to value-or-null

        Returns:
            EngineResult: The new state
        """
        previous = dict(self.selections)
        self.selections = merge_facets(self.selections, facets)
        for attribute in FACET_ORDER:
            value = self.selections[attribute]
            if value is not None and value != previous[attribute]:
                if attribute in self._chosen:
                    self._chosen.remove(attribute)
                self._chosen.append(attribute)
        return self._refresh()

    def reset(self) -> EngineResult:
        """
        Discard all selections and start over.
        """
        self.selections = empty_selections()
        self._chosen = []
        logger.info("Configurator session reset.")
        return self._refresh()

    @property
    def display_name(self) -> str:
        return build_display_name(self.selections)

    @property
    def history(self) -> List[str]:
        """
        Labels of the user's answers in the order they were given.
        """
        labels = []
        for attribute in self._chosen:
            label = name_label(attribute, self.selections[attribute])
            if label:
                labels.append(label)
        return labels

    @property
    def final_products(self) -> Optional[Tuple[Product, ...]]:
        return self.state.final_products


def run_configurator(
    selections: Optional[Mapping[str, Optional[str]]] = None,
    catalog_path: Optional[str] = None,
    output_dir: Optional[str] = None,
    log_level: int = logging.INFO
) -> Tuple[EngineResult, Optional[str]]:
    """
    Run the engine once for a set of selections.

    Args:
        selections (Optional[Mapping[str, Optional[str]]]): Known values, keyed by attribute or extractor key
        catalog_path (Optional[str]): Path to a catalog CSV (default: the packaged catalog)
        output_dir (Optional[str]): Directory to export final products to
        log_level (int): Logging level

    Returns:
        Tuple[EngineResult, Optional[str]]: The engine result and the export path, if any
    """
    setup_logging(log_level=log_level, force=True)

    catalog = load_catalog(catalog_path)
    snapshot = merge_facets(empty_selections(), selections or {})
    result = compute_next_state(snapshot, catalog)

    export_path = None
    if result.is_final and output_dir:
        export_path = CSVExporter().export(
            result.final_products, output_dir, display_name=build_display_name(snapshot)
        )

    return result, export_path


def selections_from_pairs(pairs: List[str]) -> Dict[str, str]:
    """
    Parse "attribute=value" pairs into a facets map.

    Args:
        pairs (List[str]): Pairs as given on the command line

    Returns:
        Dict[str, str]: Attribute (or extractor key) to value

    Raises:
        ValueError: If a pair has no "="
    """
    facets = {}
    for pair in pairs:
        if '=' not in pair:
            raise ValueError(f"Expected attribute=value, got: {pair}")
        key, value = pair.split('=', 1)
        facets[key.strip()] = value.strip()
    return facets


if __name__ == "__main__":
    # This allows the module to be run directly for testing
    result, _ = run_configurator()
    print(result)
