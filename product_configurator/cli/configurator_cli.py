"""
Command-line interface for the product configurator.
"""
import argparse
import logging
import sys
from typing import Callable, List, Optional
from product_configurator.main import ConfiguratorSession, selections_from_pairs
from product_configurator.data.models.wizard import EngineResult
from product_configurator.data.repositories.catalog_repository import CatalogError, load_catalog
from product_configurator.engine.selections import resolve_attribute
from product_configurator.exporters.csv_exporter import CSVExporter
from product_configurator.utils.logging_config import setup_logging


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args (Optional[List[str]]): Command-line arguments (uses sys.argv if None)

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Door & window configurator - find the product that fits your answers"
    )

    parser.add_argument(
        "--set",
        dest="selections",
        action="append",
        default=[],
        metavar="ATTRIBUTE=VALUE",
        help="Preset an answer, e.g. --set category=janela (repeatable; extractor keys such as categoria also work)"
    )

    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Keep asking questions until a product is found"
    )

    parser.add_argument(
        "--catalog",
        type=str,
        help="Path to a catalog CSV (default: the packaged catalog)"
    )

    parser.add_argument(
        "--output-dir",
        type=str,
        help="Export the final products to this directory as CSV"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser.parse_args(args)


def format_state(result: EngineResult, display_name: str = "") -> str:
    """
    Render an engine result as plain text.

    Args:
        result (EngineResult): The engine result
        display_name (str): Running name of the configuration

    Returns:
        str: Text for the terminal
    """
    lines = []
    if display_name:
        lines.append(f"[{display_name}]")

    if result.current_question is not None:
        question = result.current_question
        lines.append(question.question)
        for index, option in enumerate(question.options, start=1):
            lines.append(f"  {index}. {option.label}")
        return "\n".join(lines)

    products = result.final_products
    if not products:
        lines.append("No product matches these answers.")
        return "\n".join(lines)

    lines.append(f"Found {len(products)} product(s):")
    for product in products:
        lines.append(f"  - {product.product_url}")
    return "\n".join(lines)


def run_interactive(
    session: ConfiguratorSession,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print
) -> EngineResult:
    """
    Ask questions until the configuration is final or the user quits.

    Answers are option numbers; "r" resets and "q" quits.

    Args:
        session (ConfiguratorSession): The session to drive
        input_fn (Callable[[str], str]): Reads one answer
        output_fn (Callable[[str], None]): Writes one block of text

    Returns:
        EngineResult: The last state
    """
    while not session.state.is_final:
        output_fn(format_state(session.state, session.display_name))
        try:
            answer = input_fn("> ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            # Closed input ends the session like "q"
            break

        if answer == "q":
            break
        if answer == "r":
            session.reset()
            continue

        try:
            session.choose_option(int(answer) - 1)
        except (ValueError, IndexError):
            output_fn(f"Invalid answer: {answer}")

    if session.state.is_final:
        output_fn(format_state(session.state, session.display_name))
    return session.state


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        args (Optional[List[str]]): Command-line arguments (uses sys.argv if None)

    Returns:
        int: Exit code (0 for success, non-zero for errors)
    """
    parsed_args = parse_args(args)

    log_level = logging.DEBUG if parsed_args.verbose else logging.WARNING
    setup_logging(log_level=log_level, force=True)

    try:
        facets = selections_from_pairs(parsed_args.selections)
    except ValueError as e:
        print(f"Error: {str(e)}")
        return 1

    unknown = [key for key in facets if resolve_attribute(key) is None]
    if unknown:
        print(f"Error: Unknown attribute(s): {', '.join(unknown)}")
        return 1

    try:
        catalog = load_catalog(parsed_args.catalog)
    except CatalogError as e:
        print(f"Error: {str(e)}")
        return 1

    session = ConfiguratorSession(catalog=catalog)
    if facets:
        session.apply_facets(facets)

    if parsed_args.interactive:
        run_interactive(session)
    else:
        print(format_state(session.state, session.display_name))

    if session.state.is_final and parsed_args.output_dir:
        try:
            output_path = CSVExporter().export(
                session.final_products, parsed_args.output_dir, display_name=session.display_name
            )
        except OSError as e:
            print(f"Error: Could not export results: {str(e)}")
            return 1
        print(f"\nResults saved in {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
