"""
Command line entry point: ``design-kata products`` and ``design-kata journal``.
"""

import argparse
import json
import logging
import sys
from typing import Optional

from .config_loader import LOG_LEVEL_NAMES, load_runtime_config
from .errors import build_error, error_lines
from .filtering import apply_specification
from .journal_demo import run_journal_demo
from .logging_config import generate_session_id, set_session_id, setup_logging
from .models.product import Color, Product, Size, demo_catalog
from .models.product_specs import ColorSpecification, SizeSpecification
from .models.specs import AndSpecification, Specification
from .product_demo import print_products, run_product_demo
from .renderer import CatalogRenderer

logger = logging.getLogger(__name__)


def build_specification(
    color: Optional[Color] = None, size: Optional[Size] = None
) -> Specification[Product]:
    """Conjunction of the requested attribute specs; matches everything when none are given."""
    specs: list[Specification[Product]] = []
    if color is not None:
        specs.append(ColorSpecification(color))
    if size is not None:
        specs.append(SizeSpecification(size))
    return AndSpecification(*specs)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="design-kata", description="Run the object-oriented design examples."
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVEL_NAMES,
        default=None,
        help="Console log level. Defaults to runtime config.",
    )
    parser.add_argument(
        "--config-dir",
        type=str,
        default=None,
        help="Directory holding runtime_config.json",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    products = subparsers.add_parser("products", help="Filter the demo catalog by specification")
    products.add_argument(
        "--color",
        type=Color,
        choices=list(Color),
        help="Only products of this color",
    )
    products.add_argument(
        "--size",
        type=Size,
        choices=list(Size),
        help="Only products of this size",
    )
    products.add_argument("--table", action="store_true", help="Render matches as a table")
    products.add_argument(
        "--diagnostics", action="store_true", help="Print filter counters as JSON to stderr"
    )

    journal = subparsers.add_parser("journal", help="Run the journal/persistence example")
    journal.add_argument("--filename", type=str, help="Destination name passed to the save stub")
    journal.add_argument(
        "--overwrite",
        action="store_true",
        default=None,
        help="Overwrite flag passed to the save stub",
    )
    return parser


def _run_products(args: argparse.Namespace) -> None:
    if args.color is None and args.size is None and not (args.table or args.diagnostics):
        run_product_demo()
        return

    spec = build_specification(args.color, args.size)
    matches, counters = apply_specification(demo_catalog(), spec)
    logger.info("Filtered catalog: %d match(es)", len(matches))

    if args.table:
        CatalogRenderer(matches, title="Matching products").render()
    else:
        print_products(matches)

    if args.diagnostics:
        print(json.dumps(counters, indent=2), file=sys.stderr)


def main(argv: Optional[list[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        runtime_config = load_runtime_config(config_dir=args.config_dir)
    except (FileNotFoundError, ValueError) as exc:
        payload = build_error(
            "Invalid runtime configuration.",
            details=str(exc),
            hint="Check config/runtime_config.json or unset DESIGN_KATA_STRICT_CONFIG.",
        )
        for line in error_lines(payload):
            print(line, file=sys.stderr)
        print(json.dumps(payload, indent=2), file=sys.stderr)
        sys.exit(2)

    log_settings = runtime_config["logging"]
    setup_logging(
        console_level=args.log_level or log_settings["console_level"],
        file_level=log_settings["file_level"],
        json_format=log_settings["json_format"],
    )
    set_session_id(generate_session_id())
    logger.info("Running '%s' example", args.command)

    if args.command == "products":
        _run_products(args)
    else:
        journal_settings = runtime_config["journal"]
        filename = args.filename or journal_settings["filename"]
        overwrite = journal_settings["overwrite"] if args.overwrite is None else args.overwrite
        run_journal_demo(filename=filename, overwrite=overwrite)


if __name__ == "__main__":
    main()
