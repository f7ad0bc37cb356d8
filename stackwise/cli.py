"""Command-line entry point for generating decision reports.

Usage:
    python -m stackwise.cli --graph architecture.json --description "startup MVP on AWS"
    python -m stackwise.cli --graph architecture.yaml --descriptor project.json --indent 0
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from stackwise.config import DEFAULT_CATALOG_PATH, EngineSettings
from stackwise.decisions import generate_decision_report, load_tool_catalog
from stackwise.decisions.catalog import ToolCatalog
from stackwise.errors import CatalogConfigurationError, InputError
from stackwise.telemetry import setup_logging

logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 2


def load_document(path: Path) -> Any:
    """Read a JSON or YAML document; the suffix picks the parser.

    Raises:
        InputError: If the file cannot be read or parsed
    """
    try:
        text = path.read_text()
    except OSError as e:
        raise InputError(f"Cannot read {path}: {e}") from e

    try:
        if path.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise InputError(f"Cannot parse {path}: {e}") from e


def build_descriptor(args: argparse.Namespace) -> dict[str, Any]:
    if args.descriptor:
        descriptor = load_document(Path(args.descriptor))
        if not isinstance(descriptor, dict):
            raise InputError(f"Descriptor file {args.descriptor} must contain an object")
    else:
        descriptor = {"description": args.description}

    if args.project_name:
        descriptor = {**descriptor, "projectName": args.project_name}
    return descriptor


def resolve_catalog(args: argparse.Namespace, settings: EngineSettings) -> ToolCatalog | None:
    """Catalog from --catalog or STACKWISE_CATALOG_PATH; None means the bundled one."""
    if args.catalog:
        catalog_path = Path(args.catalog)
    elif settings.catalog_path != DEFAULT_CATALOG_PATH:
        catalog_path = settings.catalog_path
    else:
        return None

    catalog = load_tool_catalog(catalog_path)
    missing = catalog.missing_categories()
    if missing:
        logger.warning(
            f"Catalog {catalog_path} has no candidates for: "
            f"{', '.join(category.value for category in missing)}"
        )
    return catalog


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stackwise",
        description="Generate an enterprise-aware technology decision report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--graph",
        required=True,
        help="Path to the architecture graph (JSON or YAML with nodes and edges)",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--description",
        type=str,
        help="Free-text project description",
    )
    source.add_argument(
        "--descriptor",
        type=str,
        help="Path to a project descriptor (JSON or YAML with description, projectName)",
    )
    parser.add_argument(
        "--project-name",
        type=str,
        default=None,
        help="Project name (overrides the descriptor's projectName)",
    )
    parser.add_argument(
        "--catalog",
        type=str,
        default=None,
        help="Path to a tool catalog YAML (default: bundled catalog)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation; 0 prints compact output (default: 2)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    load_dotenv()
    args = create_parser().parse_args(argv)

    settings = EngineSettings.from_env()
    if args.verbose:
        settings = EngineSettings(log_level="DEBUG", catalog_path=settings.catalog_path)
    setup_logging(settings)

    try:
        graph = load_document(Path(args.graph))
        descriptor = build_descriptor(args)
        catalog = resolve_catalog(args, settings)
        report = generate_decision_report(graph, descriptor, catalog=catalog)
    except InputError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        for error in e.errors:
            print(f"  - {error}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except CatalogConfigurationError as e:
        print(f"Catalog error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    print(report.to_json(indent=args.indent or None))
    return 0


if __name__ == "__main__":
    sys.exit(main())
