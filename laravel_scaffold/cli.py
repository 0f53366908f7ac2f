"""laravel-scaffold command-line entry point.

Usage::

    laravel-scaffold controller:generate post Post "title:string,views:integer"
    python -m laravel_scaffold.cli controller:generate post Post "title:string" --root ./blog
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from laravel_scaffold.config import Config
from laravel_scaffold.scaffolder import ScaffoldError, ScaffoldGenerator, ScaffoldResult
from laravel_scaffold.utils import (
    console,
    display_path,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)

SUCCESS_MESSAGE = "Controller, model, migration, and views generated successfully!"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="laravel-scaffold",
        description="Generate a Laravel controller, model, migration, views and route",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  laravel-scaffold controller:generate post Post title:string,body:text\n"
            "  laravel-scaffold controller:generate post Post title:string --root ./blog\n"
        ),
    )
    commands = parser.add_subparsers(dest="command", metavar="command", required=True)

    generate = commands.add_parser(
        "controller:generate",
        help="Generate a new controller, model, migration, and views",
    )
    generate.add_argument("name", help="The name of the controller/resource (e.g. post)")
    generate.add_argument("model", help="The name of the model (e.g. Post)")
    generate.add_argument(
        "columns",
        help="Columns for the migration table (e.g. name:string,email:string,age:integer)",
    )
    generate.add_argument(
        "--root", "-r",
        default=None,
        help="Laravel project root (default: configuration or current directory)",
    )
    generate.add_argument(
        "--config", "-c",
        default=None,
        help="JSON configuration file (default: read LARAVEL_SCAFFOLD_* variables)",
    )
    generate.add_argument(
        "--templates",
        default=None,
        help="Alternative template directory",
    )
    generate.add_argument(
        "--force",
        action="store_true",
        help="Overwrite the shared layout even if it already exists",
    )
    generate.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print every generated artifact and its status",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> Config:
    """Load configuration from ``--config`` or the environment, then apply flags."""
    config = Config.load(Path(args.config)) if args.config else Config.from_env()
    updates: dict[str, object] = {}
    if args.root:
        updates["project_root"] = Path(args.root)
    if args.templates:
        updates["template_dir"] = Path(args.templates)
    if args.force:
        updates["force_layout"] = True
    return config.model_copy(update=updates) if updates else config


def print_result(result: ScaffoldResult, root: Path) -> None:
    """Print the per-artifact status table."""
    rows = {
        display_path(artifact.path, root): result.statuses[artifact.kind].value
        for artifact in result.artifacts
    }
    print_summary_table(rows, title="Generated artifacts")
    for path in result.skipped:
        print_warning(f"Skipped existing {display_path(path, root)} (use --force to overwrite)")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``laravel-scaffold``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args)
    except (OSError, ValueError) as exc:
        print_error(f"Could not load configuration: {exc}")
        sys.exit(1)

    generator = ScaffoldGenerator(config)
    try:
        result = asyncio.run(generator.generate(args.name, args.model, args.columns))
    except ScaffoldError as exc:
        print_error(str(exc))
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\nOperation cancelled.")
        sys.exit(130)

    if args.verbose:
        print_result(result, config.project_root)
    print_success(SUCCESS_MESSAGE)


if __name__ == "__main__":
    main()
