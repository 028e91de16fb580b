"""CLI entrypoint for brickset."""

import argparse
from pathlib import Path
from typing import Any, Dict

from brickset.api.lego_sets_api import (
    any_below_piece_threshold,
    average_pieces,
    count_above_pieces,
    count_by_theme,
    distinct_tags_without_dimensions,
    names_by_subtheme,
    names_by_theme,
    names_descending,
    names_limited,
    sum_pieces,
)
from brickset.config.loader import DEFAULT_CONFIG_PATH, get_dataset_path, resolve_config
from brickset.ingestion.dataset_loader import load_dataset
from brickset.models.lego_set import Dataset
from brickset.runners.run_report import main as run_report_main
from brickset.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def _load(args: argparse.Namespace) -> tuple[Dataset, Dict[str, Any]]:
    config = resolve_config(args.config)
    path = args.dataset or get_dataset_path(config)
    return load_dataset(path), config["queries"]


def _print_name(name: str | None) -> None:
    print(name if name is not None else "null")


def cmd_report(args: argparse.Namespace) -> None:
    """Run every query and print the report."""
    run_report_main(
        config_path=args.config,
        output_format=args.format,
        dataset_path=args.dataset,
    )


def cmd_names(args: argparse.Namespace) -> None:
    """Print the first N set names."""
    dataset, queries = _load(args)
    limit = args.limit if args.limit is not None else queries["names_limit"]
    for name in names_limited(dataset, limit):
        _print_name(name)


def cmd_count_above(args: argparse.Namespace) -> None:
    """Print how many sets have more pieces than the threshold."""
    dataset, queries = _load(args)
    threshold = args.threshold if args.threshold is not None else queries["pieces_threshold"]
    print(count_above_pieces(dataset, threshold))


def cmd_average(args: argparse.Namespace) -> None:
    """Print the average piece count."""
    dataset, _ = _load(args)
    print(average_pieces(dataset))


def cmd_names_desc(args: argparse.Namespace) -> None:
    """Print every set name in reverse alphabetical order."""
    dataset, _ = _load(args)
    for name in names_descending(dataset):
        _print_name(name)


def cmd_subtheme(args: argparse.Namespace) -> None:
    """Print names of sets whose subtheme contains the given text."""
    dataset, queries = _load(args)
    substring = args.substring if args.substring is not None else queries["subtheme"]
    for name in names_by_subtheme(dataset, substring):
        _print_name(name)


def cmd_any_below(args: argparse.Namespace) -> None:
    """Print whether any set has fewer pieces than the threshold."""
    dataset, queries = _load(args)
    threshold = args.threshold if args.threshold is not None else queries["below_threshold"]
    print(str(any_below_piece_threshold(dataset, threshold)).lower())


def cmd_sum(args: argparse.Namespace) -> None:
    """Print the total piece count."""
    dataset, _ = _load(args)
    print(sum_pieces(dataset))


def cmd_tags_no_dims(args: argparse.Namespace) -> None:
    """Print distinct tags of sets without dimensions."""
    dataset, _ = _load(args)
    for tag in sorted(distinct_tags_without_dimensions(dataset)):
        print(tag)


def cmd_themes(args: argparse.Namespace) -> None:
    """Print the number of sets per theme."""
    dataset, _ = _load(args)
    counts = count_by_theme(dataset)
    print(f"{'Theme':<30} {'Sets':>6}")
    print("-" * 37)
    for theme, count in sorted(counts.items()):
        print(f"{theme:<30} {count:>6}")


def cmd_theme_names(args: argparse.Namespace) -> None:
    """Print distinct set names per theme."""
    dataset, _ = _load(args)
    for theme, names in sorted(names_by_theme(dataset).items()):
        print(f"{theme}: {', '.join(sorted(names))}")


def main() -> None:
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        prog="brickset",
        description="Query and aggregate Brickset LEGO set data",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to config file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--dataset",
        type=Path,
        default=None,
        help="Path to dataset JSON file (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # report command
    report_parser = subparsers.add_parser("report", help="Run every query and print a report")
    report_parser.add_argument(
        "--format",
        type=str,
        choices=["md", "json"],
        default="md",
        help="Output format: md or json (default: md)",
    )
    report_parser.set_defaults(func=cmd_report)

    # names command
    names_parser = subparsers.add_parser("names", help="Print the first N set names")
    names_parser.add_argument(
        "--limit",
        type=int,
        help="Number of names (default: queries.names_limit)",
    )
    names_parser.set_defaults(func=cmd_names)

    # count-above command
    count_above_parser = subparsers.add_parser("count-above", help="Count sets with more pieces than a threshold")
    count_above_parser.add_argument(
        "--threshold",
        type=int,
        help="Piece threshold (default: queries.pieces_threshold)",
    )
    count_above_parser.set_defaults(func=cmd_count_above)

    average_parser = subparsers.add_parser("average", help="Average piece count")
    average_parser.set_defaults(func=cmd_average)

    names_desc_parser = subparsers.add_parser("names-desc", help="Set names in reverse alphabetical order")
    names_desc_parser.set_defaults(func=cmd_names_desc)

    # subtheme command
    subtheme_parser = subparsers.add_parser("subtheme", help="Names of sets whose subtheme contains text")
    subtheme_parser.add_argument(
        "substring",
        nargs="?",
        default=None,
        help="Text to look for in the subtheme (default: queries.subtheme)",
    )
    subtheme_parser.set_defaults(func=cmd_subtheme)

    # any-below command
    any_below_parser = subparsers.add_parser("any-below", help="Whether any set has fewer pieces than a threshold")
    any_below_parser.add_argument(
        "--threshold",
        type=int,
        help="Piece threshold (default: queries.below_threshold)",
    )
    any_below_parser.set_defaults(func=cmd_any_below)

    sum_parser = subparsers.add_parser("sum", help="Total piece count")
    sum_parser.set_defaults(func=cmd_sum)

    tags_parser = subparsers.add_parser("tags-no-dims", help="Distinct tags of sets without dimensions")
    tags_parser.set_defaults(func=cmd_tags_no_dims)

    themes_parser = subparsers.add_parser("themes", help="Number of sets per theme")
    themes_parser.set_defaults(func=cmd_themes)

    theme_names_parser = subparsers.add_parser("theme-names", help="Distinct set names per theme")
    theme_names_parser.set_defaults(func=cmd_theme_names)

    args = parser.parse_args()
    configure_logging()

    if not args.command:
        parser.print_help()
        return

    try:
        args.func(args)
    except Exception as e:
        logger.error(f"Error running command '{args.command}': {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
