"""Command-line interface for faulttree."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from faulttree.dsl.loader import load_fault_tree_file
from faulttree.logging import get_logger, set_global_log_level
from faulttree.model.fault_tree import FaultTree
from faulttree.report import build_model_report

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[str]], min_width: int = 8) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _print_summary(tree: FaultTree, report: Dict[str, Any], detail: bool) -> None:
    """Print model features, warnings and (optionally) primary event details."""
    print(f"Fault tree: {tree.name}")
    print(f"Top event: {report['fault-tree']['top-event']}")
    print()

    features = report["information"]["model-features"]
    print("Model features:")
    rows = [[name, str(count)] for name, count in features.items()]
    print(_format_table(["Feature", "Count"], rows))

    if detail:
        rows = []
        for entry in report["fault-tree"]["primary-events"]:
            rows.append(
                [
                    entry["name"],
                    entry["type"],
                    entry.get("ccf-group", "-"),
                    " ".join(entry.get("members", [])) or "-",
                ]
            )
        if rows:
            print()
            print("Primary events:")
            print(_format_table(["Name", "Type", "CCF group", "Members"], rows))

    warnings = report["information"]["warnings"]
    if warnings:
        print()
        print("Warnings:")
        for warning in warnings:
            print(f"   - {warning}")


def _inspect_model(
    path: Path,
    *,
    as_json: bool = False,
    detail: bool = False,
    output: Optional[Path] = None,
) -> None:
    """Load, classify and summarize a fault tree model.

    Args:
        path: Model YAML file.
        as_json: Print the JSON report instead of the text summary.
        detail: Include the primary event table in the text summary.
        output: Optional file to write the JSON report to.
    """
    logger.info(f"Loading fault tree model from: {path}")
    start = perf_counter()

    try:
        tree = load_fault_tree_file(path)
        report = build_model_report(tree)
    except FileNotFoundError:
        logger.error(f"Model file not found: {path}")
        print(f"ERROR: Model file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to load model: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to load model: {type(e).__name__}: {e}")
        sys.exit(1)

    json_str = json.dumps(report, indent=2)
    if as_json:
        print(json_str)
    else:
        _print_summary(tree, report, detail)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json_str)
        logger.info(f"Report written to: {output}")

    logger.info(f"Model inspected in {_format_duration(perf_counter() - start)}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``faulttree`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="faulttree",
        description="Load, validate and summarize fault tree models.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{inspect}",
        help="Available commands",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Classify a fault tree model and summarize it"
    )
    inspect_parser.add_argument("model", type=Path, help="Path to model YAML")
    inspect_parser.add_argument(
        "--json", action="store_true", help="Print the JSON report to stdout"
    )
    inspect_parser.add_argument(
        "--detail",
        "-d",
        action="store_true",
        help="List primary events in the text summary",
    )
    inspect_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write the JSON report to this file",
    )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "inspect":
        _inspect_model(
            args.model, as_json=args.json, detail=args.detail, output=args.output
        )


if __name__ == "__main__":
    main()
