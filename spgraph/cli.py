"""Command-line interface for spgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema

from spgraph.config import QueryConfig
from spgraph.exceptions import SPGraphError
from spgraph.graph.core import Graph
from spgraph.graph.io import load_graph_file
from spgraph.logging import get_logger, set_global_log_level
from spgraph.paths import shortest_paths
from spgraph.types.base import Metric, UnreachablePolicy

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 6,
) -> str:
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


def _load(path: Path) -> Graph:
    try:
        return load_graph_file(path)
    except FileNotFoundError:
        print(f"Graph file not found: {path}", file=sys.stderr)
        raise SystemExit(1) from None
    except (ValueError, SPGraphError, jsonschema.ValidationError) as exc:
        message = exc.message if isinstance(exc, jsonschema.ValidationError) else exc
        print(f"Invalid graph file {path}: {message}", file=sys.stderr)
        raise SystemExit(1) from None


def _find_paths(
    path: Path,
    source: int,
    targets: List[int],
    metric: Metric,
    strict: bool,
    output: Optional[Path],
) -> None:
    graph = _load(path)
    config = QueryConfig(
        unreachable=UnreachablePolicy.RAISE if strict else UnreachablePolicy.IMPLICIT
    )
    logger.info(
        "Finding %s paths from %d to %s in %s",
        metric.name.lower(),
        source,
        targets,
        path,
    )
    try:
        records = shortest_paths(graph, source, targets, metric, config)
    except SPGraphError as exc:
        logger.error("Path query failed: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from None

    payload: Dict[str, Any] = {
        "source": source,
        "metric": metric.name.lower(),
        "results": {str(t): rec.to_dict() for t, rec in records.items()},
    }
    text = json.dumps(payload, indent=2)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding="utf-8")
        logger.info("Results written to %s", output)
    else:
        print(text)


def _inspect_graph(path: Path) -> None:
    graph = _load(path)
    timed = sum(1 for e in graph.edges if e.has_time)
    print(f"Graph: {path}")
    print(f"   Vertices: {graph.vertex_count}")
    print(f"   Edges: {graph.edge_count} ({timed} with time)")
    rows = [
        [
            str(i),
            str(e.source),
            str(e.target),
            str(e.weight),
            "-" if e.time is None else str(e.time),
        ]
        for i, e in enumerate(graph.edges)
    ]
    table = _format_table(["#", "Source", "Target", "Weight", "Time"], rows)
    if table:
        print(table)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``spgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="spgraph",
        description="Find cheapest and fastest paths in a weighted directed graph.",
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
        metavar="{path,inspect}",
        help="Available commands",
    )

    path_parser = subparsers.add_parser(
        "path", help="Find shortest paths from a source vertex"
    )
    path_parser.add_argument("graph", type=Path, help="Path to graph YAML")
    path_parser.add_argument(
        "--source", "-s", type=int, required=True, help="Source vertex id"
    )
    path_parser.add_argument(
        "--target",
        "-t",
        type=int,
        nargs="+",
        required=True,
        help="One or more target vertex ids",
    )
    path_parser.add_argument(
        "--metric",
        "-m",
        choices=[m.name.lower() for m in Metric],
        default="cost",
        help="Minimize edge weight ('cost') or edge time ('time')",
    )
    path_parser.add_argument(
        "--strict-reachability",
        action="store_true",
        help="Fail instead of reporting unreachable targets with a null distance",
    )
    path_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write JSON results to this file instead of stdout",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Validate a graph file and list its edges"
    )
    inspect_parser.add_argument("graph", type=Path, help="Path to graph YAML")

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

    if args.command == "path":
        _find_paths(
            path=args.graph,
            source=args.source,
            targets=args.target,
            metric=Metric.from_string(args.metric),
            strict=args.strict_reachability,
            output=args.output,
        )
    elif args.command == "inspect":
        _inspect_graph(args.graph)


if __name__ == "__main__":
    main()
