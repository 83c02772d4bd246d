"""Command-line interface for pathgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from pathgraph.config import (
    REFERENCE_GRAPH,
    SEGMENT_TREE_DEMO,
    ReferenceGraphConfig,
    SegmentTreeDemoConfig,
)
from pathgraph.errors import PathGraphError
from pathgraph.graph.weighted_graph import WeightedGraph
from pathgraph.logging import get_logger, setup_root_logger
from pathgraph.segment_tree import SegmentTree

logger = get_logger(__name__)

ALGORITHMS = ("dfs", "bfs", "dijkstra")


def _parse_number(text: str) -> Union[int, float]:
    """Parse ``text`` as an int when possible, otherwise as a float.

    Raises:
        argparse.ArgumentTypeError: If ``text`` is not a number.
    """
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None


def _parse_node(text: str) -> int:
    """Parse a node id or list index, which must be an integer."""
    try:
        return int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None


def _parse_group(
    parser: argparse.ArgumentParser,
    option: str,
    values: Sequence[str],
    parsers: Sequence[Callable[[str], Any]],
) -> Tuple[Any, ...]:
    """Convert one occurrence of a multi-value option, one parser per value.

    Exits through ``parser.error`` (status 2) on the first bad value.
    """
    try:
        return tuple(parse(value) for parse, value in zip(parsers, values))
    except argparse.ArgumentTypeError as e:
        parser.error(f"argument {option}: {e}")


def _format_path(path: Sequence[int]) -> str:
    return " -> ".join(str(node) for node in path)


def _query(
    graph: WeightedGraph, algorithm: str, src: int, dst: int
) -> Dict[str, Any]:
    """Run one path query and return it as a JSON-friendly dict."""
    result: Dict[str, Any] = {"algorithm": algorithm, "src": src, "dst": dst}
    if algorithm == "dijkstra":
        cost, path = graph.dijkstra(src, dst)
        result["cost"] = cost
    elif algorithm == "bfs":
        path = graph.bfs(src, dst)
    else:
        path = graph.dfs(src, dst)
    result["path"] = path
    return result


def _print_query(result: Dict[str, Any]) -> None:
    line = (
        f"{result['algorithm'].upper()} from {result['src']} to {result['dst']}: "
        f"{_format_path(result['path'])}"
    )
    if "cost" in result:
        line += f" (cost: {result['cost']})"
    print(line)


def _run_demo(
    graph_config: ReferenceGraphConfig = REFERENCE_GRAPH,
    tree_config: SegmentTreeDemoConfig = SEGMENT_TREE_DEMO,
) -> None:
    """Run all three searches on the reference graph, then the segment tree demo."""
    graph = graph_config.build()
    logger.info(
        f"Reference graph: {graph.node_count} nodes, {graph.edge_count} edges"
    )
    for algorithm in ALGORITHMS:
        _print_query(_query(graph, algorithm, graph_config.src, graph_config.dst))

    tree = SegmentTree(tree_config.values)
    start, end = tree_config.query
    print(f"Sum of [{start}, {end}]: {tree.range_sum(start, end)}")

    index, value = tree_config.update
    tree.point_update(index, value)
    print(f"After values[{index}] = {value}: {tree.range_sum(start, end)}")

    last = len(tree) - 1
    head_sum = tree.range_sum(0, last - 1) if last > 0 else 0
    tree.point_update(last, tree_config.target_total - head_sum)
    print(f"Sum of [0, {last}] after rebalancing: {tree.range_sum(0, last)}")


def _run_path(
    node_count: int,
    src: int,
    dst: int,
    edges: List[Tuple[int, int, Union[int, float]]],
    algorithm: str,
    as_json: bool,
) -> None:
    """Build a graph from command-line edges and print one path query."""
    try:
        graph = WeightedGraph(node_count)
        for from_node, to_node, weight in edges:
            graph.add_edge(from_node, to_node, weight)
        result = _query(graph, algorithm, src, dst)
    except (PathGraphError, ValueError) as e:
        logger.error(f"Path query failed: {type(e).__name__}: {e}")
        print(f"ERROR: {type(e).__name__}: {e}")
        sys.exit(1)

    logger.info(f"{algorithm} found a {len(result['path'])}-node path")
    if as_json:
        print(json.dumps(result))
    else:
        _print_query(result)


def _run_segsum(
    values: List[Union[int, float]],
    query: Tuple[int, int],
    updates: List[Tuple[int, Union[int, float]]],
) -> None:
    """Build a segment tree, apply updates in order and print one range sum."""
    try:
        tree = SegmentTree(values)
        for index, new_value in updates:
            tree.point_update(index, new_value)
        total = tree.range_sum(*query)
    except (PathGraphError, ValueError) as e:
        logger.error(f"Segment query failed: {type(e).__name__}: {e}")
        print(f"ERROR: {type(e).__name__}: {e}")
        sys.exit(1)
    print(total)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``pathgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="pathgraph",
        description="Path search on weighted graphs and segment tree range sums.",
    )

    # Global options
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
        metavar="{demo,path,segsum}",
        help="Available commands",
    )

    subparsers.add_parser(
        "demo", help="Run DFS, BFS and Dijkstra on the reference graph"
    )

    path_parser = subparsers.add_parser("path", help="Find a path in a graph")
    path_parser.add_argument("nodes", type=int, help="Number of nodes")
    path_parser.add_argument("src", type=int, help="Source node")
    path_parser.add_argument("dst", type=int, help="Destination node")
    path_parser.add_argument(
        "--edge",
        "-e",
        nargs=3,
        action="append",
        default=[],
        metavar=("FROM", "TO", "WEIGHT"),
        help="Undirected edge; repeat for more edges",
    )
    path_parser.add_argument(
        "--algorithm",
        "-a",
        choices=ALGORITHMS,
        default="dijkstra",
        help="Search algorithm (default: dijkstra)",
    )
    path_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )

    segsum_parser = subparsers.add_parser(
        "segsum", help="Sum a range of values with a segment tree"
    )
    segsum_parser.add_argument(
        "values", nargs="+", type=_parse_number, help="Initial values"
    )
    segsum_parser.add_argument(
        "--query",
        "-q",
        nargs=2,
        type=int,
        required=True,
        metavar=("START", "END"),
        help="Inclusive index range to sum",
    )
    segsum_parser.add_argument(
        "--update",
        "-u",
        nargs=2,
        action="append",
        default=[],
        metavar=("INDEX", "VALUE"),
        help="Replace values[INDEX] before querying; repeatable",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    setup_root_logger(level=level, force=True)
    logger.debug("Debug logging enabled")

    if args.command == "demo":
        _run_demo()
    elif args.command == "path":
        _run_path(
            node_count=args.nodes,
            src=args.src,
            dst=args.dst,
            edges=[
                _parse_group(
                    path_parser,
                    "--edge",
                    edge,
                    (_parse_node, _parse_node, _parse_number),
                )
                for edge in args.edge
            ],
            algorithm=args.algorithm,
            as_json=args.json,
        )
    elif args.command == "segsum":
        _run_segsum(
            values=args.values,
            query=tuple(args.query),
            updates=[
                _parse_group(
                    segsum_parser, "--update", update, (_parse_node, _parse_number)
                )
                for update in args.update
            ],
        )


if __name__ == "__main__":
    main()
