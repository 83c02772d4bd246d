"""Unweighted path search: depth-first and breadth-first.

Both searches run the same loop (`traverse`); they differ only in the frontier
discipline. The loop stops as soon as the destination is popped, and a node's
predecessor is the first node that discovered it. Edge weights are ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Set

from pathgraph.algorithms.base import NodeID, Path, PredMap
from pathgraph.algorithms.frontier import Frontier, QueueFrontier, StackFrontier
from pathgraph.algorithms.paths import resolve_path
from pathgraph.logging import get_logger

if TYPE_CHECKING:
    from pathgraph.graph.weighted_graph import WeightedGraph

logger = get_logger(__name__)


def traverse(
    graph: WeightedGraph,
    src_node: NodeID,
    dst_node: NodeID,
    frontier: Frontier[NodeID],
) -> PredMap:
    """Explore ``graph`` from ``src_node`` until ``dst_node`` is popped.

    Args:
        graph: Graph to search.
        src_node: Start node.
        dst_node: Node whose retrieval from the frontier ends the search.
        frontier: Empty frontier deciding the expansion order.

    Returns:
        Predecessor map for every discovered node. ``dst_node`` is absent if
        it is unreachable.

    Raises:
        OutOfRange: If ``src_node`` or ``dst_node`` is not a node of ``graph``.
    """
    graph.check_node(src_node)
    graph.check_node(dst_node)

    pred: PredMap = {}
    visited: Set[NodeID] = set()
    frontier.push(src_node)
    pops = 0

    while frontier:
        node_id = frontier.pop()
        pops += 1
        if node_id == dst_node:
            break
        # Duplicate frontier entries are expected; only the first one expands
        if node_id in visited:
            continue
        visited.add(node_id)

        for neighbor_id, _weight in graph.adjacency(node_id):
            if neighbor_id in visited:
                continue
            if neighbor_id not in pred:
                pred[neighbor_id] = node_id
            frontier.push(neighbor_id)

    logger.debug(
        f"{type(frontier).__name__} traversal {src_node}->{dst_node}: "
        f"{pops} pops, {len(visited)} nodes expanded"
    )
    return pred


def dfs(graph: WeightedGraph, src_node: NodeID, dst_node: NodeID) -> Path:
    """Find a path with a depth-first (stack) search.

    Neighbors are pushed in adjacency insertion order, so the most recently
    inserted neighbor is expanded first. The result is a valid path but not
    necessarily the shortest by edge count or weight.

    Raises:
        OutOfRange: If either node is not in the graph.
        NoPathFound: If ``dst_node`` is unreachable from ``src_node``.
    """
    pred = traverse(graph, src_node, dst_node, StackFrontier())
    return resolve_path(src_node, dst_node, pred, "dfs")


def bfs(graph: WeightedGraph, src_node: NodeID, dst_node: NodeID) -> Path:
    """Find a path with the fewest edges using a breadth-first (queue) search.

    Raises:
        OutOfRange: If either node is not in the graph.
        NoPathFound: If ``dst_node`` is unreachable from ``src_node``.
    """
    pred = traverse(graph, src_node, dst_node, QueueFrontier())
    return resolve_path(src_node, dst_node, pred, "bfs")
