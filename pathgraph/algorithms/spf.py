"""Shortest-path-first (SPF) search by total edge weight.

Implements Dijkstra's algorithm with a binary-heap frontier and lazy deletion:
when a node's cost improves, a new ``(cost, node)`` entry is pushed and the
old one stays in the heap. Outdated entries are recognized and skipped when
popped.

Notes:
    The search stops as soon as the destination is popped; with non-negative
    weights its cost is final at that point. The destination is not expanded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Set, Tuple

from pathgraph.algorithms.base import Cost, NodeID, Path, PredMap
from pathgraph.algorithms.frontier import MinCostFrontier
from pathgraph.algorithms.paths import resolve_path
from pathgraph.logging import get_logger

if TYPE_CHECKING:
    from pathgraph.graph.weighted_graph import WeightedGraph

logger = get_logger(__name__)


def spf(
    graph: WeightedGraph,
    src_node: NodeID,
    dst_node: NodeID,
) -> Tuple[Dict[NodeID, Cost], PredMap]:
    """Run Dijkstra from ``src_node`` until ``dst_node`` is settled.

    Args:
        graph: Graph with non-negative edge weights.
        src_node: Source node.
        dst_node: Destination node; popping it ends the search.

    Returns:
        A tuple of (costs, pred):
          - costs: Best known cost for every node reached so far. Nodes
            absent from the map have not been reached (infinite cost).
          - pred: For each reached node other than ``src_node``, the node it
            was last relaxed from.

    Raises:
        OutOfRange: If ``src_node`` or ``dst_node`` is not in the graph.
    """
    graph.check_node(src_node)
    graph.check_node(dst_node)

    costs: Dict[NodeID, Cost] = {src_node: 0}
    pred: PredMap = {}
    visited: Set[NodeID] = set()
    min_pq = MinCostFrontier()
    min_pq.push((0, src_node))
    skipped = 0

    while min_pq:
        current_cost, node_id = min_pq.pop()
        if node_id == dst_node:
            break
        # Outdated entries: the node was settled earlier, or its cost has
        # since been lowered by a later push
        if node_id in visited or current_cost != costs[node_id]:
            skipped += 1
            continue
        visited.add(node_id)

        for neighbor_id, weight in graph.adjacency(node_id):
            new_cost = current_cost + weight
            if neighbor_id not in costs or new_cost < costs[neighbor_id]:
                costs[neighbor_id] = new_cost
                pred[neighbor_id] = node_id
                min_pq.push((new_cost, neighbor_id))

    logger.debug(
        f"SPF {src_node}->{dst_node}: {len(visited)} nodes settled, "
        f"{skipped} heap entries skipped"
    )
    return costs, pred


def dijkstra(
    graph: WeightedGraph, src_node: NodeID, dst_node: NodeID
) -> Tuple[Cost, Path]:
    """Find the minimum total weight path between two nodes.

    Ties between equal-cost routes are broken by heap order and are not
    otherwise specified.

    Args:
        graph: Graph with non-negative edge weights.
        src_node: Source node.
        dst_node: Destination node.

    Returns:
        ``(total_cost, path)`` where path runs from src_node to dst_node.

    Raises:
        OutOfRange: If either node is not in the graph.
        NoPathFound: If ``dst_node`` is unreachable from ``src_node``.
    """
    costs, pred = spf(graph, src_node, dst_node)
    path = resolve_path(src_node, dst_node, pred, "dijkstra")
    return costs[dst_node], path
