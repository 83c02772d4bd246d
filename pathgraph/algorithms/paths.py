from __future__ import annotations

from typing import Optional

from pathgraph.algorithms.base import NodeID, Path, PredMap
from pathgraph.errors import NoPathFound


def resolve_path(
    src_node: NodeID,
    dst_node: NodeID,
    pred: PredMap,
    algorithm: Optional[str] = None,
) -> Path:
    """
    Rebuild the source->destination path from a predecessor map.

    Walks ``pred`` backward from ``dst_node`` until ``src_node`` is reached and
    returns the nodes in forward order, both endpoints included.

    Args:
        src_node: Source node ID.
        dst_node: Destination node ID.
        pred: Predecessor map produced by a search; ``src_node`` has no entry.
        algorithm: Optional algorithm name, used only in the error message.

    Returns:
        List of node IDs from src_node to dst_node.

    Raises:
        NoPathFound: If dst_node was never reached, or the predecessor chain
            does not lead back to src_node.
    """
    if src_node == dst_node:
        return [src_node]
    if dst_node not in pred:
        raise NoPathFound(src_node, dst_node, algorithm)

    reversed_path = [dst_node]
    node = dst_node
    # A well-formed chain visits each recorded node at most once
    for _ in range(len(pred)):
        node = pred.get(node)
        if node is None:
            break
        reversed_path.append(node)
        if node == src_node:
            reversed_path.reverse()
            return reversed_path

    raise NoPathFound(src_node, dst_node, algorithm)
