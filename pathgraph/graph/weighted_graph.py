"""Fixed-size undirected weighted graph.

`WeightedGraph` stores, for each node in ``[0, node_count)``, the ordered list
of ``(neighbor, weight)`` pairs inserted through `add_edge`. Edges are
append-only: duplicates produce multiple adjacency entries and nothing is
ever removed. Path queries (`dfs`, `bfs`, `dijkstra`) only read the adjacency
lists and keep all working state local to the call.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from pathgraph.algorithms.spf import dijkstra
from pathgraph.algorithms.traversal import bfs, dfs
from pathgraph.algorithms.base import Adjacency, Cost, NodeID, Path
from pathgraph.errors import OutOfRange
from pathgraph.logging import get_logger

logger = get_logger(__name__)


class WeightedGraph:
    """Undirected graph with non-negative edge weights and a fixed node count.

    Attributes:
        _adj: Per-node list of ``(neighbor, weight)`` pairs in insertion order.
        _edges: Every inserted edge as ``(from, to, weight)`` in insertion order.
    """

    def __init__(self, node_count: int) -> None:
        """Allocate ``node_count`` empty adjacency lists.

        Args:
            node_count: Number of nodes; ids are ``0 .. node_count - 1``.

        Raises:
            ValueError: If ``node_count`` is not a non-negative integer.
        """
        if isinstance(node_count, bool) or not isinstance(node_count, int):
            raise ValueError(f"node_count must be an integer, got {node_count!r}")
        if node_count < 0:
            raise ValueError(f"node_count must be non-negative, got {node_count}")
        self._node_count = node_count
        self._adj: List[List[Adjacency]] = [[] for _ in range(node_count)]
        self._edges: List[Tuple[NodeID, NodeID, Cost]] = []
        logger.debug(f"Created graph with {node_count} nodes")

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(node_count={self._node_count}, "
            f"edge_count={len(self._edges)})"
        )

    def __len__(self) -> int:
        return self._node_count

    @property
    def node_count(self) -> int:
        return self._node_count

    @property
    def edge_count(self) -> int:
        """Number of inserted edges, duplicates included."""
        return len(self._edges)

    def check_node(self, node: NodeID) -> None:
        """Raise `OutOfRange` unless ``node`` is a valid node id."""
        if (
            isinstance(node, bool)
            or not isinstance(node, int)
            or not 0 <= node < self._node_count
        ):
            raise OutOfRange(node, self._node_count, "node")

    #
    # Mutation
    #
    def add_edge(self, from_node: NodeID, to_node: NodeID, weight: Cost) -> None:
        """Insert an undirected edge between ``from_node`` and ``to_node``.

        Appends ``(to_node, weight)`` to the adjacency of ``from_node`` and
        ``(from_node, weight)`` to the adjacency of ``to_node``. The graph is
        left untouched if any argument is rejected.

        Args:
            from_node: One endpoint.
            to_node: The other endpoint.
            weight: Non-negative edge weight.

        Raises:
            OutOfRange: If either endpoint is not in ``[0, node_count)``.
            ValueError: If ``weight`` is negative or NaN.
        """
        self.check_node(from_node)
        self.check_node(to_node)
        # NaN compares false both ways and would poison the heap order
        if not weight >= 0:
            raise ValueError(f"Edge weight must be a non-negative number, got {weight}")

        self._adj[from_node].append((to_node, weight))
        self._adj[to_node].append((from_node, weight))
        self._edges.append((from_node, to_node, weight))

    #
    # Read access
    #
    def neighbors(self, node: NodeID) -> List[Adjacency]:
        """Return a copy of the ``(neighbor, weight)`` list of ``node``.

        Raises:
            OutOfRange: If ``node`` is not a valid node id.
        """
        self.check_node(node)
        return list(self._adj[node])

    def adjacency(self, node: NodeID) -> List[Adjacency]:
        """Return the live adjacency list of ``node`` without validation.

        Intended for the search algorithms, which validate their endpoints
        once and then only read the lists.
        """
        return self._adj[node]

    def edges(self) -> Iterator[Tuple[NodeID, NodeID, Cost]]:
        """Yield every inserted edge once as ``(from, to, weight)``."""
        yield from self._edges

    #
    # Path queries
    #
    def dfs(self, src: NodeID, dst: NodeID) -> Path:
        """Depth-first path from ``src`` to ``dst``.

        See `pathgraph.algorithms.traversal.dfs`.
        """
        return dfs(self, src, dst)

    def bfs(self, src: NodeID, dst: NodeID) -> Path:
        """Fewest-edges path from ``src`` to ``dst``.

        See `pathgraph.algorithms.traversal.bfs`.
        """
        return bfs(self, src, dst)

    def dijkstra(self, src: NodeID, dst: NodeID) -> Tuple[Cost, Path]:
        """Minimum total weight path from ``src`` to ``dst``.

        See `pathgraph.algorithms.spf.dijkstra`.
        """
        return dijkstra(self, src, dst)
