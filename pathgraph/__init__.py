"""pathgraph: path search on weighted graphs, plus a range-sum segment tree.

Primary API:
    WeightedGraph - fixed-size undirected graph with non-negative weights
    dfs(), bfs(), dijkstra() - path queries (also available as graph methods)
    SegmentTree - range sums with point updates
    OutOfRange, NoPathFound - failures raised by the above

Example:
    from pathgraph import WeightedGraph

    graph = WeightedGraph(3)
    graph.add_edge(0, 1, 4)
    graph.add_edge(1, 2, 1)

    graph.bfs(0, 2)        # [0, 1, 2]
    graph.dijkstra(0, 2)   # (5, [0, 1, 2])
"""

from __future__ import annotations

from pathgraph import cli, logging
from pathgraph.algorithms import bfs, dfs, dijkstra
from pathgraph.errors import NoPathFound, OutOfRange, PathGraphError
from pathgraph.graph.convert import from_networkx, to_networkx
from pathgraph.graph.weighted_graph import WeightedGraph
from pathgraph.segment_tree import SegmentTree

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Graph
    "WeightedGraph",
    "dfs",
    "bfs",
    "dijkstra",
    # Segment tree
    "SegmentTree",
    # Errors
    "PathGraphError",
    "OutOfRange",
    "NoPathFound",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
