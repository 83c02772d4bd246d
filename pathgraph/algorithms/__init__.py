"""Path search algorithms over `WeightedGraph`.

The submodules `spf` and `traversal` are not shadowed by re-exported
functions, so ``from pathgraph.algorithms import spf`` yields the module.
"""

from pathgraph.algorithms.paths import resolve_path
from pathgraph.algorithms.spf import dijkstra
from pathgraph.algorithms.traversal import bfs, dfs, traverse

__all__ = ["bfs", "dfs", "dijkstra", "resolve_path", "traverse"]
