"""Configuration classes for pathgraph components."""

from dataclasses import dataclass, field
from typing import List, Tuple

from pathgraph.algorithms.base import Cost, NodeID
from pathgraph.graph.weighted_graph import WeightedGraph


@dataclass
class ReferenceGraphConfig:
    """Six-node reference graph used by the demo command and the tests.

    ::

             +---[9]---4
             |         |
             |        [3]
             |         |
             5---[1]---2---[11]---3
             |         |          |
           [14]      [10]         |
             |         |          |
             0---[7]---1---[20]---+
    """

    node_count: int = 6

    # (from, to, weight)
    edges: List[Tuple[NodeID, NodeID, Cost]] = field(
        default_factory=lambda: [
            (0, 1, 7),
            (0, 5, 14),
            (1, 2, 10),
            (1, 3, 20),
            (2, 3, 11),
            (2, 5, 1),
            (2, 4, 3),
            (4, 5, 9),
        ]
    )

    # Default query endpoints for the demo
    src: NodeID = 0
    dst: NodeID = 3

    def build(self) -> WeightedGraph:
        """Return a new graph populated with ``edges``."""
        graph = WeightedGraph(self.node_count)
        for from_node, to_node, weight in self.edges:
            graph.add_edge(from_node, to_node, weight)
        return graph


@dataclass
class SegmentTreeDemoConfig:
    """Values and queries for the segment tree demo."""

    values: List[int] = field(default_factory=lambda: [1, 3, 5, 7, 9, 11])

    # Inclusive range queried before and after the update
    query: Tuple[int, int] = (0, 1)

    # (index, new_value) applied between the two queries
    update: Tuple[int, int] = (1, 9)

    # The last value is rewritten so that the whole range sums to this
    target_total: int = 100


# Global configuration instances
REFERENCE_GRAPH = ReferenceGraphConfig()
SEGMENT_TREE_DEMO = SegmentTreeDemoConfig()
