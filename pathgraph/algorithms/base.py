from __future__ import annotations

from typing import Dict, List, Tuple, Union

#: Nodes are identified by integers in ``[0, node_count)``.
NodeID = int

#: Non-negative edge weight or accumulated path cost.
Cost = Union[int, float]

#: Ordered node ids from source to destination, both inclusive.
Path = List[NodeID]

#: Per-query map from a node to the node it was first reached from.
#: A node missing from the map has no predecessor.
PredMap = Dict[NodeID, NodeID]

#: One adjacency entry: (neighbor, weight).
Adjacency = Tuple[NodeID, Cost]
