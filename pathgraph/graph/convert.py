"""Conversion between `WeightedGraph` and NetworkX graphs.

`to_networkx` emits one multi-edge per inserted edge so that parallel edges
survive the round trip. `from_networkx` accepts any undirected NetworkX graph
whose nodes are exactly the integers ``0 .. n - 1``.
"""

from __future__ import annotations

from typing import Any

import networkx as nx

from pathgraph.algorithms.base import Cost
from pathgraph.graph.weighted_graph import WeightedGraph


def to_networkx(graph: WeightedGraph, weight: str = "weight") -> nx.MultiGraph:
    """Convert a WeightedGraph to a NetworkX MultiGraph.

    Args:
        graph: The graph to convert.
        weight: Edge attribute name that receives the edge weight.

    Returns:
        A MultiGraph with nodes ``0 .. node_count - 1`` and one edge per
        `WeightedGraph.add_edge` call, in insertion order.
    """
    nx_graph = nx.MultiGraph()
    nx_graph.add_nodes_from(range(graph.node_count))
    for u, v, w in graph.edges():
        nx_graph.add_edge(u, v, **{weight: w})
    return nx_graph


def from_networkx(
    nx_graph: Any,
    weight: str = "weight",
    default_weight: Cost = 1,
) -> WeightedGraph:
    """Build a WeightedGraph from an undirected NetworkX graph.

    Args:
        nx_graph: ``nx.Graph`` or ``nx.MultiGraph`` with integer nodes
            ``0 .. n - 1``.
        weight: Edge attribute holding the weight.
        default_weight: Weight used for edges without the attribute.

    Returns:
        A new WeightedGraph. Edges are added in NetworkX edge iteration order.

    Raises:
        ValueError: If the graph is directed, or its nodes are not the
            contiguous integers starting at 0, or a weight is negative.
    """
    if nx_graph.is_directed():
        raise ValueError("Directed graphs are not supported.")

    node_count = nx_graph.number_of_nodes()
    if set(nx_graph.nodes) != set(range(node_count)):
        raise ValueError(
            f"Graph nodes must be the integers 0..{node_count - 1}; "
            "relabel them first (e.g. nx.convert_node_labels_to_integers)."
        )

    graph = WeightedGraph(node_count)
    for u, v, data in nx_graph.edges(data=True):
        graph.add_edge(u, v, data.get(weight, default_weight))
    return graph
