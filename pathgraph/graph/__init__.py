"""Graph primitives and helpers.

This package provides the undirected weighted graph type `WeightedGraph` and
the `convert` module for NetworkX interchange.
"""

from pathgraph.graph.weighted_graph import WeightedGraph

__all__ = ["WeightedGraph"]
