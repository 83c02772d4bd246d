"""Global pytest configuration and shared sample graphs."""

from __future__ import annotations

import random
from typing import Callable, List, Tuple

import pytest

from pathgraph.config import ReferenceGraphConfig
from pathgraph.graph.weighted_graph import WeightedGraph


def _edge_weight(graph: WeightedGraph, u: int, v: int) -> int:
    """Return the lightest weight among the parallel edges u-v."""
    weights = [w for nbr, w in graph.neighbors(u) if nbr == v]
    assert weights, f"{u}-{v} is not an edge"
    return min(weights)


@pytest.fixture
def path_weight():
    """Total weight of a path, taking the lightest of any parallel edges."""

    def weight(graph: WeightedGraph, path: List[int]) -> int:
        return sum(_edge_weight(graph, u, v) for u, v in zip(path, path[1:]))

    return weight


@pytest.fixture
def check_path():
    """Assert that a path runs src->dst over existing edges."""

    def check(graph: WeightedGraph, path: List[int], src: int, dst: int) -> None:
        assert path[0] == src
        assert path[-1] == dst
        for u, v in zip(path, path[1:]):
            _edge_weight(graph, u, v)

    return check


@pytest.fixture
def reference_graph():
    # Weights:
    #       +---[9]---4
    #       |         |
    #       |        [3]
    #       |         |
    #       5---[1]---2---[11]---3
    #       |         |          |
    #     [14]      [10]         |
    #       |         |          |
    #       0---[7]---1---[20]---+
    return ReferenceGraphConfig().build()


@pytest.fixture
def line1():
    # 0 ---[1]--- 1 ---[1]--- 2 ---[1]--- 3
    g = WeightedGraph(4)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 1)
    g.add_edge(2, 3, 1)
    return g


@pytest.fixture
def square1():
    # Cheap long way round vs. expensive shortcut:
    #
    #       [1]        [1]
    #   0 ------ 1 ------- 2
    #   |                  |
    #   | [10]          [1]|
    #   |                  |
    #   4 ------ 5 ------- 3
    #       [1]        [1]
    #
    # plus a direct 0-3 edge with weight 10.
    g = WeightedGraph(6)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 1)
    g.add_edge(2, 3, 1)
    g.add_edge(0, 4, 10)
    g.add_edge(4, 5, 1)
    g.add_edge(5, 3, 1)
    g.add_edge(0, 3, 10)
    return g


@pytest.fixture
def parallel1():
    # Two parallel 0-1 edges with different weights.
    #
    #      [5]
    #   0 ===== 1 ---[1]--- 2
    #      [2]
    g = WeightedGraph(3)
    g.add_edge(0, 1, 5)
    g.add_edge(0, 1, 2)
    g.add_edge(1, 2, 1)
    return g


@pytest.fixture
def disconnected1():
    # Two components and an isolated node:
    #   0 --- 1      2 --- 3      4
    g = WeightedGraph(5)
    g.add_edge(0, 1, 1)
    g.add_edge(2, 3, 1)
    return g


RandomGraphFactory = Callable[[int, int, int], Tuple[WeightedGraph, random.Random]]


@pytest.fixture
def random_graph() -> RandomGraphFactory:
    """Factory for connected random graphs: ``random_graph(seed, nodes, extra_edges)``.

    A random spanning tree keeps every node reachable; ``extra_edges`` more
    edges (parallel edges and self-loops allowed) are added on top.
    """

    def build(seed: int, nodes: int, extra_edges: int):
        rng = random.Random(seed)
        g = WeightedGraph(nodes)
        order = list(range(nodes))
        rng.shuffle(order)
        for i in range(1, nodes):
            g.add_edge(order[i], order[rng.randrange(i)], rng.randint(0, 20))
        for _ in range(extra_edges):
            g.add_edge(rng.randrange(nodes), rng.randrange(nodes), rng.randint(0, 20))
        return g, rng

    return build
