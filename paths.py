"""
Value types shared by the graph store and the path algorithms.
"""

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from graph import Graph, Vertex

# Returned by sum_consecutive_weights when a hop has no edge.
NO_SUCH_ROUTE = "NO SUCH ROUTE"

# Enumeration results: vertex sequence -> total weight.
PathMap = Dict[Tuple[Vertex, ...], int]


@dataclass(frozen=True)
class WeightedEdge:
    """
    Directed edge source -> destination with its weight.
    """
    source: Vertex
    destination: Vertex
    weight: int


@dataclass(frozen=True)
class Path:
    """
    Ordered vertex sequence plus the sum of its consecutive edge weights.
    """
    vertices: Tuple[Vertex, ...]
    weight: int

    @property
    def stops(self) -> int:
        return len(self.vertices) - 1


def path_weight(graph: Graph, vertices: Sequence[Vertex]) -> int:
    """Sum the edge weights between consecutive vertices; KeyError on a missing hop."""
    return sum(graph.outgoing(u)[v] for u, v in zip(vertices, vertices[1:]))
