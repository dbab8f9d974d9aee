"""
Depth-first enumeration of routes between two vertices.

The number of simple paths grows exponentially with graph density, so these
calls are meant for the small site networks the route queries work over.
"""

from typing import AbstractSet, Tuple

from algorithms import PathEnumerator
from cyclic_paths import CyclicPathFinder
from errors import VertexNotFoundError
from graph import Graph, Vertex
from paths import PathMap


class DepthFirstPathEnumerator(PathEnumerator):
    """
    Recursive DFS that records a path each time it reaches the destination.

    Each recursive call returns the paths found below it and the caller merges
    them, so no result dictionary is shared between frames.
    """

    def all_simple_paths(self, graph: Graph, source: Vertex, destination: Vertex) -> PathMap:
        _require_vertices(graph, source, destination)
        return self._explore(graph, source, destination, (source,), 0, frozenset())

    def all_paths(
        self,
        graph: Graph,
        source: Vertex,
        destination: Vertex,
        include_cycles: bool = True,
    ) -> PathMap:
        """
        Simple paths from source to destination.

        With include_cycles, every simple path is additionally extended by each
        elementary cycle through destination, so a route may loop once around
        the destination before finishing.
        """
        paths = self.all_simple_paths(graph, source, destination)
        if not include_cycles:
            return paths

        cycles = CyclicPathFinder(self).all_cyclic_paths(graph, destination)
        spliced: PathMap = {}
        for cycle, cycle_weight in cycles.items():
            for path, weight in paths.items():
                spliced[path + cycle] = weight + cycle_weight

        paths.update(spliced)
        return paths

    def _explore(
        self,
        graph: Graph,
        current: Vertex,
        destination: Vertex,
        path: Tuple[Vertex, ...],
        weight: int,
        visited: AbstractSet[Vertex],
    ) -> PathMap:
        # Reaching the destination ends the branch: going further would revisit it.
        if current == destination:
            return {path: weight}

        visited = visited | {current}
        found: PathMap = {}
        for neighbour, edge_weight in graph.outgoing(current).items():
            if neighbour in visited:
                continue
            found.update(
                self._explore(
                    graph,
                    neighbour,
                    destination,
                    path + (neighbour,),
                    weight + edge_weight,
                    visited,
                )
            )
        return found


def _require_vertices(graph: Graph, *vertices: Vertex) -> None:
    for vertex in vertices:
        if not graph.has_vertex(vertex):
            raise VertexNotFoundError(vertex)
