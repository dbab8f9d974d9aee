"""
Route queries over a site network.

Thin functions that answer the three questions asked of a network (distance
along a route, number of routes, shortest route) using the graph store and
the path engines.
"""

from typing import Optional, Sequence

from adjacency_matrix_graph import AdjacencyMatrixGraph
from algorithms import PathEnumerator
from cyclic_paths import CyclicPathCombiner, CyclicPathFinder
from dijkstra_engine import DenseDijkstraEngine
from graph import Graph, Vertex
from path_enumerator import DepthFirstPathEnumerator
from paths import PathMap


def route_distance(graph: AdjacencyMatrixGraph, route: Sequence[Vertex]) -> str:
    """Total distance along route, or NO SUCH ROUTE when a hop is missing."""
    return graph.sum_consecutive_weights(route)


def count_routes(
    graph: Graph,
    source: Vertex,
    destination: Vertex,
    *,
    exact_stops: Optional[int] = None,
    max_stops: Optional[int] = None,
    include_cycles: bool = False,
    enumerator: Optional[PathEnumerator] = None,
) -> int:
    """
    Number of distinct routes source -> destination.

    include_cycles also counts routes that loop once around destination
    before finishing. Stops are the number of hops in a route.
    """
    enumerator = enumerator or DepthFirstPathEnumerator()
    paths = enumerator.all_paths(graph, source, destination, include_cycles=include_cycles)
    return _count_by_stops(paths, exact_stops, max_stops)


def count_cyclic_routes(
    graph: Graph,
    vertex: Vertex,
    *,
    exact_stops: Optional[int] = None,
    max_stops: Optional[int] = None,
    enumerator: Optional[PathEnumerator] = None,
) -> int:
    """Number of elementary cycles through vertex, optionally filtered by stops."""
    finder = CyclicPathFinder(enumerator or DepthFirstPathEnumerator())
    cycles = finder.all_cyclic_paths(graph, vertex, include_source=True)
    return _count_by_stops(cycles, exact_stops, max_stops)


def count_limited_cyclic_routes(
    graph: Graph,
    vertex: Vertex,
    limit: int,
    enumerator: Optional[PathEnumerator] = None,
) -> int:
    """Number of cycle compositions through vertex lighter than limit."""
    combiner = CyclicPathCombiner(CyclicPathFinder(enumerator or DepthFirstPathEnumerator()))
    return len(combiner.limited_cyclic_paths(graph, vertex, limit))


def shortest_distance(
    graph: Graph,
    source: Vertex,
    destination: Vertex,
    engine: Optional[DenseDijkstraEngine] = None,
) -> int:
    """
    Length of the shortest route; a round trip when source equals destination.
    """
    engine = engine or DenseDijkstraEngine()
    if source == destination:
        return engine.shortest_cyclic_distance(graph, source)
    return engine.path_distance(graph, source, destination)


def _count_by_stops(paths: PathMap, exact_stops: Optional[int], max_stops: Optional[int]) -> int:
    count = 0
    for path in paths:
        stops = len(path) - 1
        if exact_stops is not None and stops != exact_stops:
            continue
        if max_stops is not None and stops > max_stops:
            continue
        count += 1
    return count
