"""
Dense DijkstraEngine implementation for the route network.

Selects the closest unsettled vertex by a linear scan instead of a heap:
the graphs are dense adjacency matrices, so O(V^2) is already the cost of
reading every edge once.
"""

from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Dict, List, Optional, Tuple
import math

from algorithms import DijkstraEngine
from errors import NoRouteError, VertexNotFoundError
from graph import Graph, Vertex
from paths import Path


class DenseDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra over non-negative integer weights.

    Complexity:
        O(V^2) per source. Ties between equally close vertices are settled
        in the graph's vertex order, so results are deterministic.
    """

    def shortest_path_costs(self, graph: Graph, source: Vertex) -> Dict[Vertex, int]:
        """
        Compute only the cost map for all reachable vertices from source.
        """
        dist, _prev = self.shortest_paths(graph, source)
        return dist

    def shortest_paths(
        self, graph: Graph, source: Vertex
    ) -> Tuple[Dict[Vertex, int], Dict[Vertex, Vertex]]:
        """
        Dijkstra variant that also records predecessors for path reconstruction.

        Unreachable vertices are absent from both maps; the predecessor map
        omits the source itself because it has no parent.
        """
        if not graph.has_vertex(source):
            raise VertexNotFoundError(source)

        order = list(graph.vertices())
        tentative: Dict[Vertex, float] = {v: math.inf for v in order}
        tentative[source] = 0
        prev: Dict[Vertex, Vertex] = {}
        settled: Dict[Vertex, int] = {}

        while len(settled) < len(order):
            u: Optional[Vertex] = None
            d_u = math.inf
            for v in order:
                if v not in settled and tentative[v] < d_u:
                    u, d_u = v, tentative[v]
            # Everything left is unreachable.
            if u is None:
                break

            settled[u] = int(d_u)
            for v, w in graph.outgoing(u).items():
                if v in settled:
                    continue
                alt = d_u + w
                if alt < tentative[v]:
                    tentative[v] = alt
                    prev[v] = u

        return settled, prev

    def path_distance(self, graph: Graph, source: Vertex, destination: Vertex) -> int:
        """Shortest distance source -> destination; 0 when they are the same vertex."""
        if not graph.has_vertex(destination):
            raise VertexNotFoundError(destination)
        dist = self.shortest_path_costs(graph, source)
        if destination not in dist:
            raise NoRouteError(source, destination)
        return dist[destination]

    def shortest_path(self, graph: Graph, source: Vertex, destination: Vertex) -> Path:
        """Shortest route source -> destination with its vertices."""
        if not graph.has_vertex(destination):
            raise VertexNotFoundError(destination)
        dist, prev = self.shortest_paths(graph, source)
        if destination not in dist:
            raise NoRouteError(source, destination)
        return Path(_walk_back(prev, source, destination), dist[destination])

    def shortest_cyclic_distance(self, graph: Graph, vertex: Vertex) -> int:
        """
        Weight of the lightest walk that leaves vertex and comes back to it.
        """
        return self.shortest_cycle(graph, vertex).weight

    def shortest_cycle(self, graph: Graph, vertex: Vertex) -> Path:
        """
        Lightest cycle through vertex, closing vertex included.

        Runs one single-source search per outgoing neighbour n and keeps the
        best w(vertex -> n) + d(n -> vertex).
        """
        if not graph.has_vertex(vertex):
            raise VertexNotFoundError(vertex)

        best: Optional[Path] = None
        for neighbour, edge_weight in graph.outgoing(vertex).items():
            dist, prev = self.shortest_paths(graph, neighbour)
            if vertex not in dist:
                continue
            weight = edge_weight + dist[vertex]
            if best is None or weight < best.weight:
                back = _walk_back(prev, neighbour, vertex)
                best = Path((vertex,) + back, weight)

        if best is None:
            raise NoRouteError(vertex, vertex)
        return best

    def all_pairs_shortest(
        self,
        graph: Graph,
        max_workers: int = 4,
        executor: Optional[Executor] = None,
    ) -> Dict[Vertex, Dict[Vertex, int]]:
        """
        Shortest distances between every ordered pair of reachable vertices.

        Parameters
        ----------
        graph:
            Graph to read. It must not be mutated until the call returns; take
            a copy first if other threads keep editing it.
        max_workers:
            Size of the internal :class:`ThreadPoolExecutor`.
        executor:
            Optional external executor. When provided, ``max_workers`` is
            ignored and the caller owns its lifecycle.

        Each single-source run only touches its own distance map, so the runs
        are submitted independently and gathered in vertex order.
        """
        sources = list(graph.vertices())
        if executor is None:
            with ThreadPoolExecutor(max_workers=max_workers) as pool:
                return self._all_pairs_with_executor(graph, sources, pool)
        return self._all_pairs_with_executor(graph, sources, executor)

    def _all_pairs_with_executor(
        self, graph: Graph, sources: List[Vertex], executor: Executor
    ) -> Dict[Vertex, Dict[Vertex, int]]:
        futures = {source: executor.submit(self.shortest_path_costs, graph, source) for source in sources}
        return {source: future.result() for source, future in futures.items()}


def _walk_back(prev: Dict[Vertex, Vertex], source: Vertex, destination: Vertex) -> Tuple[Vertex, ...]:
    path = [destination]
    while path[-1] != source:
        path.append(prev[path[-1]])
    return tuple(reversed(path))
