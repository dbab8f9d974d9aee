"""
Elementary cycles through a vertex, and bounded compositions of them.
"""

from typing import TYPE_CHECKING

from errors import VertexNotFoundError
from graph import Graph, Vertex
from paths import PathMap

if TYPE_CHECKING:
    from algorithms import PathEnumerator


class CyclicPathFinder:
    """
    Builds the elementary cycles through a vertex from simple paths back to it.
    """

    def __init__(self, enumerator: "PathEnumerator") -> None:
        self._enumerator = enumerator

    def all_cyclic_paths(self, graph: Graph, source: Vertex, include_source: bool = False) -> PathMap:
        """
        Every cycle that leaves source and first returns to it.

        For each neighbour n of source, each simple path n -> ... -> source is a
        cycle of weight w(source -> n) + weight(path). The stored sequence is
        the path itself, so it ends with source; include_source also prefixes
        it with source.
        """
        if not graph.has_vertex(source):
            raise VertexNotFoundError(source)

        cycles: PathMap = {}
        for neighbour, edge_weight in graph.outgoing(source).items():
            # Plain simple paths only: asking for cycle-extended paths here
            # would recurse back into this finder.
            back = self._enumerator.all_simple_paths(graph, neighbour, source)
            for path, weight in back.items():
                key = (source,) + path if include_source else path
                cycles[key] = weight + edge_weight
        return cycles


class CyclicPathCombiner:
    """
    Concatenates elementary cycles into longer walks under a weight bound.

    Result sets grow combinatorially with the number of light cycles; limit is
    the only bound on the work done.
    """

    def __init__(self, finder: CyclicPathFinder) -> None:
        self._finder = finder

    def limited_cyclic_paths(self, graph: Graph, source: Vertex, limit: int) -> PathMap:
        """
        Elementary cycles through source plus every concatenation of them,
        in any order and with repetition, whose total weight is below limit.

        Each round extends the previous round's combinations by one more
        elementary cycle. Cycle weights are positive, so the lightest
        combination grows every round and the expansion stops once a round
        produces nothing under the limit.
        """
        cycles = self._finder.all_cyclic_paths(graph, source)
        combined: PathMap = dict(cycles)

        frontier = cycles
        while frontier:
            frontier = _combine_under_limit(frontier, cycles, limit)
            combined.update(frontier)
        return combined


def _combine_under_limit(prefixes: PathMap, suffixes: PathMap, limit: int) -> PathMap:
    result: PathMap = {}
    for prefix, prefix_weight in prefixes.items():
        for suffix, suffix_weight in suffixes.items():
            total = prefix_weight + suffix_weight
            if total < limit:
                result[prefix + suffix] = total
    return result
