"""
Build a site network from a list of one-way routes.
"""

from typing import Iterable, List, Optional, Sequence, Tuple
import logging

from adjacency_matrix_graph import AdjacencyMatrixGraph
from graph import Vertex

logger = logging.getLogger(__name__)

RouteTriple = Tuple[Vertex, Vertex, int]


def build_graph(
    routes: Iterable[RouteTriple],
    capacity: Optional[int] = None,
    vertices: Optional[Sequence[Vertex]] = None,
) -> AdjacencyMatrixGraph:
    """
    Create a graph holding every site and route.

    Args:
        routes: (source, destination, weight) triples.
        capacity: vertex slots to allocate; defaults to the number of sites.
        vertices: explicit site order. Sites only mentioned in routes are
            appended after these in first-seen order.

    Routes that repeat an existing (source, destination) pair, or whose sites
    did not fit in the graph, are skipped with a warning.
    """
    routes = list(routes)
    sites = _collect_sites(routes, vertices or [])

    graph = AdjacencyMatrixGraph(capacity if capacity is not None else len(sites))
    if sites:
        graph.add_vertices(sites)
    if graph.vertices_count < len(sites):
        logger.warning(
            "Graph capacity %d holds only %d of %d sites",
            graph.capacity,
            graph.vertices_count,
            len(sites),
        )

    for source, destination, weight in routes:
        if not graph.add_edge(source, destination, weight):
            logger.warning("Skipped route %r -> %r (%r)", source, destination, weight)
    return graph


def _collect_sites(routes: List[RouteTriple], vertices: Sequence[Vertex]) -> List[Vertex]:
    sites: List[Vertex] = []
    seen = set()
    for site in [*vertices, *(v for source, destination, _ in routes for v in (source, destination))]:
        if site not in seen:
            seen.add(site)
            sites.append(site)
    return sites
