"""
Concrete directed, weighted graph backed by a dense adjacency matrix.

Implements the Graph interface over a fixed number of vertex slots. Removed
vertices leave an empty slot behind that the next insertion reuses, so slot
indices stay stable for every other vertex.
"""

from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence
import logging
import numbers

import numpy as np

from errors import (
    EdgeNotFoundError,
    InvalidWeightError,
    NullInputError,
    VertexNotFoundError,
)
from graph import Graph, Vertex
from paths import NO_SUCH_ROUTE, WeightedEdge

logger = logging.getLogger(__name__)

# A zero cell means "no edge"; real edges always carry a positive weight.
EMPTY_EDGE_SLOT = 0


class EdgeSequence:
    """
    Lazy, re-iterable view over a run of edges.

    Every iteration rescans the matrix, so the graph must not change while a
    pass is in progress.
    """

    def __init__(self, produce: Callable[[], Iterator[WeightedEdge]]) -> None:
        self._produce = produce

    def __iter__(self) -> Iterator[WeightedEdge]:
        return self._produce()


class AdjacencyMatrixGraph(Graph):
    """
    Directed, weighted graph with O(1) edge lookup and O(V) neighbour scans.

    Complexity:
        add/remove/has edge: O(1)
        neighbours, incoming/outgoing edges: O(capacity)
        remove_vertex: O(capacity)
    """

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._capacity = capacity
        self._reset()

    def _reset(self) -> None:
        self._edges_count = 0
        self._vertices: List[Optional[Vertex]] = []
        self._indices: Dict[Vertex, int] = {}
        self._matrix = np.full((self._capacity, self._capacity), EMPTY_EDGE_SLOT, dtype=np.int64)
        self._first_inserted: Optional[Vertex] = None

    # --- Properties ------------------------------------------------------------

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def vertices_count(self) -> int:
        return len(self._indices)

    @property
    def edges_count(self) -> int:
        return self._edges_count

    @property
    def first_inserted(self) -> Optional[Vertex]:
        """Vertex inserted while the graph was empty, if any."""
        return self._first_inserted

    @property
    def is_directed(self) -> bool:
        return True

    @property
    def is_weighted(self) -> bool:
        return True

    # --- Vertex mutation -------------------------------------------------------

    def add_vertex(self, vertex: Vertex) -> bool:
        """
        Insert vertex into the lowest free slot.

        Returns False when the graph is full or already holds the vertex.
        """
        if vertex is None:
            raise NullInputError("None cannot be used as a vertex")
        if self.vertices_count >= self._capacity:
            logger.debug("Capacity %d reached, cannot add %r", self._capacity, vertex)
            return False
        if vertex in self._indices:
            logger.debug("Vertex %r already present", vertex)
            return False

        if self.vertices_count == 0:
            self._first_inserted = vertex

        try:
            index = self._vertices.index(None)
            self._vertices[index] = vertex
        except ValueError:
            index = len(self._vertices)
            self._vertices.append(vertex)

        self._indices[vertex] = index
        return True

    def add_vertices(self, collection: Optional[Iterable[Vertex]]) -> None:
        """Add each vertex in collection, skipping duplicates and overflow."""
        if collection is None:
            raise NullInputError("add_vertices requires a collection of vertices")
        items = list(collection)
        if not items:
            raise NullInputError("add_vertices requires at least one vertex")

        for vertex in items:
            self.add_vertex(vertex)

    def remove_vertex(self, vertex: Vertex) -> bool:
        """
        Lazily delete vertex and every edge touching it.

        The slot is left empty and handed to the next add_vertex call.
        """
        if self.vertices_count == 0:
            return False
        index = self._indices.pop(vertex, None)
        if index is None:
            return False

        self._vertices[index] = None

        outgoing = self._matrix[index, :] != EMPTY_EDGE_SLOT
        incoming = self._matrix[:, index] != EMPTY_EDGE_SLOT
        removed = int(np.count_nonzero(outgoing)) + int(np.count_nonzero(incoming))
        # A self-loop shows up in both the row and the column.
        if self._matrix[index, index] != EMPTY_EDGE_SLOT:
            removed -= 1

        self._matrix[index, :] = EMPTY_EDGE_SLOT
        self._matrix[:, index] = EMPTY_EDGE_SLOT
        self._edges_count -= removed
        return True

    # --- Edge mutation ---------------------------------------------------------

    def add_edge(self, source: Vertex, destination: Vertex, weight: int) -> bool:
        """
        Connect source -> destination with weight.

        Returns False for the zero sentinel, a missing vertex or an existing
        edge; existing weights are never overwritten.
        """
        if isinstance(weight, bool) or not isinstance(weight, numbers.Integral) or weight < 0:
            raise InvalidWeightError(f"Edge weight must be a positive integer, got {weight!r}")
        if weight == EMPTY_EDGE_SLOT:
            logger.debug("Rejected zero-weight edge %r -> %r", source, destination)
            return False

        src = self._indices.get(source)
        dst = self._indices.get(destination)
        if src is None or dst is None:
            return False
        if self._edge_exists(src, dst):
            logger.debug("Edge %r -> %r already present", source, destination)
            return False

        self._matrix[src, dst] = weight
        self._edges_count += 1
        return True

    def remove_edge(self, source: Vertex, destination: Vertex) -> bool:
        src = self._indices.get(source)
        dst = self._indices.get(destination)
        if src is None or dst is None:
            return False
        if not self._edge_exists(src, dst):
            return False

        self._matrix[src, dst] = EMPTY_EDGE_SLOT
        self._edges_count -= 1
        return True

    def clear(self) -> None:
        """Drop every vertex and edge; capacity is kept."""
        self._reset()

    def copy(self) -> "AdjacencyMatrixGraph":
        """Independent snapshot for read-only batches while this graph keeps changing."""
        other = AdjacencyMatrixGraph(self._capacity)
        other._edges_count = self._edges_count
        other._vertices = list(self._vertices)
        other._indices = dict(self._indices)
        other._matrix = self._matrix.copy()
        other._first_inserted = self._first_inserted
        return other

    # --- Queries ---------------------------------------------------------------

    def vertices(self) -> Iterable[Vertex]:
        return [v for v in self._vertices if v is not None]

    def has_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._indices

    def has_edge(self, source: Vertex, destination: Vertex) -> bool:
        src = self._indices.get(source)
        dst = self._indices.get(destination)
        return src is not None and dst is not None and self._edge_exists(src, dst)

    def get_edge(self, source: Vertex, destination: Vertex) -> WeightedEdge:
        src = self._indices.get(source)
        dst = self._indices.get(destination)
        if src is None or dst is None or not self._edge_exists(src, dst):
            raise EdgeNotFoundError(source, destination)
        return WeightedEdge(source, destination, int(self._matrix[src, dst]))

    def get_edge_weight(self, source: Vertex, destination: Vertex) -> int:
        return self.get_edge(source, destination).weight

    def edges(self) -> EdgeSequence:
        """All edges, grouped by source in slot order."""
        return EdgeSequence(self._all_edges)

    def outgoing_edges(self, vertex: Vertex) -> EdgeSequence:
        """Edges leaving vertex in increasing slot order."""
        index = self._require_index(vertex)
        return EdgeSequence(lambda: self._outgoing_edges(index))

    def incoming_edges(self, vertex: Vertex) -> EdgeSequence:
        """Edges entering vertex in increasing slot order."""
        index = self._require_index(vertex)
        return EdgeSequence(lambda: self._incoming_edges(index))

    def neighbours(self, vertex: Vertex) -> List[Vertex]:
        """Directly reachable vertices; empty for an unknown vertex."""
        index = self._indices.get(vertex)
        if index is None:
            return []
        return [edge.destination for edge in self._outgoing_edges(index)]

    def neighbours_map(self, vertex: Vertex) -> Optional[Dict[Vertex, int]]:
        """Neighbour -> edge weight, or None when vertex is not in the graph."""
        index = self._indices.get(vertex)
        if index is None:
            return None
        return {edge.destination: edge.weight for edge in self._outgoing_edges(index)}

    def outgoing(self, vertex: Vertex) -> Mapping[Vertex, int]:
        return self.neighbours_map(vertex) or {}

    def sum_consecutive_weights(self, vertices: Sequence[Vertex]) -> str:
        """
        Total weight of the hops along vertices, as text.

        Every vertex is validated before any hop is inspected. The first hop
        without an edge short-circuits to NO_SUCH_ROUTE.
        """
        if len(vertices) < 2:
            raise ValueError("A route needs at least two vertices")
        indices = [self._require_index(v) for v in vertices]

        total = 0
        for src, dst in zip(indices, indices[1:]):
            if not self._edge_exists(src, dst):
                return NO_SUCH_ROUTE
            total += int(self._matrix[src, dst])
        return str(total)

    # --- Helpers ---------------------------------------------------------------

    def _require_index(self, vertex: Vertex) -> int:
        index = self._indices.get(vertex)
        if index is None:
            raise VertexNotFoundError(vertex)
        return index

    def _edge_exists(self, src: int, dst: int) -> bool:
        return bool(self._matrix[src, dst] != EMPTY_EDGE_SLOT)

    def _all_edges(self) -> Iterator[WeightedEdge]:
        for vertex in self.vertices():
            yield from self._outgoing_edges(self._indices[vertex])

    def _outgoing_edges(self, src: int) -> Iterator[WeightedEdge]:
        source = self._vertices[src]
        for dst, vertex in enumerate(self._vertices):
            if vertex is not None and self._edge_exists(src, dst):
                yield WeightedEdge(source, vertex, int(self._matrix[src, dst]))

    def _incoming_edges(self, dst: int) -> Iterator[WeightedEdge]:
        destination = self._vertices[dst]
        for src, vertex in enumerate(self._vertices):
            if vertex is not None and self._edge_exists(src, dst):
                yield WeightedEdge(vertex, destination, int(self._matrix[src, dst]))

