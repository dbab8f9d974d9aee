"""
Error kinds raised by the route network.

Mutations that fail for ordinary reasons (duplicate vertex or edge, full
graph) return False instead of raising; the exceptions below signal caller
logic errors or queries that have no answer.
"""


class GraphError(Exception):
    """Base class for all route network errors."""


class VertexNotFoundError(GraphError, KeyError):
    """An operation referenced a vertex that is not in the graph."""

    def __init__(self, vertex) -> None:
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        return f"Vertex {self.vertex!r} doesn't belong to graph."


class EdgeNotFoundError(GraphError, KeyError):
    """A weight or edge lookup referenced a missing edge."""

    def __init__(self, source, destination) -> None:
        super().__init__(source, destination)
        self.source = source
        self.destination = destination

    def __str__(self) -> str:
        return f"Edge {self.source!r} -> {self.destination!r} doesn't exist."


class NoRouteError(GraphError):
    """No path exists between the requested vertices."""

    def __init__(self, source, destination) -> None:
        super().__init__(f"No route from {source!r} to {destination!r}.")
        self.source = source
        self.destination = destination


class InvalidWeightError(GraphError, ValueError):
    """Edge weights must be positive integers."""


class NullInputError(GraphError, ValueError):
    """A bulk operation was given no input."""
