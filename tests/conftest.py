import pytest

from adjacency_matrix_graph import AdjacencyMatrixGraph

ACADEMY_ROUTES = [
    ("A", "B", 5),
    ("B", "C", 4),
    ("C", "D", 8),
    ("D", "C", 8),
    ("D", "E", 6),
    ("A", "D", 5),
    ("C", "E", 2),
    ("E", "B", 3),
    ("A", "E", 7),
]


@pytest.fixture
def academy_graph() -> AdjacencyMatrixGraph:
    """Five academies A..E joined by the nine sample routes."""
    g = AdjacencyMatrixGraph()
    g.add_vertices(["A", "B", "C", "D", "E"])
    for source, destination, weight in ACADEMY_ROUTES:
        assert g.add_edge(source, destination, weight)
    return g
