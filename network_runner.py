"""
CLI to answer route queries over a site network.

Reads a YAML network file (sites, routes and queries), builds the graph and
prints one line per query.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple
import argparse
import logging
import time

import yaml

from adjacency_matrix_graph import AdjacencyMatrixGraph
from dijkstra_engine import DenseDijkstraEngine
from errors import NoRouteError
from path_enumerator import DepthFirstPathEnumerator
from paths import NO_SUCH_ROUTE
from queries import (
    count_cyclic_routes,
    count_limited_cyclic_routes,
    count_routes,
    route_distance,
    shortest_distance,
)
from topology_builder import RouteTriple, build_graph

logger = logging.getLogger(__name__)

QUERY_KEYS = {
    "distance": {"kind", "route"},
    "count": {"kind", "source", "destination", "exact_stops", "max_stops", "include_cycles"},
    "shortest": {"kind", "source", "destination"},
    "limited_cycles": {"kind", "source", "limit"},
}
QUERY_KINDS = tuple(QUERY_KEYS)


@dataclass(frozen=True)
class QueryConfig:
    kind: str
    route: Tuple[str, ...] = ()
    source: Optional[str] = None
    destination: Optional[str] = None
    exact_stops: Optional[int] = None
    max_stops: Optional[int] = None
    include_cycles: bool = False
    limit: Optional[int] = None

    def label(self) -> str:
        if self.kind == "distance":
            return f"distance {'-'.join(self.route)}"
        if self.kind == "limited_cycles":
            return f"limited_cycles {self.source} < {self.limit}"
        return f"{self.kind} {self.source}->{self.destination}"


@dataclass(frozen=True)
class NetworkConfig:
    routes: Sequence[RouteTriple]
    queries: Sequence[QueryConfig]
    sites: Sequence[str] = ()
    capacity: Optional[int] = None


def load_config(path: Path) -> NetworkConfig:
    data = yaml.safe_load(path.read_text()) or {}
    if "routes" not in data:
        raise ValueError(f"{path}: network config requires 'routes'")

    routes = [_parse_route(raw) for raw in data["routes"]]
    queries = [_parse_query(raw) for raw in data.get("queries") or []]
    capacity = data.get("capacity")
    return NetworkConfig(
        routes=routes,
        queries=queries,
        sites=[str(site) for site in data.get("sites") or []],
        capacity=int(capacity) if capacity is not None else None,
    )


def _parse_route(raw) -> RouteTriple:
    if not isinstance(raw, (list, tuple)) or len(raw) != 3:
        raise ValueError(f"Route must be [source, destination, weight], got {raw!r}")
    source, destination, weight = raw
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise ValueError(f"Route weight must be an integer, got {raw!r}")
    return str(source), str(destination), weight


def _parse_query(raw: Dict[str, object]) -> QueryConfig:
    if not isinstance(raw, dict):
        raise ValueError(f"Query must be a mapping, got {raw!r}")
    kind = raw.get("kind")
    if kind not in QUERY_KINDS:
        raise ValueError(f"Unknown query kind {kind!r}; expected one of {', '.join(QUERY_KINDS)}")
    unknown = set(raw) - QUERY_KEYS[kind]
    if unknown:
        raise ValueError(f"{kind} query does not accept {', '.join(sorted(map(str, unknown)))}")

    if kind == "distance":
        route = raw.get("route") or []
        if len(route) < 2:
            raise ValueError("distance query requires a route of at least two sites")
        return QueryConfig(kind=kind, route=tuple(str(site) for site in route))

    if "source" not in raw:
        raise ValueError(f"{kind} query requires 'source'")
    if kind == "limited_cycles":
        if "limit" not in raw:
            raise ValueError("limited_cycles query requires 'limit'")
        return QueryConfig(kind=kind, source=str(raw["source"]), limit=int(raw["limit"]))

    if "destination" not in raw:
        raise ValueError(f"{kind} query requires 'destination'")
    if raw.get("include_cycles") and raw["source"] == raw["destination"]:
        raise ValueError("include_cycles does not apply when source and destination are the same site")
    return QueryConfig(
        kind=kind,
        source=str(raw["source"]),
        destination=str(raw["destination"]),
        exact_stops=_optional_int(raw.get("exact_stops")),
        max_stops=_optional_int(raw.get("max_stops")),
        include_cycles=bool(raw.get("include_cycles", False)),
    )


def _optional_int(value) -> Optional[int]:
    return int(value) if value is not None else None


def run_queries(config: NetworkConfig) -> List[Dict[str, object]]:
    graph = build_graph(config.routes, capacity=config.capacity, vertices=config.sites)
    logger.info("Built network with %d sites and %d routes", graph.vertices_count, graph.edges_count)

    enumerator = DepthFirstPathEnumerator()
    engine = DenseDijkstraEngine()

    results: List[Dict[str, object]] = []
    for query in config.queries:
        start = time.time()
        try:
            result: object = _answer(graph, query, enumerator, engine)
        except NoRouteError:
            result = NO_SUCH_ROUTE
        results.append(
            {
                "query": query.label(),
                "kind": query.kind,
                "result": result,
                "duration_sec": time.time() - start,
            }
        )
    return results


def _answer(
    graph: AdjacencyMatrixGraph,
    query: QueryConfig,
    enumerator: DepthFirstPathEnumerator,
    engine: DenseDijkstraEngine,
) -> object:
    if query.kind == "distance":
        return route_distance(graph, query.route)
    if query.kind == "shortest":
        return shortest_distance(graph, query.source, query.destination, engine=engine)
    if query.kind == "limited_cycles":
        return count_limited_cyclic_routes(graph, query.source, query.limit, enumerator=enumerator)

    if query.source == query.destination:
        return count_cyclic_routes(
            graph,
            query.source,
            exact_stops=query.exact_stops,
            max_stops=query.max_stops,
            enumerator=enumerator,
        )
    return count_routes(
        graph,
        query.source,
        query.destination,
        exact_stops=query.exact_stops,
        max_stops=query.max_stops,
        include_cycles=query.include_cycles,
        enumerator=enumerator,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Answer route queries over a site network.")
    parser.add_argument("config", type=Path, help="YAML network file")
    parser.add_argument("--verbose", "-v", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    print(f"[run] loaded {len(config.routes)} routes and {len(config.queries)} queries from {args.config}")
    for i, res in enumerate(run_queries(config), start=1):
        print(f"[run] #{i} {res['query']}: {res['result']}")


if __name__ == "__main__":
    main()
