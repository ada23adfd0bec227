"""
Slot Graph CLI - Build a route map or social network and query it.

Usage:
    slotgraph routes --demo shortest A E
    slotgraph routes --city X --city Y --route X:Y:3 show
    slotgraph social --demo bfs Alice
    slotgraph social --demo --user Gina --link Gina:Eve suggest Gina
    slotgraph social --demo connected Alice Frank
    slotgraph serve --port 8000

Graphs live only for the duration of one command. Vertices may be named by
label (first registered label wins) or by numeric handle.

Route actions:
    list                - Active cities
    show                - Every city with its outgoing routes
    shortest SRC DST    - Cheapest route (Dijkstra)

Social actions:
    list                - Active users
    friends USER        - Direct friends
    bfs USER            - Reachable users with their distance
    dfs USER            - Depth-first exploration order
    suggest USER        - Friends of friends
    group USER          - Everyone in the user's social group
    connected A B       - Whether a chain of friendships links A and B
"""

from __future__ import annotations

import argparse
import logging
import sys

from slotgraph.config import API_HOST, API_PORT, LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL
from slotgraph.networks import Graph, RouteMap, SocialNetwork, get_graph
from slotgraph.networks.demo import seed_network, seed_routes
from slotgraph.store import GraphError

logger = logging.getLogger(__name__)


def _route_spec(value: str) -> tuple[str, str, int]:
    """Parse ORIGIN:DESTINATION:WEIGHT."""
    parts = value.rsplit(":", 2)
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"Expected ORIGIN:DESTINATION:WEIGHT, got '{value}'")
    origin, destination, weight = parts
    try:
        return origin, destination, int(weight)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Weight must be an integer, got '{weight}'") from None


def _link_spec(value: str) -> tuple[str, str]:
    """Parse A:B."""
    parts = value.split(":")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Expected A:B, got '{value}'")
    return parts[0], parts[1]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="slotgraph",
        description="Query bounded route maps and social networks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    sub = parser.add_subparsers(dest="kind", required=True)

    # Routes
    routes = sub.add_parser("routes", help="Weighted one-way routes between cities")
    routes.add_argument("--demo", action="store_true", help="Seed cities A-E and their routes")
    routes.add_argument("--capacity", type=int, default=None, help="Maximum number of cities")
    routes.add_argument("--city", dest="names", action="append", default=[], metavar="NAME",
                        help="Register a city (repeatable)")
    routes.add_argument("--route", dest="edges", action="append", default=[], type=_route_spec,
                        metavar="FROM:TO:WEIGHT", help="Add a one-way route (repeatable)")
    route_actions = routes.add_subparsers(dest="action", required=True)
    route_actions.add_parser("list", help="List active cities")
    route_actions.add_parser("show", help="Show cities and their routes")
    shortest = route_actions.add_parser("shortest", help="Cheapest route between two cities")
    shortest.add_argument("source")
    shortest.add_argument("destination")

    # Social
    social = sub.add_parser("social", help="Undirected friendships between users")
    social.add_argument("--demo", action="store_true", help="Seed users Alice-Frank and their friendships")
    social.add_argument("--capacity", type=int, default=None, help="Maximum number of users")
    social.add_argument("--user", dest="names", action="append", default=[], metavar="NAME",
                        help="Register a user (repeatable)")
    social.add_argument("--link", dest="edges", action="append", default=[], type=_link_spec,
                        metavar="A:B", help="Add a friendship (repeatable)")
    social_actions = social.add_subparsers(dest="action", required=True)
    social_actions.add_parser("list", help="List active users")
    for action, help_text in [
        ("friends", "Direct friends of a user"),
        ("bfs", "Breadth-first search with levels"),
        ("dfs", "Depth-first exploration"),
        ("suggest", "Suggest friends of friends"),
        ("group", "Members of the user's social group"),
    ]:
        social_actions.add_parser(action, help=help_text).add_argument("user")
    connected = social_actions.add_parser("connected", help="Check whether two users are connected")
    connected.add_argument("a")
    connected.add_argument("b")

    # Service
    serve = sub.add_parser("serve", help="Run the JSON API on the demo graphs")
    serve.add_argument("--host", default=API_HOST)
    serve.add_argument("--port", type=int, default=API_PORT)

    return parser.parse_args(argv)


# =============================================================================
# Graph Construction
# =============================================================================


def resolve(graph: Graph, name: str) -> int:
    """
    Map a label or numeric handle to a handle.

    Raises:
        LookupError: If nothing in the graph matches
    """
    handle = graph.find(name)
    if handle is not None:
        return handle
    if name.isdigit() and graph.store.is_active(int(name)):
        return int(name)
    raise LookupError(f"No vertex named '{name}'")


def build_graph(args: argparse.Namespace) -> Graph:
    """Create the graph described by the command line options."""
    kwargs = {} if args.capacity is None else {"capacity": args.capacity}
    graph = get_graph(args.kind, **kwargs)

    if args.demo:
        if isinstance(graph, RouteMap):
            seed_routes(graph)
        else:
            seed_network(graph)

    for name in args.names:
        graph.register(name)

    for origin, destination, *weight in args.edges:
        graph.add_edge(resolve(graph, origin), resolve(graph, destination), *weight)

    return graph


def _describe(graph: Graph, handle: int) -> str:
    return f"{graph.label(handle)} (ID: {handle})"


# =============================================================================
# Reports
# =============================================================================


def _list_vertices(graph: Graph, noun: str) -> int:
    vertices = graph.vertices()
    if not vertices:
        print(f"No {noun} registered.")
        return 0
    for vertex in vertices:
        print(f"ID: {vertex.id}, Name: {vertex.label}")
    return 0


def run_routes(route_map: RouteMap, args: argparse.Namespace) -> int:
    """Run one route action and print the report."""
    if args.action == "list":
        return _list_vertices(route_map, "cities")

    if args.action == "show":
        cities = route_map.vertices()
        if not cities:
            print("No cities registered.")
        for city in cities:
            print(f"City: {_describe(route_map, city.id)}")
            routes = route_map.routes_from(city.id)
            if not routes:
                print("  No outgoing routes.")
            for route in routes:
                print(f"  -> To: {_describe(route_map, route.destination)}, Weight: {route.weight}")
        return 0

    source = resolve(route_map, args.source)
    destination = resolve(route_map, args.destination)
    result = route_map.shortest_path(source, destination)
    if not result.reachable:
        print(f"No path from {_describe(route_map, source)} to {_describe(route_map, destination)}.")
        return 1

    print(f"Lowest cost from {_describe(route_map, source)} to {_describe(route_map, destination)}: {result.distance}")
    print("Path: " + " -> ".join(_describe(route_map, h) for h in result.path))
    return 0


def run_social(network: SocialNetwork, args: argparse.Namespace) -> int:
    """Run one social action and print the report."""
    if args.action == "list":
        return _list_vertices(network, "users")

    if args.action == "connected":
        a = resolve(network, args.a)
        b = resolve(network, args.b)
        verdict = "ARE" if network.connected(a, b) else "are NOT"
        print(f"{_describe(network, a)} and {_describe(network, b)} {verdict} connected.")
        return 0

    user = resolve(network, args.user)

    if args.action == "friends":
        friends = network.friends(user)
        print(f"Friends of {_describe(network, user)}:")
        if not friends:
            print("  No friends found.")
        for friend in friends:
            print(f"  - {_describe(network, friend)}")

    elif args.action == "bfs":
        print(f"Reachable from {_describe(network, user)}:")
        for visit in network.bfs(user):
            print(f"  {_describe(network, visit.handle)} - Level {visit.level}")

    elif args.action == "dfs":
        print(f"DFS from {_describe(network, user)}:")
        network.dfs_report(user, on_visit=lambda h: print(f"  Visiting {_describe(network, h)}"))

    elif args.action == "suggest":
        suggestions = network.suggest_with_mutuals(user)
        print(f"Friend suggestions for {_describe(network, user)}:")
        if not suggestions:
            print("  No suggestions right now.")
        for suggestion in suggestions:
            print(f"  - {_describe(network, suggestion.handle)} (friend of {network.label(suggestion.via)})")

    elif args.action == "group":
        print(f"Social group of {_describe(network, user)}:")
        for member in network.component(user):
            print(f"  - {_describe(network, member)}")

    return 0


def serve(host: str, port: int) -> int:
    """Run the JSON API on the demo graphs."""
    from slotgraph.api import create_app

    # The store has no locking; one request at a time
    create_app().run(host=host, port=port, threaded=False)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

    if args.kind == "serve":
        return serve(args.host, args.port)

    try:
        with build_graph(args) as graph:
            if isinstance(graph, RouteMap):
                return run_routes(graph, args)
            return run_social(graph, args)
    except (GraphError, LookupError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
