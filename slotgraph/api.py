"""
Flask JSON API over one route map and one social network.

The graphs are held in app.config and are not thread-safe: run the app
single-threaded (see `slotgraph serve`).
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import BadRequest

from slotgraph.networks import RouteMap, SocialNetwork, demo_route_map, demo_social_network
from slotgraph.store import CapacityExceeded, InvalidVertex, InvalidWeight, SelfLoop

logger = logging.getLogger(__name__)


def _field(payload: dict, name: str, kind: type):
    """Get a required field from a JSON body, checking its type."""
    value = payload.get(name)
    if isinstance(value, bool) or not isinstance(value, kind):
        raise BadRequest(f"Field '{name}' must be a {kind.__name__}")
    return value


def _query_int(name: str) -> int:
    value = request.args.get(name, type=int)
    if value is None:
        raise BadRequest(f"Query parameter '{name}' must be an integer")
    return value


def _json_body() -> dict:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise BadRequest("Expected a JSON object")
    return payload


def create_app(
    route_map: RouteMap | None = None,
    network: SocialNetwork | None = None,
) -> Flask:
    """
    Build the API app.

    Args:
        route_map: Route map to serve (demo cities A-E if None)
        network: Social network to serve (demo users Alice-Frank if None)
    """
    app = Flask(__name__)
    app.config["ROUTE_MAP"] = route_map if route_map is not None else demo_route_map()
    app.config["SOCIAL_NETWORK"] = network if network is not None else demo_social_network()

    def routes() -> RouteMap:
        return app.config["ROUTE_MAP"]

    def social() -> SocialNetwork:
        return app.config["SOCIAL_NETWORK"]

    def vertex_json(graph, handle: int) -> dict:
        return {"id": handle, "name": graph.label(handle)}

    # =========================================================================
    # Error Handlers
    # =========================================================================

    @app.errorhandler(InvalidVertex)
    def invalid_vertex(e):
        return jsonify(error=str(e)), 404

    @app.errorhandler(CapacityExceeded)
    def capacity_exceeded(e):
        return jsonify(error=str(e)), 409

    @app.errorhandler(InvalidWeight)
    @app.errorhandler(SelfLoop)
    def rejected_edge(e):
        return jsonify(error=str(e)), 400

    @app.errorhandler(BadRequest)
    def bad_request(e):
        return jsonify(error=e.description), 400

    # =========================================================================
    # Routes
    # =========================================================================

    @app.get("/routes/cities")
    def list_cities():
        return jsonify(cities=[vertex_json(routes(), v.id) for v in routes().vertices()])

    @app.post("/routes/cities")
    def add_city():
        name = _field(_json_body(), "name", str)
        handle = routes().register(name)
        return jsonify(vertex_json(routes(), handle)), 201

    @app.post("/routes/routes")
    def add_route():
        payload = _json_body()
        origin = _field(payload, "origin", int)
        destination = _field(payload, "destination", int)
        weight = _field(payload, "weight", int)
        routes().add_edge(origin, destination, weight)
        return jsonify(origin=origin, destination=destination, weight=weight), 201

    @app.get("/routes/cities/<int:city>/routes")
    def city_routes(city: int):
        return jsonify(routes=[
            {"destination": vertex_json(routes(), r.destination), "weight": r.weight}
            for r in routes().routes_from(city)
        ])

    @app.get("/routes/shortest")
    def shortest():
        result = routes().shortest_path(_query_int("source"), _query_int("destination"))
        return jsonify(
            reachable=result.reachable,
            distance=result.distance,
            path=[vertex_json(routes(), h) for h in result.path],
        )

    # =========================================================================
    # Social
    # =========================================================================

    @app.get("/social/users")
    def list_users():
        return jsonify(users=[vertex_json(social(), v.id) for v in social().vertices()])

    @app.post("/social/users")
    def add_user():
        name = _field(_json_body(), "name", str)
        handle = social().register(name)
        return jsonify(vertex_json(social(), handle)), 201

    @app.post("/social/links")
    def add_link():
        payload = _json_body()
        a = _field(payload, "a", int)
        b = _field(payload, "b", int)
        created = social().add_edge(a, b)
        return jsonify(a=a, b=b, created=created), 201 if created else 200

    @app.get("/social/users/<int:user>/friends")
    def friends(user: int):
        return jsonify(friends=[vertex_json(social(), h) for h in social().friends(user)])

    @app.get("/social/users/<int:user>/bfs")
    def bfs(user: int):
        return jsonify(visits=[
            {**vertex_json(social(), v.handle), "level": v.level} for v in social().bfs(user)
        ])

    @app.get("/social/users/<int:user>/dfs")
    def dfs(user: int):
        order = social().dfs_report(user)
        return jsonify(order=[vertex_json(social(), h) for h in order])

    @app.get("/social/users/<int:user>/group")
    def group(user: int):
        return jsonify(members=[vertex_json(social(), h) for h in social().component(user)])

    @app.get("/social/users/<int:user>/suggestions")
    def suggestions(user: int):
        return jsonify(suggestions=[
            {**vertex_json(social(), s.handle), "via": vertex_json(social(), s.via)}
            for s in social().suggest_with_mutuals(user)
        ])

    @app.get("/social/connected")
    def connected():
        return jsonify(connected=social().connected(_query_int("a"), _query_int("b")))

    logger.info("API app created")
    return app
