"""
Tests for the Flask JSON API.
"""

import pytest

from slotgraph.api import create_app
from slotgraph.networks import RouteMap, SocialNetwork


@pytest.fixture
def client():
    """Test client over the demo graphs."""
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()


class TestRoutesEndpoints:
    """Test /routes endpoints."""

    def test_list_cities(self, client):
        """Demo cities are listed in handle order."""
        response = client.get("/routes/cities")
        assert response.status_code == 200
        assert [c["name"] for c in response.get_json()["cities"]] == ["A", "B", "C", "D", "E"]

    def test_shortest(self, client):
        """Shortest path is returned with names."""
        response = client.get("/routes/shortest?source=0&destination=4")
        data = response.get_json()
        assert data["reachable"] is True
        assert data["distance"] == 9
        assert [v["name"] for v in data["path"]] == ["A", "C", "E"]

    def test_unreachable(self, client):
        """Unreachable is a normal response."""
        data = client.get("/routes/shortest?source=4&destination=0").get_json()
        assert data == {"reachable": False, "distance": None, "path": []}

    def test_add_city_and_route(self, client):
        """New cities and routes are used by later queries."""
        created = client.post("/routes/cities", json={"name": "F"})
        assert created.status_code == 201
        assert created.get_json() == {"id": 5, "name": "F"}
        assert client.post("/routes/routes", json={"origin": 4, "destination": 5, "weight": 1}).status_code == 201
        data = client.get("/routes/shortest?source=0&destination=5").get_json()
        assert data["distance"] == 10

    def test_city_routes(self, client):
        """Outgoing routes are listed newest first."""
        data = client.get("/routes/cities/2/routes").get_json()
        assert [(r["destination"]["name"], r["weight"]) for r in data["routes"]] == [("E", 7), ("D", 3)]

    def test_negative_weight(self, client):
        """Negative weights are a 400."""
        response = client.post("/routes/routes", json={"origin": 0, "destination": 1, "weight": -2})
        assert response.status_code == 400
        assert "non-negative" in response.get_json()["error"]

    def test_invalid_city(self, client):
        """Unknown cities are a 404."""
        response = client.get("/routes/shortest?source=0&destination=30")
        assert response.status_code == 404

    def test_missing_query(self, client):
        """Missing parameters are a 400."""
        assert client.get("/routes/shortest?source=0").status_code == 400

    def test_capacity(self):
        """A full map answers 409."""
        client = create_app(route_map=RouteMap(capacity=1)).test_client()
        assert client.post("/routes/cities", json={"name": "X"}).status_code == 201
        assert client.post("/routes/cities", json={"name": "Y"}).status_code == 409


class TestSocialEndpoints:
    """Test /social endpoints."""

    def test_bfs(self, client):
        """BFS returns levels."""
        visits = client.get("/social/users/0/bfs").get_json()["visits"]
        assert {v["name"]: v["level"] for v in visits} == {
            "Alice": 0, "Bob": 1, "Charlie": 1, "David": 2, "Eve": 3,
        }

    def test_connected(self, client):
        """Alice and Frank are not connected."""
        assert client.get("/social/connected?a=0&b=5").get_json() == {"connected": False}
        assert client.get("/social/connected?a=0&b=4").get_json() == {"connected": True}

    def test_link_idempotent(self, client):
        """Re-adding a friendship reports created=False."""
        first = client.post("/social/links", json={"a": 4, "b": 5})
        second = client.post("/social/links", json={"a": 5, "b": 4})
        assert first.status_code == 201
        assert second.status_code == 200
        assert second.get_json()["created"] is False
        friends = client.get("/social/users/5/friends").get_json()["friends"]
        assert [f["name"] for f in friends] == ["Eve"]

    def test_self_link(self, client):
        """Self friendships are a 400."""
        assert client.post("/social/links", json={"a": 2, "b": 2}).status_code == 400

    def test_suggestions(self, client):
        """Suggestions carry the mutual friend."""
        data = client.get("/social/users/1/suggestions").get_json()["suggestions"]
        assert [(s["name"], s["via"]["name"]) for s in data] == [("Eve", "David"), ("Charlie", "David")]

    def test_group_and_dfs(self, client):
        """Group and DFS agree on order."""
        group = client.get("/social/users/4/group").get_json()["members"]
        dfs = client.get("/social/users/4/dfs").get_json()["order"]
        assert group == dfs
        assert len(group) == 5

    def test_bad_body(self, client):
        """Non-JSON bodies are a 400."""
        response = client.post("/social/users", data="nope", content_type="text/plain")
        assert response.status_code == 400

    def test_custom_network(self):
        """An injected network is served as-is."""
        network = SocialNetwork(capacity=3)
        network.register("solo")
        client = create_app(network=network).test_client()
        assert client.get("/social/users").get_json() == {"users": [{"id": 0, "name": "solo"}]}

    def test_unknown_user(self, client):
        """Unknown users are a 404."""
        assert client.get("/social/users/50/friends").status_code == 404
