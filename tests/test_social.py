"""
Unit tests for the social network and its traversals.
"""

import itertools

import pytest

from slotgraph.graph import LevelVisit, Suggestion
from slotgraph.store import InvalidVertex, SelfLoop

ALICE, BOB, CHARLIE, DAVID, EVE, FRANK = range(6)


class TestFriendships:
    """Test undirected edge insertion."""

    def test_friendship_is_symmetric(self, empty_network):
        """One call adds the edge in both directions."""
        a = empty_network.register("a")
        b = empty_network.register("b")
        assert empty_network.add_edge(a, b) is True
        assert empty_network.friends(a) == [b]
        assert empty_network.friends(b) == [a]

    def test_duplicate_is_noop(self, empty_network):
        """Repeating a friendship (either direction) adds nothing."""
        a = empty_network.register("a")
        b = empty_network.register("b")
        empty_network.add_edge(a, b)
        assert empty_network.add_edge(a, b) is False
        assert empty_network.connect(b, a) is False
        assert empty_network.friends(a) == [b]
        assert empty_network.friends(b) == [a]

    def test_self_loop_rejected(self, network):
        """A user cannot befriend itself."""
        with pytest.raises(SelfLoop) as exc_info:
            network.add_edge(FRANK, FRANK)
        assert exc_info.value.handle == FRANK
        assert network.friends(FRANK) == []

    @pytest.mark.parametrize("a, b", [(ALICE, 6), (6, ALICE), (-1, BOB), (ALICE, 100)])
    def test_invalid_user_rejected(self, network, a, b):
        """Unknown users raise InvalidVertex and leave lists untouched."""
        before = network.friends(ALICE)
        with pytest.raises(InvalidVertex):
            network.add_edge(a, b)
        assert network.friends(ALICE) == before

    def test_friends_newest_first(self, network):
        """Friend lists follow reverse insertion order."""
        assert network.friends(ALICE) == [CHARLIE, BOB]
        assert network.friends(DAVID) == [EVE, CHARLIE, BOB]


class TestBreadthFirst:
    """Test BFS levels and order."""

    def test_demo_levels(self, network):
        """Alice's BFS levels match hop distance; Frank is absent."""
        levels = {visit.handle: visit.level for visit in network.bfs(ALICE)}
        assert levels == {ALICE: 0, BOB: 1, CHARLIE: 1, DAVID: 2, EVE: 3}

    def test_demo_order(self, network):
        """Visitation follows adjacency order (newest friend first)."""
        assert network.bfs(ALICE) == [
            LevelVisit(ALICE, 0),
            LevelVisit(CHARLIE, 1),
            LevelVisit(BOB, 1),
            LevelVisit(DAVID, 2),
            LevelVisit(EVE, 3),
        ]

    def test_isolated_user(self, network):
        """An isolated user only reaches itself."""
        assert network.bfs(FRANK) == [LevelVisit(FRANK, 0)]

    def test_invalid_source(self, network):
        """Unknown source raises InvalidVertex."""
        with pytest.raises(InvalidVertex):
            network.bfs(42)


class TestDepthFirst:
    """Test DFS report and collect modes."""

    def test_report_order(self, network):
        """DFS is pre-order following adjacency order."""
        assert network.dfs_report(ALICE) == [ALICE, CHARLIE, DAVID, EVE, BOB]

    def test_report_callback(self, network):
        """The callback sees every vertex in the same order."""
        seen = []
        order = network.dfs_report(BOB, on_visit=seen.append)
        assert seen == order == [BOB, DAVID, EVE, CHARLIE, ALICE]

    def test_component_matches_report(self, network):
        """Collect mode visits in the same order as report mode."""
        for user in range(6):
            assert network.component(user) == network.dfs_report(user)

    def test_component_same_from_any_member(self, network):
        """Every member of a group sees the same group."""
        group = set(network.component(ALICE))
        assert group == {ALICE, BOB, CHARLIE, DAVID, EVE}
        for member in group:
            members = network.component(member)
            assert set(members) == group
            assert len(members) == len(group)

    def test_isolated_component(self, network):
        """An isolated user is a group of one."""
        assert network.component(FRANK) == [FRANK]

    def test_invalid_source(self, network):
        """Unknown source raises InvalidVertex."""
        with pytest.raises(InvalidVertex):
            network.dfs_report(6)
        with pytest.raises(InvalidVertex):
            network.component(-3)


class TestConnectivity:
    """Test stack-based connectivity."""

    def test_demo_connectivity(self, network):
        """Alice reaches Eve but not Frank."""
        assert network.connected(ALICE, EVE) is True
        assert network.connected(ALICE, FRANK) is False

    def test_symmetric(self, network):
        """connected(a, b) == connected(b, a) for every pair."""
        for a, b in itertools.combinations(range(6), 2):
            assert network.connected(a, b) == network.connected(b, a)

    def test_self_connected_without_edges(self, empty_network):
        """A user with no friends is connected to itself."""
        lonely = empty_network.register("lonely")
        assert empty_network.connected(lonely, lonely) is True

    def test_agrees_with_component(self, network):
        """connected() is true exactly for members of the same group."""
        for a, b in itertools.product(range(6), repeat=2):
            assert network.connected(a, b) == (b in network.component(a))

    def test_invalid_endpoint(self, network):
        """Unknown users raise InvalidVertex even when equal."""
        with pytest.raises(InvalidVertex):
            network.connected(ALICE, 9)
        with pytest.raises(InvalidVertex):
            network.connected(9, 9)


class TestSuggestions:
    """Test second-degree friend suggestions."""

    def test_demo_alice(self, network):
        """Alice is suggested David once, through Charlie."""
        assert network.suggest(ALICE) == [DAVID]
        assert network.suggest_with_mutuals(ALICE) == [Suggestion(handle=DAVID, via=CHARLIE)]

    def test_demo_bob(self, network):
        """Bob gets Eve and Charlie through David, in adjacency order."""
        assert network.suggest_with_mutuals(BOB) == [
            Suggestion(handle=EVE, via=DAVID),
            Suggestion(handle=CHARLIE, via=DAVID),
        ]

    def test_demo_eve(self, network):
        """Eve's suggestions come from David's list."""
        assert network.suggest(EVE) == [CHARLIE, BOB]

    def test_no_suggestions_for_isolated(self, network):
        """An isolated user gets nothing."""
        assert network.suggest(FRANK) == []

    def test_excludes_self_and_friends(self, network):
        """Suggestions never include the user or a direct friend, and never repeat."""
        for user in range(6):
            suggestions = network.suggest(user)
            assert user not in suggestions
            assert not set(suggestions) & set(network.friends(user))
            assert len(suggestions) == len(set(suggestions))

    def test_invalid_user(self, network):
        """Unknown user raises InvalidVertex."""
        with pytest.raises(InvalidVertex):
            network.suggest(77)
