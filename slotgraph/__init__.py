"""
Slot Graph.

Bounded in-memory graphs with slot-based vertex storage and prepend-ordered
adjacency lists, plus the algorithms that run over them: weighted shortest
paths on a directed route map and reachability queries on an undirected
social network.
"""

__version__ = "0.1.0"
