"""Audio routing graph: tracks, buses and master connected without cycles."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class RoutingError(Exception):
    """Raised when a connection cannot be made or removed."""


class NodeType(Enum):
    TRACK = "track"
    SEND_BUS = "send_bus"
    MASTER = "master"
    SIDECHAIN = "sidechain"


@dataclass
class AudioNode:
    """A node in the routing graph."""

    id: int
    name: str
    node_type: NodeType


@dataclass
class RoutingGraph:
    """Directed acyclic graph of audio nodes, keyed by node id."""

    nodes: dict[int, AudioNode] = field(default_factory=dict)
    edges: dict[int, set[int]] = field(default_factory=dict)
    _next_id: int = field(default=1, repr=False)

    def add_node(self, name: str, node_type: NodeType) -> int:
        """Add a node and return its id."""
        node_id = self._next_id
        self._next_id += 1
        self.nodes[node_id] = AudioNode(node_id, name, node_type)
        self.edges[node_id] = set()
        return node_id

    def remove_node(self, node_id: int) -> AudioNode | None:
        """Remove a node and every connection to it; return it, or None if absent."""
        node = self.nodes.pop(node_id, None)
        if node is None:
            return None
        self.edges.pop(node_id, None)
        for destinations in self.edges.values():
            destinations.discard(node_id)
        return node

    def connect(self, source: int, destination: int) -> None:
        """Connect ``source`` to ``destination``, refusing edges that form a cycle."""
        if source not in self.nodes:
            raise RoutingError("Source node does not exist")
        if destination not in self.nodes:
            raise RoutingError("Destination node does not exist")
        if source == destination:
            raise RoutingError("Cannot connect a node to itself")

        destinations = self.edges.setdefault(source, set())
        if destination in destinations:
            raise RoutingError("Edge already exists")
        destinations.add(destination)

        if self._has_cycle():
            destinations.discard(destination)
            raise RoutingError("Adding this connection would create a cycle")

    def disconnect(self, source: int, destination: int) -> None:
        """Remove the connection from ``source`` to ``destination``."""
        destinations = self.edges.get(source)
        if destinations is None:
            raise RoutingError("Source node does not exist")
        if destination not in destinations:
            raise RoutingError("Connection does not exist")
        destinations.remove(destination)

    def _has_cycle(self) -> bool:
        visited: set[int] = set()
        on_stack: set[int] = set()

        def visit(node: int) -> bool:
            if node in on_stack:
                return True
            if node in visited:
                return False
            visited.add(node)
            on_stack.add(node)
            if any(visit(dest) for dest in self.edges.get(node, ())):
                return True
            on_stack.discard(node)
            return False

        return any(visit(node) for node in list(self.nodes))