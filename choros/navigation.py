"""Graph-based navigation with shortest-path planning."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Iterable


class Direction(IntEnum):
    """Cardinal directions in degrees."""

    EAST = 0
    NORTH = 90
    WEST = 180
    SOUTH = 270

    @property
    def reverse(self) -> Direction:
        return Direction((self.value + 180) % 360)


class EdgeOrientation(Enum):
    """Axis alignment of an edge."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class NodeType(Enum):
    """A primary node is an intersection; a secondary node is a terminal."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass
class Edge:
    """A directed edge of the navigation graph."""

    target: str
    weight: float
    direction: Direction
    intersection_east: bool = False
    intersection_north: bool = False
    intersection_west: bool = False
    intersection_south: bool = False

    def orientation(self) -> EdgeOrientation:
        """Return the axis this edge lies along."""
        if self.direction in (Direction.EAST, Direction.WEST):
            return EdgeOrientation.HORIZONTAL
        return EdgeOrientation.VERTICAL


class Navigation:
    """Navigation graph with the robot's current position."""

    def __init__(self) -> None:
        self._adjacency: dict[str, list[Edge]] = {}
        self._node_types: dict[str, NodeType] = {}
        self.current_node: str | None = None

    def add_node(self, node: str, node_type: NodeType) -> None:
        """Add a node; raise ValueError if it already exists."""
        if node in self._node_types:
            raise ValueError(f"Node already exists: {node}")
        self._node_types[node] = node_type
        self._adjacency[node] = []

    def add_edge(self, source: str, target: str, weight: float, direction: Direction) -> None:
        """Connect two nodes both ways, ``direction`` pointing from source to target."""
        if source not in self._node_types or target not in self._node_types:
            raise ValueError("Both nodes must be added before adding an edge.")
        for node in (source, target):
            if self._node_types[node] is NodeType.SECONDARY and self._adjacency[node]:
                raise ValueError(f"Secondary node '{node}' may only have one edge.")

        direction = Direction(direction)
        self._adjacency[source].append(Edge(target, weight, direction))
        self._adjacency[target].append(Edge(source, weight, direction.reverse))

        for out_edge in self._adjacency[source]:
            for rev_edge in self._adjacency[out_edge.target]:
                if rev_edge.target != source:
                    continue
                if rev_edge.orientation() is EdgeOrientation.HORIZONTAL:
                    rev_edge.intersection_north |= direction is Direction.NORTH
                    rev_edge.intersection_south |= direction is Direction.SOUTH
                else:
                    rev_edge.intersection_west |= direction is Direction.WEST
                    rev_edge.intersection_east |= direction is Direction.EAST

    def _edges_of(self, node: str) -> list[Edge]:
        try:
            return self._adjacency[node]
        except KeyError:
            raise KeyError(f"unknown node: {node}") from None

    def find_path(self, target: str, blacklist: Iterable[str] = ()) -> list[Edge] | None:
        """Return the shortest path from the current node to ``target``.

        Nodes in ``blacklist`` are never passed through. Returns None when
        there is no current node or no path.
        """
        if self.current_node is None:
            return None
        start = self.current_node
        blocked = set(blacklist)

        dist: dict[str, float] = {node: math.inf for node in self._adjacency}
        prev: dict[str, str] = {}
        dist[start] = 0.0
        queue: list[tuple[float, str]] = [(0.0, start)]

        while queue:
            current_dist, node = heapq.heappop(queue)
            if node == target:
                break
            if node in blocked:
                continue
            for edge in self._edges_of(node):
                if edge.target in blocked:
                    continue
                alt = current_dist + edge.weight
                if alt < dist.get(edge.target, math.inf):
                    dist[edge.target] = alt
                    prev[edge.target] = node
                    heapq.heappush(queue, (alt, edge.target))

        if target not in prev:
            return None

        path: list[Edge] = []
        current = target
        while current != start:
            parent = prev[current]
            edge = next((e for e in self._adjacency[parent] if e.target == current), None)
            if edge is None:
                return None
            path.append(replace(edge))
            current = parent
        path.reverse()
        return path

    def get_node_type(self, node: str) -> NodeType | None:
        """Return the type of ``node``, or None if it is unknown."""
        return self._node_types.get(node)

    def get_edge(self, source: str, target: str) -> Edge | None:
        """Return a copy of the edge from ``source`` to ``target``, if any."""
        if source not in self._node_types or target not in self._node_types:
            raise ValueError("Both nodes must be added before searching for an edge.")
        for edge in self._adjacency[source]:
            if edge.target == target:
                return replace(edge)
        return None