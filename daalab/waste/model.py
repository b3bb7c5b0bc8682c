"""Data model of the waste collection routing problem."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Position:
    """A point on the plane."""

    x: float = 0.0
    y: float = 0.0

    def distance(self, other: Position) -> float:
        """Return the Manhattan distance to ``other``."""
        return abs(self.x - other.x) + abs(self.y - other.y)


@dataclass(frozen=True)
class Node:
    """A location of the problem; two nodes are equal when their ids are.

    ``weight`` is the waste collected at the node and ``time`` the
    service time spent there.
    """

    id: int = 0
    position: Position = field(default_factory=Position, compare=False)
    weight: float = field(default=0.0, compare=False)
    time: float = field(default=0.0, compare=False)


@dataclass
class Task:
    """A load left at an unloading zone that a transport truck must pick up."""

    unload_zone: Node
    time: float
    weight: float


@dataclass
class Graph:
    """Nodes of an instance and the travel times between them.

    Nodes are looked up by position: the node with identifier ``i`` is
    the one added at position ``i + 3``. The first two nodes added are
    the unloading facilities.
    """

    nodes: list[Node] = field(default_factory=list)
    velocity: float = 1.0

    def add_node(self, node: Node) -> None:
        """Append a node to the graph."""
        self.nodes.append(node)

    def _position(self, node_id: int) -> Position:
        index = int(node_id) + 3
        if not 0 <= index < len(self.nodes):
            raise IndexError(f"no node for identifier {node_id}")
        return self.nodes[index].position

    def cost(self, id1: int, id2: int) -> float:
        """Return the travel time in minutes between two node identifiers."""
        return self._position(id1).distance(self._position(id2)) / self.velocity * 60

    def nearest_unload(self, node: Node) -> Node:
        """Return the unloading facility closest to ``node``."""
        if self.cost(node.id, -3) < self.cost(node.id, -2):
            return self.nodes[0]
        return self.nodes[1]


class Problem:
    """An instance: limits, special locations, zones and pending tasks."""

    def __init__(self, max_time: float, max_weight: float, graph: Graph, depot: Node,
                 velocity: float, if_node: Node, if1_node: Node,
                 max_transport_weight: float, dumpsite: Node, offset: float) -> None:
        self.max_time = max_time
        self.max_weight = max_weight
        self.max_transport_weight = max_transport_weight
        self.velocity = velocity
        self.offset = offset
        self.graph = Graph(list(graph.nodes), velocity)
        self.depot = depot
        self.if_node = if_node
        self.if1_node = if1_node
        self.dumpsite = dumpsite
        self.nodes: list[Node] = []
        self.tasks: list[Task] = []

    def add_node(self, node: Node) -> None:
        """Add a node both to the graph and to the node list."""
        self.graph.add_node(node)
        self.nodes.append(node)

    def add_task(self, unload_zone: Node, time: float, weight: float) -> None:
        """Record a load left at ``unload_zone`` at ``time``."""
        self.tasks.append(Task(unload_zone, time, weight))

    def reset_tasks(self) -> None:
        """Forget every recorded task."""
        self.tasks.clear()


@dataclass
class TransportTruck:
    """Accumulated time and load of a transport truck."""

    time: float
    weight: float


@dataclass
class Solution:
    """Collection routes and transport routes of a solution."""

    routes: list[list[Node]] = field(default_factory=list)
    transport_routes: list[list[Node]] = field(default_factory=list)
    transport_trucks: list[TransportTruck] = field(default_factory=list)
    subroutes: int = 0
    trucks: int = 0

    def add_truck(self) -> None:
        """Count one more collection truck."""
        self.trucks += 1

    def push_route(self, nodes: list[Node]) -> None:
        """Append a collection route."""
        self.routes.append(list(nodes))

    def push_transport_truck(self, time: float, weight: float) -> None:
        """Add a transport truck with an empty route."""
        self.transport_trucks.append(TransportTruck(time, weight))
        self.transport_routes.append([])

    def push_transport_node(self, truck: int, node: Node) -> None:
        """Append a node to the route of a transport truck."""
        self.transport_routes[truck].append(node)

    def replace_route(self, index: int, nodes: list[Node]) -> None:
        """Replace the collection route at ``index``."""
        self.routes[index] = list(nodes)

    def is_feasible(self, max_time: float, max_weight: float) -> bool:
        """Whether every route keeps its service time and load within the limits."""
        for route in self.routes:
            route_time = sum(node.time for node in route)
            route_load = sum(node.weight for node in route)
            if route_time > max_time or route_load > max_weight:
                return False
        return True

    def copy(self) -> Solution:
        """Return an independent copy of the solution."""
        return Solution(
            routes=[list(route) for route in self.routes],
            transport_routes=[list(route) for route in self.transport_routes],
            transport_trucks=[replace(truck) for truck in self.transport_trucks],
            subroutes=self.subroutes,
            trucks=self.trucks,
        )