"""Shared machinery of the waste collection routing algorithms."""

from __future__ import annotations

import copy
import math
from abc import ABC, abstractmethod
from enum import IntEnum

from daalab.waste.model import Node, Problem, Solution, Task

INFINITY = math.inf

_SPECIAL_IDS = (0, -1, -2)
_UNLOAD_IDS = (-1, -2)
_RULE = "--------------------------------------------------------"


class VisitOutcome(IntEnum):
    """Whether a collection truck can go on to a zone."""

    VISIT = 0
    OVER_LOAD = 1
    OVER_TIME = 2


class Algorithm(ABC):
    """Base of the collection algorithms; works on its own copy of the problem."""

    def __init__(self, problem: Problem) -> None:
        self.problem = copy.deepcopy(problem)
        self.solution = Solution()

    @abstractmethod
    def solve(self) -> None:
        """Compute the collection and transport routes into ``solution``."""

    def can_visit(self, current: Node, target: Node, current_time: float,
                  current_load: float) -> VisitOutcome:
        """Check whether ``target`` fits in the current route.

        The trip must still allow unloading and returning to the depot
        within the time limit; the time check comes before the load check.
        """
        graph = self.problem.graph
        total = (current_time
                 + graph.cost(current.id, target.id)
                 + graph.cost(target.id, self.problem.if_node.id)
                 + graph.cost(self.problem.if_node.id, self.problem.depot.id)
                 + target.time)
        if total > self.problem.max_time:
            return VisitOutcome.OVER_TIME
        if current_load + target.weight > self.problem.max_weight:
            return VisitOutcome.OVER_LOAD
        return VisitOutcome.VISIT

    def split_subroutes(self, visited: list[Node]) -> list[list[Node]]:
        """Split a route into pieces, each starting at a depot visit."""
        subroutes: list[list[Node]] = []
        current: list[Node] = []
        for node in visited:
            if node.id == 0 and current:
                subroutes.append(current)
                current = []
            current.append(node)
        if current:
            subroutes.append(current)
        return subroutes

    def build_tasks(self) -> None:
        """Record a task for every unloading stop of the collection routes."""
        graph = self.problem.graph
        for route in self.solution.routes:
            elapsed = 0.0
            weight = 0.0
            for previous, node in zip(route, route[1:-1]):
                if node.id not in _SPECIAL_IDS:
                    elapsed += graph.cost(previous.id, node.id) + node.time
                    weight += node.weight
                elif node.id in _UNLOAD_IDS:
                    elapsed += graph.cost(previous.id, node.id)
                    weight = 0.0
                    self.problem.add_task(node, elapsed, weight)

    def choose_vehicle(self, task: Task) -> int | None:
        """Return the transport truck that reaches ``task`` soonest, or None."""
        graph = self.problem.graph
        chosen: int | None = None
        best_time = INFINITY
        for index, (truck, route) in enumerate(
                zip(self.solution.transport_trucks, self.solution.transport_routes)):
            last = route[-1]
            if truck.weight + task.weight < self.problem.max_transport_weight:
                travel = graph.cost(last.id, task.unload_zone.id)
            else:
                unload = graph.nearest_unload(last)
                travel = (truck.time
                          + graph.cost(last.id, unload.id)
                          + graph.cost(unload.id, task.unload_zone.id))
            finish = (truck.time + travel
                      + graph.cost(task.unload_zone.id, self.problem.dumpsite.id))
            if travel < best_time and finish < self.problem.max_time:
                best_time = travel
                chosen = index
        return chosen

    def compute_transport_routes(self) -> None:
        """Assign every task, in order of time, to a transport truck."""
        graph = self.problem.graph
        dumpsite = self.problem.dumpsite
        for task in sorted(self.problem.tasks, key=lambda item: item.time):
            index = self.choose_vehicle(task)
            if index is None:
                self.solution.push_transport_truck(
                    graph.cost(dumpsite.id, task.unload_zone.id), task.weight)
                new_index = len(self.solution.transport_routes) - 1
                self.solution.push_transport_node(new_index, dumpsite)
                self.solution.push_transport_node(new_index, task.unload_zone)
                continue

            truck = self.solution.transport_trucks[index]
            last = self.solution.transport_routes[index][-1]
            if truck.weight + task.weight < self.problem.max_transport_weight:
                truck.weight += task.weight
                truck.time += graph.cost(last.id, task.unload_zone.id)
                self.solution.push_transport_node(index, task.unload_zone)
            else:
                unload = graph.nearest_unload(last)
                truck.time += (graph.cost(last.id, dumpsite.id)
                               + graph.cost(dumpsite.id, task.unload_zone.id))
                truck.weight = task.weight
                self.solution.push_transport_node(index, unload)
                self.solution.push_transport_node(index, task.unload_zone)

    def format_solution(self) -> str:
        """Return the collection routes of the solution as a report."""
        lines = [
            "Solución encontrada:",
            f"Número de camiones: {self.solution.trucks}",
            f"Número de subrutas: {self.solution.subroutes}",
            "",
            "Nodos visitados en orden:",
        ]
        for route in self.solution.routes:
            started = False
            parts = []
            for node in route:
                node_id = int(node.id)
                if node_id == 0:
                    parts.append("Depósito" if started else "Depósito -> ")
                    started = not started
                elif node_id == -1:
                    parts.append("IF -> ")
                elif node_id == -2:
                    parts.append("IF1 -> ")
                else:
                    parts.append(f"{node_id} -> ")
            lines.append("".join(parts))
        lines += [
            "No quedan zonas por visitar.",
            _RULE,
            "                 FIN DE LA SOLUCIÓN                    ",
            _RULE,
            "",
        ]
        return "\n".join(lines) + "\n"