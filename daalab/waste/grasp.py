"""GRASP construction followed by local searches for waste collection routing."""

from __future__ import annotations

import random
import time

from daalab.waste.algorithm import Algorithm, VisitOutcome
from daalab.waste.model import Node, Problem, Solution

INT_MAX = 2**31 - 1


def _with_routes(solution: Solution, *changes: tuple[int, list[Node]]) -> Solution:
    """Return a copy of ``solution`` with some collection routes replaced."""
    candidate = Solution(
        routes=list(solution.routes),
        transport_routes=solution.transport_routes,
        transport_trucks=solution.transport_trucks,
        subroutes=solution.subroutes,
        trucks=solution.trucks,
    )
    for index, route in changes:
        candidate.replace_route(index, route)
    return candidate


class Grasp(Algorithm):
    """Randomised greedy construction repeated many times, then local search.

    Each construction step picks at random among the ``lrc`` zones
    closest to the current one.
    """

    def __init__(self, problem: Problem, iterations: int = 15000, lrc: int = 3,
                 rng: random.Random | None = None) -> None:
        super().__init__(problem)
        self.iterations = iterations
        self.lrc = lrc
        self.solutions: list[Solution] = []
        self._rng = rng if rng is not None else random.Random()

    def solve(self) -> None:
        start = time.perf_counter()
        for _ in range(self.iterations):
            self._reset_solution()
            self._construct()
            self.solutions.append(self.solution.copy())
        self._local_searches()
        elapsed = time.perf_counter() - start
        print(f"Tiempo de ejecución fase recolección: {elapsed} segundos")

        start = time.perf_counter()
        self.problem.reset_tasks()
        self.build_tasks()
        self.compute_transport_routes()
        elapsed = time.perf_counter() - start
        print(f"Tiempo de ejecución fase transporte: {elapsed} segundos")

    def _reset_solution(self) -> None:
        self.solution.routes = []
        self.solution.subroutes = 0
        self.solution.trucks = 0

    def _construct(self) -> None:
        problem = self.problem
        graph = problem.graph
        depot = problem.depot
        pending = list(problem.nodes[4:])
        visited: list[Node] = [depot]
        self.solution.add_truck()
        current = depot
        current_time = 0.0
        current_load = 0.0
        subroutes = 0

        while pending:
            origin = current.id
            pending.sort(key=lambda node, origin=origin: graph.cost(origin, node.id))

            fresh = current.id == depot.id and current_time == 0 and current_load == 0
            if fresh and all(
                    self.can_visit(current, node, current_time, current_load)
                    is VisitOutcome.OVER_TIME for node in pending):
                raise RuntimeError("no pending zone can be reached within the time limit")

            limit = self.lrc if len(pending) > self.lrc else len(pending)
            target = pending[self._rng.randrange(limit)]
            outcome = self.can_visit(current, target, current_time, current_load)

            if outcome is VisitOutcome.VISIT:
                current = target
                current_load += target.weight
                current_time += target.time
                visited.append(target)
                pending = [node for node in pending if node != target]
            elif outcome is VisitOutcome.OVER_LOAD:
                unload = graph.nearest_unload(current)
                current_time += (graph.cost(current.id, unload.id)
                                 + graph.cost(unload.id, target.id)
                                 + target.time)
                problem.add_task(unload, current_time, current_load)
                current_load = target.weight
                pending = [node for node in pending if node != target]
                visited.append(unload)
                current = target
                visited.append(target)
                subroutes += 1
            else:
                unload = graph.nearest_unload(current)
                current_load = 0.0
                current = depot
                visited.extend((unload, depot))
                current_time = 0.0
                self.solution.add_truck()
                self.solution.push_route(visited)
                visited = [depot]
                subroutes += 1

        self.solution.push_route(visited)
        self.solution.subroutes = subroutes

    def _feasible(self, candidate: Solution) -> bool:
        return candidate.is_feasible(self.problem.max_time, self.problem.max_weight)

    def _local_searches(self) -> None:
        best = Solution(subroutes=INT_MAX)
        for position, solution in enumerate(self.solutions):
            count = len(solution.routes)
            for route in range(count):
                solution = self._swap_within(solution, route)
                solution = self._relocate_within(solution, route)
                for other in range(count):
                    if route != other:
                        solution = self._swap_between(solution, route, other)
                        solution = self._relocate_between(solution, route, other)
            self.solutions[position] = solution
            if solution.subroutes < best.subroutes:
                best = solution
        self.solution = best.copy()

    def _swap_within(self, solution: Solution, index: int) -> Solution:
        """Swap pairs of nodes inside one route."""
        route = list(solution.routes[index])
        best = solution
        for first in range(1, len(route)):
            for second in range(first + 1, len(route)):
                route[first], route[second] = route[second], route[first]
                candidate = _with_routes(best, (index, route))
                if self._feasible(candidate) and candidate.subroutes < solution.subroutes:
                    best = candidate
        return best

    def _swap_between(self, solution: Solution, index1: int, index2: int) -> Solution:
        """Swap nodes between two routes."""
        route1 = list(solution.routes[index1])
        route2 = list(solution.routes[index2])
        best = solution
        for first in range(len(route1)):
            for second in range(len(route2)):
                route1[first], route2[second] = route2[second], route1[first]
                candidate = _with_routes(best, (index1, route1), (index2, route2))
                if self._feasible(candidate) and candidate.subroutes < best.subroutes:
                    best = candidate
        return best

    def _relocate_within(self, solution: Solution, index: int) -> Solution:
        """Move a node from one subroute of a route into another subroute."""
        pieces = self.split_subroutes(list(solution.routes[index]))
        best = solution
        for source in pieces[1:]:
            for destination in pieces:
                for taken in range(len(source)):
                    for place in range(len(destination) + 1):
                        shrunk = source[:taken] + source[taken + 1:]
                        grown = destination[:place] + [source[taken]] + destination[place:]
                        candidate = _with_routes(solution, (index, shrunk), (index, grown))
                        if (self._feasible(candidate)
                                and candidate.subroutes < best.subroutes):
                            best = candidate
        return best

    def _relocate_between(self, solution: Solution, index1: int, index2: int) -> Solution:
        """Move a node from one route into another route."""
        route1 = solution.routes[index1]
        route2 = solution.routes[index2]
        best = solution
        for taken in range(len(route1)):
            for place in range(len(route2) + 1):
                shrunk = route1[:taken] + route1[taken + 1:]
                grown = route2[:place] + [route1[taken]] + route2[place:]
                candidate = _with_routes(best, (index1, shrunk), (index2, grown))
                if self._feasible(candidate) and (
                        candidate.subroutes < solution.subroutes
                        or candidate.trucks < solution.trucks):
                    best = candidate
        return best