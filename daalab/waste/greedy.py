"""Deterministic greedy construction for waste collection routing."""

from __future__ import annotations

import time

from daalab.waste.algorithm import Algorithm, VisitOutcome
from daalab.waste.model import Node


class GreedyCollector(Algorithm):
    """Always drives to the nearest pending zone, unloading or returning when needed."""

    def solve(self) -> None:
        start = time.perf_counter()
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
            target = pending[0]
            outcome = self.can_visit(current, target, current_time, current_load)

            if outcome is VisitOutcome.VISIT:
                current = target
                current_load += target.weight
                current_time += target.time
                visited.append(target)
                pending.pop(0)
            elif outcome is VisitOutcome.OVER_LOAD:
                unload = graph.nearest_unload(current)
                problem.add_task(unload, current_time + graph.cost(current.id, unload.id),
                                 current_load)
                current_time += (graph.cost(current.id, unload.id)
                                 + graph.cost(unload.id, target.id)
                                 + target.time)
                current_load = target.weight
                pending.pop(0)
                visited.append(unload)
                current = target
                visited.append(target)
                subroutes += 1
            else:
                if current.id == depot.id and current_time == 0 and current_load == 0:
                    raise RuntimeError(
                        f"zone {target.id} cannot be reached within the time limit")
                unload = graph.nearest_unload(current)
                problem.add_task(unload, current_time + graph.cost(current.id, unload.id),
                                 current_load)
                current_load = 0.0
                current = depot
                visited.extend((unload, depot))
                current_time = 0.0
                self.solution.add_truck()
                self.solution.push_route(visited)
                visited = [depot]
                subroutes += 1

        elapsed = time.perf_counter() - start
        print(f"Tiempo de ejecución fase constructuva: {elapsed} segundos")

        self.solution.push_route(visited)
        self.solution.subroutes = subroutes

        start = time.perf_counter()
        self.compute_transport_routes()
        elapsed = time.perf_counter() - start
        print(f"Tiempo de ejecución fase de mejora: {elapsed} segundos")