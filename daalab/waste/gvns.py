"""General variable neighbourhood search for waste collection routing."""

from __future__ import annotations

import random
import time
from collections.abc import Callable

from daalab.waste.grasp import INT_MAX, Grasp
from daalab.waste.model import Problem, Solution

_Move = Callable[[Solution, int], Solution]


class Gvns(Grasp):
    """Repeats GRASP constructions followed by a variable neighbourhood descent.

    The outer loop runs ``max_k`` times. Each round adds ``iterations``
    randomised constructions to the pool and improves every pooled
    solution by trying four neighbourhoods in turn. A neighbourhood's
    result is kept only when it lowers the number of subroutes.
    """

    def __init__(self, problem: Problem, iterations: int = 100, max_k: int = 3,
                 lrc: int = 3, rng: random.Random | None = None) -> None:
        super().__init__(problem, iterations=iterations, lrc=lrc, rng=rng)
        self.max_k = max_k
        self.k = 0

    def solve(self) -> None:
        start = time.perf_counter()
        best = Solution()
        while self.k < self.max_k:
            for _ in range(self.iterations):
                self._reset_solution()
                self._construct()
                self.solutions.append(self.solution.copy())
            best = self._variable_descent()
            if best.subroutes < self.solution.subroutes:
                self.solution = best.copy()
            else:
                best = self.solution.copy()
                self.solutions.clear()
                self._reset_solution()
            self.k += 1
        self.solution = best.copy()
        elapsed = time.perf_counter() - start
        print(f"Tiempo de ejecución fase recolección: {elapsed} segundos")

        start = time.perf_counter()
        self.problem.reset_tasks()
        self.build_tasks()
        self.compute_transport_routes()
        elapsed = time.perf_counter() - start
        print(f"Tiempo de ejecución fase transporte: {elapsed} segundos")

    @staticmethod
    def _over_routes(solution: Solution, count: int, move: _Move) -> Solution:
        for index in range(count):
            solution = move(solution, index)
        return solution

    @staticmethod
    def _over_pairs(solution: Solution, count: int,
                    move: Callable[[Solution, int, int], Solution]) -> Solution:
        for first in range(count):
            for second in range(count):
                if first != second:
                    solution = move(solution, first, second)
        return solution

    def _variable_descent(self) -> Solution:
        """Improve every pooled solution and return the one with fewest subroutes."""
        neighbourhoods: tuple[Callable[[Solution, int], Solution], ...] = (
            lambda sol, count: self._over_routes(sol, count, self._swap_within),
            lambda sol, count: self._over_pairs(sol, count, self._swap_between),
            lambda sol, count: self._over_routes(sol, count, self._relocate_within),
            lambda sol, count: self._over_pairs(sol, count, self._relocate_between),
        )
        best = Solution(subroutes=INT_MAX)
        for position, solution in enumerate(self.solutions):
            count = len(solution.routes)
            for neighbourhood in neighbourhoods:
                backup = solution
                candidate = neighbourhood(solution, count)
                solution = candidate if candidate.subroutes < backup.subroutes else backup
            self.solutions[position] = solution
            if solution.subroutes < best.subroutes:
                best = solution
        return best