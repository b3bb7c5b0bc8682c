import random

import pytest

from daalab.waste.gvns import Gvns
from daalab.waste.loader import parse_problem


def _instance(l1: int, q1: float) -> str:
    return "\n".join([
        f"L1 {l1}",
        "L2 1000",
        "num_vehicles 2",
        "num_zones 3",
        f"Q1 {q1}",
        "Q2 100",
        "V 60",
        "epsilon 0",
        "offset 0",
        "Depot 0 0",
        "IF 1 0",
        "IF1 0 1",
        "Dumpsite 5 5",
        "1 1 1 1 1",
        "2 2 2 1 1",
        "3 3 3 1 1",
    ])


def _zone_ids(solution):
    return sorted(node.id for route in solution.routes for node in route if node.id > 0)


def _solver(text, **kwargs):
    return Gvns(parse_problem(text), rng=random.Random(7), **kwargs)


def test_every_zone_visited_once_when_load_fits():
    solver = _solver(_instance(1000, 100), iterations=4, max_k=2)
    solver.solve()
    assert _zone_ids(solver.solution) == [1, 2, 3]
    assert solver.solution.trucks == 1
    assert solver.solution.subroutes == 0


def test_single_route_starts_at_depot_without_tasks():
    solver = _solver(_instance(1000, 100), iterations=3, max_k=1)
    solver.solve()
    assert len(solver.solution.routes) == 1
    assert solver.solution.routes[0][0].id == 0
    assert solver.problem.tasks == []
    assert solver.solution.transport_routes == []


def test_overload_forces_unloading_stops():
    solver = _solver(_instance(1000, 1.5), iterations=3, max_k=2)
    solver.solve()
    assert _zone_ids(solver.solution) == [1, 2, 3]
    assert solver.solution.subroutes == 2
    unloads = [node for route in solver.solution.routes for node in route
               if node.id in (-1, -2)]
    assert len(unloads) == 2


def test_trucks_match_routes():
    solver = _solver(_instance(1000, 1.5), iterations=5, max_k=3)
    solver.solve()
    assert solver.solution.trucks == len(solver.solution.routes)


def test_transport_routes_start_at_dumpsite():
    solver = _solver(_instance(1000, 1.5), iterations=2, max_k=1)
    solver.solve()
    assert len(solver.problem.tasks) == 2
    assert solver.solution.transport_routes
    for route in solver.solution.transport_routes:
        assert route[0] == solver.problem.dumpsite


def test_outer_loop_runs_max_k_rounds():
    solver = _solver(_instance(1000, 100), iterations=1, max_k=4)
    solver.solve()
    assert solver.k == 4


def test_original_problem_left_untouched():
    problem = parse_problem(_instance(1000, 1.5))
    Gvns(problem, iterations=2, max_k=1, rng=random.Random(1)).solve()
    assert problem.tasks == []


def test_unreachable_zone_raises():
    solver = _solver(_instance(1, 100), iterations=1, max_k=1)
    with pytest.raises(RuntimeError):
        solver.solve()


def test_reports_phase_times(capsys):
    _solver(_instance(1000, 100), iterations=1, max_k=1).solve()
    output = capsys.readouterr().out
    assert "Tiempo de ejecución fase recolección:" in output
    assert "Tiempo de ejecución fase transporte:" in output