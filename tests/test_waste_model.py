import pytest

from daalab.waste.model import Graph, Node, Position, Problem, Solution, Task

ORIGIN = Position(0, 0)


def make_graph(zone_positions, velocity=60.0):
    graph = Graph(velocity=velocity)
    for node_id in (-2, -1, 0, -3):
        graph.add_node(Node(node_id, ORIGIN))
    for index, position in enumerate(zone_positions, start=1):
        graph.add_node(Node(index, position, 1.0, 1.0))
    return graph


def make_problem():
    depot = Node(0, ORIGIN)
    if_node = Node(-1, ORIGIN)
    if1_node = Node(-2, ORIGIN)
    dumpsite = Node(-3, ORIGIN)
    problem = Problem(100, 10, Graph(), depot, 60.0, if_node, if1_node, 50, dumpsite, 0)
    for node in (if1_node, if_node, depot, dumpsite):
        problem.add_node(node)
    return problem


def test_distance_is_manhattan():
    assert Position(0, 0).distance(Position(3, 4)) == 7


def test_distance_is_symmetric_and_zero_to_itself():
    a, b = Position(1.5, -2), Position(-4, 7)
    assert a.distance(b) == b.distance(a)
    assert a.distance(a) == 0


def test_nodes_compare_by_id_only():
    assert Node(5, Position(1, 1), 2, 3) == Node(5, Position(9, 9), 7, 8)
    assert Node(5) != Node(6)


def test_graph_cost_zero_to_itself_and_symmetric():
    graph = make_graph([Position(1, 0), Position(0, 2)])
    assert graph.cost(1, 1) == 0
    assert graph.cost(1, 2) == graph.cost(2, 1)


def test_graph_cost_scales_inversely_with_velocity():
    slow = make_graph([Position(3, 0), Position(0, 5)], velocity=30.0)
    fast = make_graph([Position(3, 0), Position(0, 5)], velocity=60.0)
    assert slow.cost(1, 2) == pytest.approx(2 * fast.cost(1, 2))


def test_graph_cost_at_hourly_velocity_equals_distance_in_minutes():
    graph = make_graph([Position(1, 0), Position(0, 2)], velocity=60.0)
    assert graph.cost(1, 2) == pytest.approx(Position(1, 0).distance(Position(0, 2)))


def test_graph_unknown_identifier_raises():
    graph = make_graph([Position(1, 0)])
    with pytest.raises(IndexError):
        graph.cost(1, 9)


def test_nearest_unload_picks_first_facility_when_closer():
    graph = Graph(velocity=60.0)
    graph.add_node(Node(-2, Position(10, 0)))
    graph.add_node(Node(-1, Position(50, 0)))
    graph.add_node(Node(0, ORIGIN))
    graph.add_node(Node(-3, ORIGIN))
    zone = Node(1, Position(11, 0))
    graph.add_node(zone)
    assert graph.nearest_unload(zone) is graph.nodes[0]


def test_nearest_unload_picks_second_facility_otherwise():
    graph = Graph(velocity=60.0)
    graph.add_node(Node(-2, Position(50, 0)))
    graph.add_node(Node(-1, Position(10, 0)))
    graph.add_node(Node(0, ORIGIN))
    graph.add_node(Node(-3, ORIGIN))
    zone = Node(1, Position(11, 0))
    graph.add_node(zone)
    assert graph.nearest_unload(zone) is graph.nodes[1]


def test_problem_applies_velocity_to_its_graph():
    problem = make_problem()
    assert problem.graph.velocity == 60.0


def test_problem_add_node_updates_graph_and_list():
    problem = make_problem()
    zone = Node(1, Position(2, 2))
    problem.add_node(zone)
    assert problem.nodes[-1] == zone
    assert problem.graph.nodes[-1] == zone
    assert len(problem.nodes) == len(problem.graph.nodes)


def test_problem_does_not_share_the_given_graph():
    graph = Graph()
    problem = Problem(1, 1, graph, Node(0), 60.0, Node(-1), Node(-2), 1, Node(-3), 0)
    problem.add_node(Node(1))
    assert graph.nodes == []


def test_problem_tasks_add_and_reset():
    problem = make_problem()
    problem.add_task(problem.if_node, 4.0, 2.0)
    assert problem.tasks == [Task(problem.if_node, 4.0, 2.0)]
    problem.reset_tasks()
    assert problem.tasks == []


def test_solution_counts_trucks_and_routes():
    solution = Solution()
    solution.add_truck()
    solution.add_truck()
    solution.push_route([Node(0), Node(1)])
    assert solution.trucks == 2
    assert solution.routes == [[Node(0), Node(1)]]


def test_solution_transport_truck_gets_own_route():
    solution = Solution()
    solution.push_transport_truck(3.0, 4.0)
    solution.push_transport_node(0, Node(-3))
    solution.push_transport_truck(1.0, 1.0)
    assert solution.transport_routes == [[Node(-3)], []]
    assert solution.transport_trucks[0].time == 3.0
    assert solution.transport_trucks[0].weight == 4.0


def test_solution_replace_route():
    solution = Solution()
    solution.push_route([Node(0)])
    solution.replace_route(0, [Node(2), Node(3)])
    assert solution.routes == [[Node(2), Node(3)]]


def test_solution_feasibility_limits():
    solution = Solution()
    solution.push_route([Node(1, weight=4, time=5), Node(2, weight=4, time=5)])
    assert solution.is_feasible(10, 8)
    assert not solution.is_feasible(9, 8)
    assert not solution.is_feasible(10, 7)


def test_solution_copy_is_independent():
    solution = Solution()
    solution.push_route([Node(0)])
    solution.push_transport_truck(1.0, 2.0)
    clone = solution.copy()
    clone.routes[0].append(Node(1))
    clone.transport_trucks[0].weight = 9.0
    clone.add_truck()
    assert solution.routes == [[Node(0)]]
    assert solution.transport_trucks[0].weight == 2.0
    assert solution.trucks == 0