"""Reading waste collection instances from their text format."""

from __future__ import annotations

from pathlib import Path

from daalab.waste.model import Graph, Node, Position, Problem

_INTEGER_KEYS = frozenset({
    "L1", "L2", "num_vehicles", "num_zones", "epsilon", "offset",
    "Lx", "Ly", "Q1", "Q2",
})
_POINT_KEYS = frozenset({"Depot", "Dumpsite", "IF", "IF1"})
_REQUIRED = ("L1", "Q1", "Q2", "V")


def _integer(key: str, fields: list[str]) -> int:
    if not fields:
        raise ValueError(f"missing value for {key}")
    try:
        return int(float(fields[0]))
    except ValueError as exc:
        raise ValueError(f"invalid value for {key}: {fields[0]!r}") from exc


def _number(key: str, fields: list[str]) -> float:
    if not fields:
        raise ValueError(f"missing value for {key}")
    try:
        return float(fields[0])
    except ValueError as exc:
        raise ValueError(f"invalid value for {key}: {fields[0]!r}") from exc


def _point(key: str, fields: list[str]) -> Position:
    if len(fields) < 2:
        raise ValueError(f"missing coordinates for {key}")
    return Position(_integer(key, fields[:1]), _integer(key, fields[1:2]))


def _zone(fields: list[str]) -> Node | None:
    if len(fields) < 5:
        return None
    try:
        node_id = int(fields[0])
        x, y, service, demand = (float(value) for value in fields[1:5])
    except ValueError:
        return None
    return Node(node_id, Position(x, y), weight=demand, time=service)


def parse_problem(text: str) -> Problem:
    """Build a problem from the text of an instance file.

    Lines start with a key followed by values; lines starting with a
    digit describe a zone as "id x y service_time demand". Unknown lines
    are ignored.
    """
    values: dict[str, float] = {}
    points: dict[str, Position] = {}
    zones: list[Node] = []

    for line in text.splitlines():
        fields = line.split()
        if not fields:
            continue
        key, rest = fields[0], fields[1:]
        if key in _INTEGER_KEYS:
            values[key] = _integer(key, rest)
        elif key == "V":
            values[key] = _number(key, rest)
        elif key in _POINT_KEYS:
            points[key] = _point(key, rest)
        elif key[0].isdigit():
            zone = _zone(fields)
            if zone is not None:
                zones.append(zone)

    missing = [key for key in _REQUIRED if key not in values]
    missing += [key for key in sorted(_POINT_KEYS) if key not in points]
    if missing:
        raise ValueError(f"instance is missing: {', '.join(missing)}")

    depot = Node(0, points["Depot"], 0)
    if_node = Node(-1, points["IF"], 0)
    if1_node = Node(-2, points["IF1"], 0)
    dumpsite = Node(-3, points["Dumpsite"], 0)
    problem = Problem(values["L1"], values["Q1"], Graph(), depot, values["V"],
                      if_node, if1_node, values["Q2"], dumpsite, values.get("offset", 0))
    for node in (if1_node, if_node, depot, dumpsite, *zones):
        problem.add_node(node)
    return problem


def read_problem(path: str | Path) -> Problem:
    """Read an instance file and build its problem."""
    return parse_problem(Path(path).read_text(encoding="utf-8"))