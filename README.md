# daalab

Algorithm-design exercises in pure Python, with no dependencies outside the
standard library:

- **`daalab.waste`**: a waste-collection routing model with a greedy
  constructor and GRASP and GVNS heuristics, followed by a transport phase
  that assigns the unloading tasks to transport trucks.
- **`daalab.tsp.graph`**: a weighted, undirected graph for
  travelling-salesman instances, with random generation and a plain-text file
  format.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tool

```
daalab-waste <instances-directory>
```

The tool clears the terminal, prints a header and then reads every regular
file in the directory (in sorted order) as a waste-collection instance. For
each instance it runs GVNS with `max_k` set to 3, 4 and 5, three times each,
and writes to `salida.txt` in the current directory the phase timings, the
number of zones, the number of collection trucks used and the running time of
each run. Problems with an instance are reported on standard error and the
tool moves on to the next file. It exits with status 1 when no directory is
given or the argument is not a directory.

## Instance format

Each line starts with a key followed by its values; unknown lines are ignored:

```
L1 480            # maximum duration of a collection route (minutes)
L2 600            # maximum duration of a transport route
Q1 100            # capacity of a collection truck
Q2 300            # capacity of a transport truck
V 30              # speed
Depot 0 0
IF 10 10          # first unloading facility
IF1 -10 5         # second unloading facility
Dumpsite 20 0
offset 0
1 2.0 3.0 15 20   # zone: id x y service_time demand
```

`L1`, `Q1`, `Q2`, `V`, `Depot`, `IF`, `IF1` and `Dumpsite` are required;
`daalab.waste.loader.parse_problem` raises `ValueError` naming whatever is
missing. Travel time between two locations is their Manhattan distance divided
by `V`, times 60.

## Library use

### Waste collection

```python
from daalab.waste.loader import read_problem
from daalab.waste.gvns import Gvns

problem = read_problem("instance.txt")
algorithm = Gvns(problem, iterations=100, max_k=3, lrc=3)
algorithm.solve()
print(algorithm.format_solution())
print(algorithm.solution.trucks, algorithm.solution.subroutes)
print(algorithm.solution.transport_routes)
```

- `daalab.waste.greedy.GreedyCollector(problem)` always drives to the nearest
  pending zone.
- `daalab.waste.grasp.Grasp(problem, iterations=15000, lrc=3, rng=None)` picks
  at random among the `lrc` nearest zones, repeats the construction
  `iterations` times and applies local searches to every result.
- `daalab.waste.gvns.Gvns(problem, iterations=100, max_k=3, lrc=3, rng=None)`
  repeats GRASP constructions `max_k` times, each followed by a variable
  neighbourhood descent.

Every algorithm works on its own copy of the problem, prints its phase timings
and raises `RuntimeError` when a zone cannot be reached within the time limit
even from the depot. Pass a seeded `random.Random` as `rng` for reproducible
runs. The model classes (`Position`, `Node`, `Task`, `Graph`, `Problem`,
`Solution`) live in `daalab.waste.model`.

### Travelling-salesman graphs

```python
from daalab.tsp.graph import Graph

graph = Graph()
graph.generate_random(5)        # nodes "0".."4", costs 1..100
graph.save_file("instance.txt")

loaded = Graph()
loaded.read_file("instance.txt")
print(loaded.nodes(), loaded.cost("0", "1"))
```

The file holds the node count followed by `node node cost` triples. Edges are
undirected, nodes are listed in sorted order and a missing edge costs 0.
`write_random` generates and saves in one step.

## What this package does not do

The package has no travelling-salesman solvers and no command for them:
`daalab.tsp` provides only the graph. The `daalab.divide` subpackage holds no
algorithms.