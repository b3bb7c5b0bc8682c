[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "daalab"
version = "0.1.0"
description = "Waste-collection routing heuristics (greedy, GRASP, GVNS) and a weighted graph for travelling-salesman instances"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "travelling-salesman",
    "greedy",
    "grasp",
    "vns",
    "vehicle-routing",
    "waste-collection",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
daalab-waste = "daalab.waste.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["daalab"]

[tool.pytest.ini_options]
addopts = "-ra"
