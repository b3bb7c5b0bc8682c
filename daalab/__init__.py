"""Waste-collection routing heuristics and a graph for travelling-salesman instances."""

__version__ = "0.1.0"