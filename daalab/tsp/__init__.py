"""Weighted undirected graph for travelling-salesman instances."""