"""Waste-collection routing model with greedy, GRASP and GVNS heuristics."""