"""Classic contest algorithms and data structures in plain Python: graphs, trees, strings, DP and backtracking."""

__version__ = "0.1.0"