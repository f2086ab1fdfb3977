"""Classic algorithms: backtracking, union-find, graphs, trees, TSP, DP and array scans."""

__version__ = "0.1.0"
__all__ = ["backtracking", "dsu", "graph", "tree", "tsp", "dp", "sequences"]