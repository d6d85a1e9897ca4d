"""Classic algorithm exercises on arrays, strings, graphs, heaps, greedy choices and backtracking."""

__version__ = "0.1.0"
__all__ = ["arrays", "backtracking", "graph", "greedy", "heaps", "strings"]