"""Classic data structures and algorithms: sorting, searching, matrices, graphs, queues, stacks, recursion and a sorting command."""

__version__ = "0.1.0"

__all__ = [
    "arrayops",
    "cli",
    "graph",
    "matrix",
    "queues",
    "recursion",
    "sorting",
    "stacks",
]