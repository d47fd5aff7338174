"""Classic algorithms and data structures: strings, numbers, arrays, graphs, trees, lists and backtracking."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "graphs",
    "linked",
    "numeric",
    "strings",
    "structures",
    "trees",
]