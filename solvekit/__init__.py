"""Classic algorithm solutions for arrays, strings, linked lists, trees, grids and graphs."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "combinatorics",
    "graphs",
    "grids",
    "linked_list",
    "search",
    "strings",
    "trees",
]