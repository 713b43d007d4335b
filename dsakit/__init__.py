"""Classic data-structure and algorithm routines: lists, trees, caches, stacks, arrays, strings, backtracking and grids."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "backtracking",
    "caches",
    "grid",
    "linkedlist",
    "randomlist",
    "stacks",
    "strings",
    "tree",
]