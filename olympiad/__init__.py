"""Solutions to classic programming-contest problems: digit-string arithmetic,
shortest paths, grid search, sorting and assorted puzzles."""

__version__ = "0.1.0"
__all__ = [
    "bigint",
    "decimal_arith",
    "graphs",
    "puzzles",
    "contests",
    "grid_search",
    "merge_sort",
]