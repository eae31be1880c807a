"""Classic data-structure and algorithm exercises: numbers, arrays, searching, a maze, a linked list, sorting and strings."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "linked_list",
    "maze",
    "numbers",
    "searching",
    "sorting",
    "strings",
]