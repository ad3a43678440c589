"""Classic algorithm and data-structure exercises: lists, searching, sorting, strings and more."""

__version__ = "0.1.0"