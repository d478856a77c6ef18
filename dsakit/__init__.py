"""Classic data structures and algorithms: sorting, searching, trees, graphs,
containers and small numeric and string routines."""

__version__ = "0.1.0"