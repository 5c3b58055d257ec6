"""Todo list service with a random joke endpoint."""

__version__ = "1.0.0"
