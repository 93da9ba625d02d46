"""Small networking programs: HTTP parsing and serving, TCP echo, line search, a SQLite-backed web service and a terminal game."""

__version__ = "0.1.0"