"""Quest and user models with SQLite-backed quest storage for the Sidequest server."""

__version__ = "0.1.0"