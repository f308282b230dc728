"""Single-view to-do list viewer backed by a remote mock task API."""

__version__ = "0.1.0"
