"""Client-side task list: in-memory store, view projection and JSON import/export."""

__version__ = "0.1.0"
