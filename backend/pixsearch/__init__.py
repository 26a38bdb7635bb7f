"""PixSearch backend: image search with per-user history and top terms."""

__version__ = "0.1.0"
