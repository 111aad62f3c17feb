"""Search index projection engine for multi-locale article content."""

__version__ = "0.1.0"
