# docindex/__init__.py
"""Term-frequency indexing of markup document collections."""

__version__ = "0.1.0"
