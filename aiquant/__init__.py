"""Market-data value types and streaming/batch technical indicators."""

__version__ = "1.0.0"