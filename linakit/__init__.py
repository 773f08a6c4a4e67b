"""Vectors, spatial search, statistics and point-cloud tools."""

__version__ = "0.1.0"