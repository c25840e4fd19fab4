"""Delimited text table tools, point classification codes, numeric helpers and progress reporting."""

__version__ = "0.1.0"