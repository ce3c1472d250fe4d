"""Collect SEC 13F-HR institutional holdings from EDGAR into a SQLite database."""

__version__ = "0.1.0"