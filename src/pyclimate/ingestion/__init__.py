"""Ingestion layer.

This package contains the parser that turns raw TDV lines into typed
observation records and the drivers that feed files into an aggregation
table.
"""

__all__: list[str] = []
