"""Ingestion layer.

Converts decoded sentence records into normalized state updates.
"""

__all__: list[str] = []
