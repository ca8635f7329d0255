"""
Interval catalog - named scale and chord tables.

The tables are plain data (YAML) so new scales and chords can be added
without code. A project catalog directory can override the library.
"""

from chuk_mcp_fretboard.catalog.loader import Catalog, normalize_name

__all__ = [
    "Catalog",
    "normalize_name",
]
