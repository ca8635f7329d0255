"""
Pydantic models for the fretboard system.

This module provides:
- Instrument: tuned fretboard with highlight state
"""

from chuk_mcp_fretboard.models.instrument import Instrument

__all__ = [
    "Instrument",
]
