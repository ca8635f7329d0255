"""
Instrument management - named instruments for the current session.
"""

from chuk_mcp_fretboard.instruments.manager import InstrumentManager

__all__ = [
    "InstrumentManager",
]
