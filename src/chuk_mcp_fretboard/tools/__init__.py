"""
MCP tool implementations.

Tools are organized by domain:
- instrument - Instrument lifecycle and tuning
- theory - Scales, chords and fretboard highlighting
- export - MIDI export
"""

from chuk_mcp_fretboard.tools.export import register_export_tools
from chuk_mcp_fretboard.tools.instrument import register_instrument_tools
from chuk_mcp_fretboard.tools.theory import register_theory_tools

__all__ = [
    "register_export_tools",
    "register_instrument_tools",
    "register_theory_tools",
]
