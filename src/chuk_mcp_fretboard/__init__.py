"""
chuk-mcp-fretboard - fretted-instrument music theory.

Tunings, fretboards, scales and chords, plus a highlight filter that marks
which fretboard positions belong to the current note selection.
"""

__version__ = "0.1.0"
