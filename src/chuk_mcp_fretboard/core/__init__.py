"""
Core fretboard primitives.

These are the pure building blocks everything else composes on:
- PitchClass / Pitch: spelled notes and semitone arithmetic
- Step: semitone distances for scale tables
- ScaleDefinition / Scale: step patterns bound to a root
- ChordDefinition / Chord: degree formulas bound to a root
- calculate_tuning: open strings for a family and tuning style
- Fretboard: the pitch at every (string, fret) position
- show_all / show_notes: the highlight filter
"""

from chuk_mcp_fretboard.core.chord import Chord, ChordDefinition, ChordInterval, build_chord
from chuk_mcp_fretboard.core.fretboard import FretCell, Fretboard, FretPosition, build_fretboard
from chuk_mcp_fretboard.core.highlight import show_all, show_notes
from chuk_mcp_fretboard.core.pitch import Accidental, NaturalNote, Pitch, PitchClass, Step
from chuk_mcp_fretboard.core.scale import Scale, ScaleDefinition, build_scale
from chuk_mcp_fretboard.core.tuning import calculate_tuning, max_string_count

__all__ = [
    # Pitch
    "NaturalNote",
    "Accidental",
    "PitchClass",
    "Pitch",
    "Step",
    # Scale
    "ScaleDefinition",
    "Scale",
    "build_scale",
    # Chord
    "ChordInterval",
    "ChordDefinition",
    "Chord",
    "build_chord",
    # Tuning
    "calculate_tuning",
    "max_string_count",
    # Fretboard
    "Fretboard",
    "FretCell",
    "FretPosition",
    "build_fretboard",
    # Highlight
    "show_all",
    "show_notes",
]
