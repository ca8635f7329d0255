#!/usr/bin/env python3
"""
Example: Show scales and chords on a guitar neck.

This demonstrates the core pipeline - root + tuning style -> fretboard,
root + pattern -> notes, notes + fretboard -> highlighted positions.

Usage:
    python examples/show_scale.py
"""

from chuk_mcp_fretboard.catalog import Catalog
from chuk_mcp_fretboard.constants import TuningStyle
from chuk_mcp_fretboard.core import Chord, Pitch, PitchClass, Scale
from chuk_mcp_fretboard.display import format_fretboard
from chuk_mcp_fretboard.models import Instrument


def main() -> None:
    """Print a few highlighted fretboards."""
    catalog = Catalog()
    guitar = Instrument(family="guitar", root="E2", fret_count=12)

    print("Standard tuning:", " ".join(str(p) for p in guitar.tuning))
    print(format_fretboard(guitar.fretboard))

    # Example 1: A minor pentatonic across the neck
    scale = Scale(Pitch(PitchClass.A, 3), catalog.require_scale("minor pentatonic"))
    print(f"\n{scale}: " + " ".join(str(p) for p in scale.notes))
    count = guitar.show_notes(scale.pitch_classes())
    print(f"{count} positions")
    print(format_fretboard(guitar.fretboard))

    # Example 2: the same selection survives a retune to drop D
    guitar.change_tuning(TuningStyle.DROP, "D2")
    print("\nDrop D:", " ".join(str(p) for p in guitar.tuning))
    print(format_fretboard(guitar.fretboard))

    # Example 3: chord tones of G7 in open G
    guitar.change_tuning(TuningStyle.OPEN, "D2")
    chord = Chord(Pitch(PitchClass.G, 3), catalog.require_chord("7"))
    guitar.show_notes(chord.pitch_classes())
    print(f"\n{chord.symbol} ({chord.definition.formula()}) in open D:")
    print(format_fretboard(guitar.fretboard, with_octaves=True))


if __name__ == "__main__":
    main()
