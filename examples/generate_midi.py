#!/usr/bin/env python3
"""
Example: Render scales and chords to MIDI files.

Run this script to create playable MIDI files you can open in any DAW
or MIDI player.

Usage:
    python examples/generate_midi.py
    # Creates: examples/output/*.mid
"""

from pathlib import Path

from chuk_mcp_fretboard.catalog import Catalog
from chuk_mcp_fretboard.compiler.midi import chord_to_midi, scale_to_midi
from chuk_mcp_fretboard.core import Chord, Pitch, Scale


def main() -> None:
    """Generate example MIDI files."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)
    catalog = Catalog()

    for name in ("major", "dorian", "blues"):
        scale = Scale(Pitch.parse("C4"), catalog.require_scale(name))
        path = output_dir / f"C4_{name}.mid"
        scale_to_midi(scale, tempo_bpm=100).save(str(path))
        print(f"{scale}: {' '.join(str(p) for p in scale.notes)}")
        print(f"  Created: {path}")

    for abbreviation in ("maj7", "m7", "7", "m7b5"):
        chord = Chord(Pitch.parse("A3"), catalog.require_chord(abbreviation))
        path = output_dir / f"{chord.symbol}.mid"
        chord_to_midi(chord, tempo_bpm=80).save(str(path))
        print(f"{chord.symbol}: {' '.join(str(p) for p in chord.notes)}")
        print(f"  Created: {path}")

    print("\nDone! Open the MIDI files in your DAW to hear them.")


if __name__ == "__main__":
    main()
