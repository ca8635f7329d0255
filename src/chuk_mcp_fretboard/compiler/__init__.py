"""
Compiler - renders note sequences for playback.

MIDI export turns scales and chords into Standard MIDI Files so they can be
auditioned in any player or DAW.
"""

from chuk_mcp_fretboard.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    chord_to_midi,
    events_to_midi,
    pitches_to_events,
    scale_to_midi,
)

__all__ = [
    "TICKS_PER_BEAT",
    "MidiEvent",
    "chord_to_midi",
    "events_to_midi",
    "pitches_to_events",
    "scale_to_midi",
]
