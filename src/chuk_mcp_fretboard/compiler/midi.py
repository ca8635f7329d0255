"""
MIDI export - audition scales and chords in any MIDI player.

This module handles conversion from pitches to MIDI files using mido.
All operations are deterministic: same input → same output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chuk_mcp_fretboard.core.chord import Chord
    from chuk_mcp_fretboard.core.pitch import Pitch
    from chuk_mcp_fretboard.core.scale import Scale


# Standard ticks per beat (quarter note) - industry standard
TICKS_PER_BEAT = 480

DEFAULT_VELOCITY = 100


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    This is the lowest-level representation before writing to MIDI.
    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int  # Absolute start time in ticks
    duration_ticks: int  # Duration in ticks
    velocity: int  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a MidiFile.

    Args:
        events: Sequence of MidiEvent objects
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    tempo_us = int(60_000_000 / tempo_bpm)
    track.append(MetaMessage("set_tempo", tempo=tempo_us, time=0))

    messages: list[tuple[int, Message]] = []
    for event in events:
        messages.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,
                ),
            )
        )
        messages.append(
            (
                event.start_ticks + event.duration_ticks,
                Message("note_off", channel=event.channel, note=event.pitch, velocity=0, time=0),
            )
        )

    # note_off before note_on at the same tick
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))
    return mid


def pitches_to_events(
    pitches: Sequence[Pitch],
    arpeggiate: bool = True,
    beats_per_note: float = 1.0,
    velocity: int = DEFAULT_VELOCITY,
    channel: int = 0,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> list[MidiEvent]:
    """
    Turn pitches into note events.

    Args:
        pitches: Pitches to play, in order
        arpeggiate: One after another (True) or all at once (False)
        beats_per_note: Length of each note in beats
        velocity: Note velocity (0-127)
        channel: MIDI channel
        ticks_per_beat: Resolution

    Returns:
        One MidiEvent per pitch
    """
    duration = beats_to_ticks(beats_per_note, ticks_per_beat)
    return [
        MidiEvent(
            pitch=pitch.to_midi(),
            start_ticks=i * duration if arpeggiate else 0,
            duration_ticks=duration,
            velocity=velocity,
            channel=channel,
        )
        for i, pitch in enumerate(pitches)
    ]


def scale_to_midi(scale: Scale, tempo_bpm: int = 120, beats_per_note: float = 1.0) -> MidiFile:
    """Play a scale upwards, one note per beat by default."""
    events = pitches_to_events(scale.notes, arpeggiate=True, beats_per_note=beats_per_note)
    return events_to_midi(events, tempo_bpm=tempo_bpm)


def chord_to_midi(
    chord: Chord,
    tempo_bpm: int = 120,
    beats: float = 4.0,
    arpeggiate: bool = False,
) -> MidiFile:
    """
    Play a chord, block (default) or arpeggiated.

    Block chords sound for `beats`; arpeggios spend `beats` per chord tone.
    """
    events = pitches_to_events(chord.notes, arpeggiate=arpeggiate, beats_per_note=beats)
    return events_to_midi(events, tempo_bpm=tempo_bpm)


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat position to ticks."""
    return int(beats * ticks_per_beat)
