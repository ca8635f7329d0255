"""
Highlight filter - marks which fretboard cells belong to a note selection.

Matching is by pitch class (octave-independent, enharmonic-aware). Only the
visibility flags change; pitches are never touched.
"""

from __future__ import annotations

from collections.abc import Iterable

from .fretboard import Fretboard
from .pitch import PitchClass


def show_all(fretboard: Fretboard) -> int:
    """Make every cell visible. Returns the visible count."""
    for cell in fretboard.cells():
        cell.visible = True
    return fretboard.size


def show_notes(fretboard: Fretboard, pitch_classes: Iterable[PitchClass]) -> int:
    """
    Show exactly the cells whose pitch class is in the selection.

    Args:
        fretboard: Board to mutate
        pitch_classes: Selected pitch classes (any spelling)

    Returns:
        Number of visible cells afterwards
    """
    selected = {pc.semitone for pc in pitch_classes}
    count = 0
    for cell in fretboard.cells():
        cell.visible = cell.pitch.semitone in selected
        count += cell.visible
    return count
