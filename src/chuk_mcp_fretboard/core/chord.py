"""
Chord primitives - ChordInterval, ChordDefinition, Chord.

Chords are described by scale degrees of the root's major scale, each with
an optional accidental: a minor triad is 1 b3 5. Degrees above the octave
(9, 11, 13) fold back onto the scale (9 -> 2, 11 -> 4, 13 -> 6).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .pitch import Accidental, Pitch, PitchClass, Step
from .scale import ScaleDefinition, as_pitch, build_scale

MAX_DEGREE = 13


@dataclass(frozen=True)
class ChordInterval:
    """
    A chord tone as a scale degree with optional alteration.

    Examples:
        ChordInterval(3, Accidental.FLAT) = minor third
        ChordInterval(5, Accidental.SHARP) = augmented fifth
        ChordInterval(9) = ninth
    """

    degree: int  # 1-13
    accidental: Accidental | None = None

    def __post_init__(self) -> None:
        if not 1 <= self.degree <= MAX_DEGREE:
            raise ValueError(f"Degree must be 1-{MAX_DEGREE}, got {self.degree}")
        if self.accidental is Accidental.NATURAL:
            object.__setattr__(self, "accidental", None)

    def __str__(self) -> str:
        if self.accidental is None:
            return str(self.degree)
        return f"{self.accidental.value}{self.degree}"

    @classmethod
    def parse(cls, symbol: str | int) -> ChordInterval:
        """Parse an interval from a string like '3', 'b3', '#5', '9'."""
        if isinstance(symbol, int):
            return cls(symbol)
        symbol = symbol.strip()
        digits = symbol.lstrip("#♯b♭♮")
        prefix = symbol[: len(symbol) - len(digits)]
        if not digits.isdigit() or len(prefix) > 1:
            raise ValueError(f"Invalid chord interval: {symbol}")
        return cls(int(digits), Accidental.parse(prefix))


@dataclass(frozen=True)
class ChordDefinition:
    """
    A named chord built from scale degrees.

    Immutable and hashable.
    """

    name: str
    abbreviation: str
    intervals: tuple[ChordInterval, ...]

    def formula(self) -> str:
        """Degree formula, e.g. '1 b3 5'."""
        return " ".join(str(interval) for interval in self.intervals)

    def __len__(self) -> int:
        return len(self.intervals)

    def __str__(self) -> str:
        return self.name


def _scale_index(degree: int, scale_length: int) -> int:
    if degree > scale_length:
        return degree % scale_length
    return degree - 1


def build_chord(root: Pitch | PitchClass, definition: ChordDefinition) -> list[Pitch]:
    """
    Materialize a chord from a root.

    Each degree is looked up in the root's major scale (8 notes, octave
    included); a flat lowers that tone a half step and spells it flat, a
    sharp raises it and spells it sharp.

    Args:
        root: Root pitch (a bare pitch class is placed in the default octave)
        definition: The chord definition

    Returns:
        One pitch per interval, in definition order
    """
    scale = build_scale(root, ScaleDefinition.MAJOR)
    notes: list[Pitch] = []
    for interval in definition.intervals:
        base = scale[_scale_index(interval.degree, len(scale))]
        if interval.accidental is Accidental.FLAT:
            notes.append(base.down_step(Step.HALF).respell(Accidental.FLAT))
        elif interval.accidental is Accidental.SHARP:
            notes.append(base.up_step(Step.HALF).respell(Accidental.SHARP))
        else:
            notes.append(base)
    return notes


@dataclass(frozen=True)
class Chord:
    """
    A chord definition bound to a root pitch.

    This is the resolved form - the actual pitches that can be played.
    """

    root: Pitch
    definition: ChordDefinition
    notes: tuple[Pitch, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", as_pitch(self.root))
        object.__setattr__(self, "notes", tuple(build_chord(self.root, self.definition)))

    @property
    def symbol(self) -> str:
        """Chord symbol, e.g. 'Cm7'."""
        return f"{self.root.pitch_class}{self.definition.abbreviation}"

    def pitch_classes(self) -> list[PitchClass]:
        """Pitch classes of the chord tones, in definition order."""
        return [note.pitch_class for note in self.notes]

    def __len__(self) -> int:
        return len(self.notes)

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        return f"Chord({self.root!r}, {self.definition.name!r})"
