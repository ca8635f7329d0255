"""
Scale primitives - ScaleDefinition and Scale.

A scale definition is a step pattern: the distance from one note to the
next (not cumulative). A major scale is W W H W W W H.
A Scale binds a definition to a root pitch and materializes its notes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .pitch import SEMITONES_PER_OCTAVE, Pitch, PitchClass, Step


def as_pitch(root: Pitch | PitchClass) -> Pitch:
    """Place a bare pitch class in the default octave."""
    if isinstance(root, PitchClass):
        return Pitch(root)
    return root


@dataclass(frozen=True)
class ScaleDefinition:
    """
    A named step pattern.

    Steps are not required to sum to an octave; is_closed reports whether
    the pattern repeats at the octave.

    Immutable and hashable.
    """

    name: str
    steps: tuple[Step, ...]
    aliases: tuple[str, ...] = ()

    MAJOR: ClassVar[ScaleDefinition]

    @property
    def total_semitones(self) -> int:
        """Sum of all steps."""
        return sum(int(step) for step in self.steps)

    @property
    def is_closed(self) -> bool:
        """True if the steps span exactly one octave."""
        return self.total_semitones == SEMITONES_PER_OCTAVE

    def semitone_offsets(self) -> list[int]:
        """Cumulative semitone offsets from the root, root (0) included."""
        offsets = [0]
        for step in self.steps:
            offsets.append(offsets[-1] + int(step))
        return offsets

    def pattern(self) -> str:
        """Step labels, e.g. 'W W H W W W H'."""
        return " ".join(step.label for step in self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __str__(self) -> str:
        return self.name


ScaleDefinition.MAJOR = ScaleDefinition(
    "major",
    (Step.WHOLE, Step.WHOLE, Step.HALF, Step.WHOLE, Step.WHOLE, Step.WHOLE, Step.HALF),
    ("ionian",),
)


def build_scale(root: Pitch | PitchClass, definition: ScaleDefinition) -> list[Pitch]:
    """
    Materialize a scale from a root.

    Returns len(steps) + 1 notes. For octave-closed patterns the final
    note is the root an octave up; dropping it is left to the caller.

    Args:
        root: Root pitch (a bare pitch class is placed in the default octave)
        definition: The step pattern

    Returns:
        Ordered list of pitches, root first
    """
    notes = [as_pitch(root)]
    for step in definition.steps:
        notes.append(notes[-1].up_step(step))
    return notes


@dataclass(frozen=True)
class Scale:
    """
    A scale definition bound to a root pitch.

    Examples:
        Scale(Pitch.parse("C4"), ScaleDefinition.MAJOR).notes
        -> C4 D4 E4 F4 G4 A4 B4 C5
    """

    root: Pitch
    definition: ScaleDefinition
    notes: tuple[Pitch, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", as_pitch(self.root))
        object.__setattr__(self, "notes", tuple(build_scale(self.root, self.definition)))

    def pitch_classes(self) -> list[PitchClass]:
        """Distinct pitch classes in order, octave repeats removed."""
        seen: set[int] = set()
        result: list[PitchClass] = []
        for note in self.notes:
            if note.semitone not in seen:
                seen.add(note.semitone)
                result.append(note.pitch_class)
        return result

    def contains(self, pitch_class: PitchClass) -> bool:
        """True if the pitch class (or an enharmonic spelling) is in the scale."""
        return any(note.semitone == pitch_class.semitone for note in self.notes)

    def __len__(self) -> int:
        return len(self.notes)

    def __str__(self) -> str:
        return f"{self.root.pitch_class} {self.definition.name}"

    def __repr__(self) -> str:
        return f"Scale({self.root!r}, {self.definition.name!r})"
