"""
Pitch primitives - NaturalNote, Accidental, PitchClass, Pitch and Step.

PitchClass is a closed set of spellings: only the (natural, accidental)
pairs that actually occur are members, so C-flat, F-flat, E-sharp and
B-sharp cannot be constructed. Pitch adds an octave and does the modular
semitone arithmetic the rest of the system is built on.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum

from chuk_mcp_fretboard.constants import A4_FREQUENCY, DEFAULT_OCTAVE, ErrorMessages
from chuk_mcp_fretboard.errors import InvalidAccidentalError

SEMITONES_PER_OCTAVE = 12

_PITCH_PATTERN = re.compile(r"([A-Ga-g][^\d-]*)(-?\d+)?")


class NaturalNote(Enum):
    """The seven natural notes, ordered by semitone offset from C."""

    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    A = "A"
    B = "B"

    @property
    def semitone(self) -> int:
        """Semitone offset from C (C=0 ... B=11)."""
        return _NATURAL_SEMITONES[self.value]


_NATURAL_SEMITONES: dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}


class Accidental(Enum):
    """
    Accidentals a spelling can carry.

    NATURAL is an explicit natural sign and means the same as no accidental.
    """

    SHARP = "#"
    FLAT = "b"
    NATURAL = "♮"

    @property
    def shift(self) -> int:
        """Semitone shift applied to the natural note."""
        return _ACCIDENTAL_SHIFTS[self.value]

    @classmethod
    def parse(cls, symbol: str) -> Accidental | None:
        """
        Parse an accidental symbol.

        Accepts '#', '♯', 'b', '♭', '♮' and the empty string (no accidental).
        """
        symbol = symbol.strip()
        if not symbol:
            return None
        if symbol in _ACCIDENTAL_ALIASES:
            return cls(_ACCIDENTAL_ALIASES[symbol])
        raise ValueError(f"Unknown accidental: {symbol}")


_ACCIDENTAL_SHIFTS: dict[str, int] = {"#": 1, "b": -1, "♮": 0}
_ACCIDENTAL_ALIASES: dict[str, str] = {
    "#": "#",
    "♯": "#",
    "s": "#",
    "b": "b",
    "♭": "b",
    "♮": "♮",
    "n": "♮",
}


class PitchClass(Enum):
    """
    A spelled pitch class (octave-independent).

    Enharmonic spellings are distinct members (Ds and Eb) that share a
    semitone number. Use same_pitch_class() for enharmonic comparison.
    """

    C = "C"
    Cs = "C#"
    Db = "Db"
    D = "D"
    Ds = "D#"
    Eb = "Eb"
    E = "E"
    F = "F"
    Fs = "F#"
    Gb = "Gb"
    G = "G"
    Gs = "G#"
    Ab = "Ab"
    A = "A"
    As = "A#"
    Bb = "Bb"
    B = "B"

    @property
    def natural(self) -> NaturalNote:
        """The natural note this spelling is built on."""
        return NaturalNote(self.value[0])

    @property
    def accidental(self) -> Accidental | None:
        """The accidental, or None for a natural spelling."""
        if len(self.value) == 1:
            return None
        return Accidental(self.value[1])

    @property
    def semitone(self) -> int:
        """Semitone number 0-11 (C=0)."""
        shift = self.accidental.shift if self.accidental else 0
        return (self.natural.semitone + shift) % SEMITONES_PER_OCTAVE

    def same_pitch_class(self, other: PitchClass) -> bool:
        """True if both spellings sound the same (C# and Db)."""
        return self.semitone == other.semitone

    def spell(self, pretty: bool = False) -> str:
        """Human-readable name, optionally with ♯/♭ glyphs."""
        if not pretty:
            return self.value
        return self.value.replace("#", "♯").replace("b", "♭")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_semitone(cls, semitone: int) -> PitchClass:
        """Spell a semitone number. Always uses sharps."""
        return cls(_SHARP_SPELLINGS[semitone % SEMITONES_PER_OCTAVE])

    @classmethod
    def spelled(cls, semitone: int, accidental: Accidental | None) -> PitchClass:
        """
        Spell a semitone number with a preferred accidental.

        Falls back to the sharp spelling when no member carries the
        requested accidental (semitone 4 flat would be F-flat, so E).
        """
        semitone %= SEMITONES_PER_OCTAVE
        if accidental in (Accidental.SHARP, Accidental.FLAT):
            for member in cls:
                if member.accidental is accidental and member.semitone == semitone:
                    return member
        return cls.from_semitone(semitone)

    @classmethod
    def from_parts(cls, natural: NaturalNote, accidental: Accidental | None = None) -> PitchClass:
        """
        Build a pitch class from a natural note and an accidental.

        Raises:
            InvalidAccidentalError: for Cb, Fb, E# and B#
        """
        if accidental is None or accidental is Accidental.NATURAL:
            return cls(natural.value)
        try:
            return cls(natural.value + accidental.value)
        except ValueError:
            raise InvalidAccidentalError(
                ErrorMessages.INVALID_ACCIDENTAL.format(
                    natural=natural.value, accidental=accidental.name.lower()
                )
            ) from None

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Eb', 'B♭'."""
        name = name.strip()
        if not name or name[0].upper() not in _NATURAL_SEMITONES:
            raise ValueError(f"Unknown pitch class: {name}")
        natural = NaturalNote(name[0].upper())
        try:
            accidental = Accidental.parse(name[1:])
        except ValueError:
            raise ValueError(f"Unknown pitch class: {name}") from None
        return cls.from_parts(natural, accidental)


_SHARP_SPELLINGS: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]


class Step(IntEnum):
    """A semitone distance used to build scale tables."""

    HALF = 1
    WHOLE = 2
    ONE_AND_A_HALF = 3

    @property
    def label(self) -> str:
        """Short label used in scale tables (H, W, WH)."""
        return _STEP_LABELS[self.value]

    @classmethod
    def parse(cls, token: str | int) -> Step:
        """
        Parse a step from its label ('H', 'W', 'WH') or semitone count.

        Raises:
            ValueError: for unknown labels and for anything that is not a
                string or an int (YAML turns '1.5' into a float, '~' into None)
        """
        if isinstance(token, bool) or not isinstance(token, (str, int)):
            raise ValueError(f"Invalid step: {token!r}")
        if isinstance(token, int):
            return cls(token)
        token = token.strip().upper()
        for value, label in _STEP_LABELS.items():
            if label == token:
                return cls(value)
        if token.isdigit():
            return cls(int(token))
        raise ValueError(f"Unknown step: {token}")


_STEP_LABELS: dict[int, str] = {1: "H", 2: "W", 3: "WH"}


@dataclass(frozen=True)
class Pitch:
    """
    A pitch class in a specific octave.

    Octaves follow scientific pitch notation: C4 is middle C, the octave
    number increments when crossing from B to C.

    Immutable and hashable.
    """

    pitch_class: PitchClass
    octave: int = DEFAULT_OCTAVE

    @property
    def semitone(self) -> int:
        """Semitone number of the pitch class (0-11)."""
        return self.pitch_class.semitone

    def to_number(self) -> tuple[int, int]:
        """Return (semitone 0-11, octave)."""
        return self.pitch_class.semitone, self.octave

    @classmethod
    def from_number(cls, semitone: int, octave: int = DEFAULT_OCTAVE) -> Pitch:
        """
        Build a pitch from a semitone number and octave.

        Spellings always use sharps. Semitone numbers outside 0-11 carry
        into the octave (12 in octave 3 is C4).
        """
        carry, semitone = divmod(semitone, SEMITONES_PER_OCTAVE)
        return cls(PitchClass.from_semitone(semitone), octave + carry)

    def add(self, semitones: int) -> Pitch:
        """Move up by a number of semitones, crossing octaves as needed."""
        if semitones < 0:
            return self.subtract(-semitones)
        return Pitch.from_number(self.semitone + semitones, self.octave)

    def subtract(self, semitones: int) -> Pitch:
        """Move down by a number of semitones, borrowing octaves below C."""
        if semitones < 0:
            return self.add(-semitones)
        return Pitch.from_number(self.semitone - semitones, self.octave)

    def up_step(self, step: Step) -> Pitch:
        """Move up by a scale step."""
        return self.add(int(step))

    def down_step(self, step: Step) -> Pitch:
        """Move down by a scale step."""
        return self.subtract(int(step))

    def respell(self, accidental: Accidental | None) -> Pitch:
        """Same pitch, spelled with the given accidental where one exists."""
        return Pitch(PitchClass.spelled(self.semitone, accidental), self.octave)

    def same_pitch(self, other: Pitch) -> bool:
        """True if both pitches sound the same (C#4 and Db4)."""
        return self.to_midi() == other.to_midi()

    def to_midi(self) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.semitone + (self.octave + 1) * SEMITONES_PER_OCTAVE

    @classmethod
    def from_midi(cls, midi_note: int) -> Pitch:
        """Build a pitch from a MIDI note number."""
        return cls.from_number(midi_note, -1)

    def frequency(self, reference: float = A4_FREQUENCY) -> float:
        """Equal-tempered frequency in Hz."""
        return float(reference * 2 ** ((self.to_midi() - 69) / SEMITONES_PER_OCTAVE))

    @classmethod
    def parse(cls, name: str, default_octave: int = DEFAULT_OCTAVE) -> Pitch:
        """
        Parse a pitch from a string like 'E2', 'C#4', 'Bb-1' or 'G'.

        The octave is optional and defaults to default_octave.
        """
        match = _PITCH_PATTERN.fullmatch(name.strip())
        if match is None:
            raise ValueError(f"Invalid pitch: {name}")
        pitch_class = PitchClass.parse(match.group(1))
        if match.group(2) is None:
            return cls(pitch_class, default_octave)
        return cls(pitch_class, int(match.group(2)))

    def __str__(self) -> str:
        return f"{self.pitch_class.value}{self.octave}"

    def __repr__(self) -> str:
        return f"Pitch({self.pitch_class.value!r}, {self.octave})"
