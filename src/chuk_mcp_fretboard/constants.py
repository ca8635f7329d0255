"""
Constants and enums for the fretboard system.

No magic strings - use enums for constrained values.
"""

from __future__ import annotations

from enum import Enum


class InstrumentFamily(str, Enum):
    """Fretted instrument families."""

    GUITAR = "guitar"
    BASS = "bass"
    MANDOLIN = "mandolin"
    BANJO = "banjo"
    UKULELE = "ukulele"


class TuningStyle(str, Enum):
    """Named tuning patterns that derive open strings from a root pitch."""

    STANDARD = "standard"
    DROP = "drop"
    OPEN = "open"
    CUSTOM = "custom"


def _normalize(name: str) -> str:
    return name.strip().lower().replace("-", "").replace("_", "").replace(" ", "")


def parse_family(name: str) -> InstrumentFamily | None:
    """Look up an instrument family by name. Returns None if unknown."""
    key = _normalize(name)
    for family in InstrumentFamily:
        if family.value == key:
            return family
    return None


def parse_tuning_style(name: str) -> TuningStyle | None:
    """Look up a tuning style by name. Returns None if unknown."""
    key = _normalize(name)
    for style in TuningStyle:
        if style.value == key:
            return style
    return None


# Octave used when a bare pitch class has to become a pitch
DEFAULT_OCTAVE = 4

# Frets per string (fret 0 is the open string, so 25 columns)
DEFAULT_FRET_COUNT = 24
MAX_FRET_COUNT = 36

# Environment variables that relocate the project catalog and MIDI output
CATALOG_DIR_ENV = "CHUK_FRETBOARD_CATALOG_DIR"
OUTPUT_DIR_ENV = "CHUK_FRETBOARD_OUTPUT_DIR"

# Concert pitch reference
A4_FREQUENCY = 440.0

# Conventional lowest open string per family
DEFAULT_ROOTS: dict[InstrumentFamily, str] = {
    InstrumentFamily.GUITAR: "E2",
    InstrumentFamily.BASS: "E1",
}


class ErrorMessages:
    """Standardized error messages."""

    INSTRUMENT_NOT_FOUND = "Instrument '{name}' not found."
    INSTRUMENT_EXISTS = "Instrument '{name}' already exists."
    UNKNOWN_FAMILY = "Unknown instrument family: '{name}'."
    UNKNOWN_TUNING_STYLE = "Unknown tuning style: '{name}'."
    UNSUPPORTED_CONFIGURATION = "No {style} tuning is defined for {family}."
    TOO_MANY_STRINGS = "{family} {style} tuning defines {available} strings, {requested} requested."
    SCALE_NOT_FOUND = "Scale '{name}' not found."
    CHORD_NOT_FOUND = "Chord '{name}' not found."
    INVALID_ACCIDENTAL = "{natural} cannot carry a {accidental}."
    FRET_OUT_OF_RANGE = (
        "Position (string {string}, fret {fret}) is outside a {strings}x{frets} fretboard."
    )


class SuccessMessages:
    """Standardized success messages."""

    INSTRUMENT_CREATED = "Created {family} '{name}' in {style} tuning."
    TUNING_CHANGED = "Retuned '{name}' to {style} from {root}."
    NOTES_SHOWN = "Showing {count} positions on '{name}'."
    ALL_SHOWN = "Showing all {count} positions on '{name}'."
    MIDI_EXPORTED = "Exported {title} to {path}."
