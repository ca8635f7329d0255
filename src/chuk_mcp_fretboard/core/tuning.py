"""
Tuning calculator - derives open-string pitches from a root.

Each tuning pattern is a list of (anchor, semitones) entries. String n+1 is
tuning[anchor] + semitones, so chained patterns (standard, drop) anchor on
the previous string while open tunings anchor most strings on the root.
"""

from __future__ import annotations

from chuk_mcp_fretboard.constants import ErrorMessages, InstrumentFamily, TuningStyle
from chuk_mcp_fretboard.errors import UnsupportedInstrumentError

from .pitch import Pitch

# (anchor string index, semitones above the anchor) for every string after the root
TuningPattern = tuple[tuple[int, int], ...]

TUNING_PATTERNS: dict[tuple[InstrumentFamily, TuningStyle], TuningPattern] = {
    (InstrumentFamily.GUITAR, TuningStyle.STANDARD): ((0, 5), (1, 5), (2, 5), (3, 4), (4, 5)),
    (InstrumentFamily.GUITAR, TuningStyle.DROP): ((0, 7), (1, 5), (2, 5), (3, 4), (4, 5)),
    # Open: everything hangs off the root except the fifth string (third of the chord + 3)
    (InstrumentFamily.GUITAR, TuningStyle.OPEN): ((0, 7), (0, 12), (0, 16), (3, 3), (0, 24)),
    (InstrumentFamily.BASS, TuningStyle.STANDARD): ((0, 5), (1, 5), (2, 5)),
    (InstrumentFamily.BASS, TuningStyle.DROP): ((0, 7), (1, 5), (2, 5)),
    (InstrumentFamily.BASS, TuningStyle.OPEN): ((0, 7), (0, 12), (0, 16)),
}


def get_pattern(family: InstrumentFamily, style: TuningStyle) -> TuningPattern:
    """
    Get the tuning pattern for a family and style.

    Raises:
        UnsupportedInstrumentError: if no pattern is defined
    """
    pattern = TUNING_PATTERNS.get((family, style))
    if pattern is None:
        raise UnsupportedInstrumentError(
            ErrorMessages.UNSUPPORTED_CONFIGURATION.format(
                style=style.value, family=family.value
            )
        )
    return pattern


def max_string_count(family: InstrumentFamily, style: TuningStyle) -> int:
    """Number of strings the pattern defines, root string included."""
    return len(get_pattern(family, style)) + 1


def supported_configurations() -> list[tuple[InstrumentFamily, TuningStyle]]:
    """All (family, style) pairs with a defined tuning."""
    return list(TUNING_PATTERNS)


def calculate_tuning(
    family: InstrumentFamily,
    style: TuningStyle,
    root: Pitch,
    string_count: int | None = None,
) -> list[Pitch]:
    """
    Derive the open-string pitches, lowest string first.

    Args:
        family: Instrument family
        style: Tuning style
        root: Pitch of the lowest string
        string_count: Strings to tune (default: all the pattern defines)

    Returns:
        One pitch per string

    Raises:
        UnsupportedInstrumentError: unknown configuration, or more strings
            than the pattern defines
        ValueError: string_count below 1
    """
    pattern = get_pattern(family, style)
    available = len(pattern) + 1
    if string_count is None:
        string_count = available
    if string_count < 1:
        raise ValueError(f"String count must be at least 1, got {string_count}")
    if string_count > available:
        raise UnsupportedInstrumentError(
            ErrorMessages.TOO_MANY_STRINGS.format(
                family=family.value,
                style=style.value,
                available=available,
                requested=string_count,
            )
        )

    tuning = [root]
    for anchor, semitones in pattern[: string_count - 1]:
        tuning.append(tuning[anchor].add(semitones))
    return tuning
