"""
Error types for the fretboard system.

Every error is local and recoverable. They also subclass the closest builtin
so callers can catch ValueError / LookupError / IndexError as usual.
"""


class FretboardError(Exception):
    """Base class for all fretboard errors."""


class InvalidAccidentalError(FretboardError, ValueError):
    """A natural note was paired with an accidental it never carries (Cb, Fb, E#, B#)."""


class UnsupportedInstrumentError(FretboardError):
    """
    No tuning pattern exists for the requested family, style or string count.

    Not a ValueError: it must reach callers of Instrument(...) as itself
    rather than being folded into a pydantic ValidationError.
    """


class UnknownCatalogNameError(FretboardError, LookupError):
    """A scale or chord name is not in the catalog."""


class FretPositionError(FretboardError, IndexError):
    """A (string, fret) position lies outside the fretboard."""
