"""
Fretboard generator - the pitch at every (string, fret) position.

Fret 0 is the open string, so a board with fret_count frets has
fret_count + 1 columns. Strings are ordered lowest first, as tuned.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from chuk_mcp_fretboard.constants import ErrorMessages
from chuk_mcp_fretboard.errors import FretPositionError

from .pitch import Pitch


def build_fretboard(tuning: Sequence[Pitch], fret_count: int) -> list[list[Pitch]]:
    """
    Build the pitch matrix: fretboard[s][f] = tuning[s] + f semitones.

    Args:
        tuning: Open-string pitches, one per string
        fret_count: Highest fret (inclusive)

    Returns:
        A len(tuning) x (fret_count + 1) matrix
    """
    if fret_count < 0:
        raise ValueError(f"Fret count must be >= 0, got {fret_count}")
    return [[open_string.add(fret) for fret in range(fret_count + 1)] for open_string in tuning]


@dataclass(frozen=True)
class FretPosition:
    """A (string, fret) coordinate. String 0 is the lowest string."""

    string: int
    fret: int


@dataclass
class FretCell:
    """A fretboard position with its pitch and highlight flag."""

    string: int
    fret: int
    pitch: Pitch
    visible: bool = True

    @property
    def position(self) -> FretPosition:
        return FretPosition(self.string, self.fret)


class Fretboard:
    """
    The cell matrix for one tuning.

    The pitches never change once built; only the per-cell visibility
    flags are mutated (by the highlight filter). A new tuning means a new
    Fretboard.
    """

    def __init__(self, tuning: Sequence[Pitch], fret_count: int):
        """
        Build a fretboard.

        Args:
            tuning: Open-string pitches, lowest string first
            fret_count: Highest fret (inclusive)
        """
        matrix = build_fretboard(tuning, fret_count)
        self.tuning: tuple[Pitch, ...] = tuple(tuning)
        self.fret_count = fret_count
        self._cells: tuple[tuple[FretCell, ...], ...] = tuple(
            tuple(FretCell(s, f, pitch) for f, pitch in enumerate(row))
            for s, row in enumerate(matrix)
        )

    @property
    def string_count(self) -> int:
        return len(self._cells)

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.string_count * (self.fret_count + 1)

    def cell(self, string: int, fret: int) -> FretCell:
        """
        Get the cell at a position.

        Raises:
            FretPositionError: if the position is off the board
        """
        if not (0 <= string < self.string_count and 0 <= fret <= self.fret_count):
            raise FretPositionError(
                ErrorMessages.FRET_OUT_OF_RANGE.format(
                    string=string,
                    fret=fret,
                    strings=self.string_count,
                    frets=self.fret_count + 1,
                )
            )
        return self._cells[string][fret]

    def pitch_at(self, string: int, fret: int) -> Pitch:
        """Pitch at a position (bounds-checked)."""
        return self.cell(string, fret).pitch

    def string(self, string: int) -> tuple[FretCell, ...]:
        """All cells on one string, open string first."""
        self.cell(string, 0)
        return self._cells[string]

    def column(self, fret: int) -> list[FretCell]:
        """All cells at one fret, lowest string first."""
        self.cell(0, fret)
        return [row[fret] for row in self._cells]

    def pitches(self) -> list[list[Pitch]]:
        """The raw pitch matrix."""
        return [[cell.pitch for cell in row] for row in self._cells]

    def cells(self) -> Iterator[FretCell]:
        """Iterate over every cell, string by string."""
        for row in self._cells:
            yield from row

    def visible_cells(self) -> list[FretCell]:
        return [cell for cell in self.cells() if cell.visible]

    def visible_count(self) -> int:
        return sum(1 for cell in self.cells() if cell.visible)

    def find(self, pitch: Pitch) -> list[FretPosition]:
        """Every position that sounds exactly this pitch (enharmonics included)."""
        return [cell.position for cell in self.cells() if cell.pitch.same_pitch(pitch)]

    def __getitem__(self, string: int) -> tuple[FretCell, ...]:
        return self.string(string)

    def __len__(self) -> int:
        return self.string_count

    def __iter__(self) -> Iterator[tuple[FretCell, ...]]:
        return iter(self._cells)

    def __repr__(self) -> str:
        tuning = " ".join(str(p) for p in self.tuning)
        return f"Fretboard({tuning}, frets={self.fret_count})"
