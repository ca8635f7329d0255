"""
Instrument model - a tuned fretboard you can highlight notes on.

An Instrument holds its configuration (family, tuning style, root, string
and fret counts) and derives everything else from it:
- tuning: one open-string pitch per string, lowest first
- fretboard: the pitch at every (string, fret) plus a visibility flag

Only change_tuning / recalculate_* re-derive; only show_all / show_notes
touch visibility.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from chuk_mcp_fretboard.constants import (
    DEFAULT_FRET_COUNT,
    MAX_FRET_COUNT,
    InstrumentFamily,
    TuningStyle,
)
from chuk_mcp_fretboard.core.fretboard import FretCell, Fretboard
from chuk_mcp_fretboard.core.highlight import show_all, show_notes
from chuk_mcp_fretboard.core.pitch import Pitch, PitchClass
from chuk_mcp_fretboard.core.tuning import calculate_tuning

logger = logging.getLogger(__name__)


def _coerce_pitch(value: Any) -> Any:
    if isinstance(value, str):
        return Pitch.parse(value)
    if isinstance(value, PitchClass):
        return Pitch(value)
    return value


class Instrument(BaseModel):
    """
    A fretted instrument with a derived tuning and fretboard.

    Examples:
        Instrument(family="guitar", root="E2").tuning
        -> [E2, A2, D3, G3, B3, E4]
    """

    family: InstrumentFamily = Field(..., description="Instrument family")
    tuning_style: TuningStyle = Field(TuningStyle.STANDARD, description="Tuning style")
    root: Pitch = Field(..., description="Pitch of the lowest string (e.g. 'E2')")
    string_count: int | None = Field(
        None, ge=1, description="Number of strings (default: all the tuning defines)"
    )
    fret_count: int = Field(
        DEFAULT_FRET_COUNT, ge=0, le=MAX_FRET_COUNT, description="Highest fret"
    )

    _tuning: list[Pitch] = PrivateAttr(default_factory=list)
    _fretboard: Fretboard | None = PrivateAttr(default=None)
    _selection: frozenset[PitchClass] | None = PrivateAttr(default=None)

    @field_validator("root", mode="before")
    @classmethod
    def parse_root(cls, v: Any) -> Any:
        """Accept pitch strings like 'E2' or 'Bb1'."""
        return _coerce_pitch(v)

    def model_post_init(self, __context: Any) -> None:
        self.recalculate_tuning()
        if self.string_count is None:
            self.string_count = len(self._tuning)

    # Derived data

    @property
    def tuning(self) -> list[Pitch]:
        """Open-string pitches, lowest string first."""
        return list(self._tuning)

    @property
    def fretboard(self) -> Fretboard:
        """The fretboard for the current tuning."""
        if self._fretboard is None:
            self._fretboard = Fretboard(self._tuning, self.fret_count)
        return self._fretboard

    @property
    def selection(self) -> frozenset[PitchClass] | None:
        """Pitch classes currently shown, or None when everything is shown."""
        return self._selection

    def cell(self, string: int, fret: int) -> FretCell:
        """Bounds-checked access to one fretboard cell."""
        return self.fretboard.cell(string, fret)

    # Re-derivation

    def recalculate_tuning(self) -> None:
        """Re-derive the open strings, then the fretboard."""
        self._tuning = calculate_tuning(
            self.family, self.tuning_style, self.root, self.string_count
        )
        logger.debug(
            f"Tuned {self.family.value} ({self.tuning_style.value}): "
            + " ".join(str(p) for p in self._tuning)
        )
        self.recalculate_fretboard()

    def recalculate_fretboard(self) -> None:
        """
        Rebuild the fretboard from the current tuning.

        The active note selection (if any) is re-applied to the new board.
        """
        self._fretboard = Fretboard(self._tuning, self.fret_count)
        if self._selection is not None:
            show_notes(self._fretboard, self._selection)

    def change_tuning(
        self,
        tuning_style: TuningStyle | None = None,
        root: Pitch | str | None = None,
    ) -> None:
        """
        Retune the instrument.

        The new tuning is computed before anything is changed, so an
        unsupported style leaves the instrument as it was.

        Raises:
            UnsupportedInstrumentError: if the new style has no pattern
        """
        new_style = tuning_style or self.tuning_style
        new_root = _coerce_pitch(root) if root is not None else self.root
        tuning = calculate_tuning(self.family, new_style, new_root, self.string_count)

        self.tuning_style = new_style
        self.root = new_root
        self._tuning = tuning
        logger.debug(f"Retuned to {new_style.value} from {new_root}")
        self.recalculate_fretboard()

    # Highlighting

    def show_all(self) -> int:
        """Show every position. Returns the visible count."""
        self._selection = None
        return show_all(self.fretboard)

    def show_notes(self, pitch_classes: Iterable[PitchClass]) -> int:
        """Show only positions matching the pitch classes. Returns the visible count."""
        self._selection = frozenset(pitch_classes)
        return show_notes(self.fretboard, self._selection)

    def summary(self) -> dict[str, Any]:
        """Compact description for tool output."""
        return {
            "family": self.family.value,
            "tuning_style": self.tuning_style.value,
            "root": str(self.root),
            "string_count": self.string_count,
            "fret_count": self.fret_count,
            "tuning": [str(p) for p in self._tuning],
            "visible": self.fretboard.visible_count(),
        }
