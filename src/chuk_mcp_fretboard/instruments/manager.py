"""
Instrument Manager - handles instrument lifecycle.

Instruments live in memory for the lifetime of the server; nothing is
written to disk.
"""

from __future__ import annotations

import logging

from chuk_mcp_fretboard.constants import (
    DEFAULT_FRET_COUNT,
    DEFAULT_ROOTS,
    ErrorMessages,
    InstrumentFamily,
    TuningStyle,
)
from chuk_mcp_fretboard.core.pitch import Pitch
from chuk_mcp_fretboard.models.instrument import Instrument

logger = logging.getLogger(__name__)


class InstrumentManager:
    """
    Manages named instruments.

    Provides methods to create, look up, list and delete instruments.
    """

    def __init__(self) -> None:
        self._instruments: dict[str, Instrument] = {}

    def create(
        self,
        name: str,
        family: InstrumentFamily,
        tuning_style: TuningStyle = TuningStyle.STANDARD,
        root: Pitch | str | None = None,
        string_count: int | None = None,
        fret_count: int = DEFAULT_FRET_COUNT,
    ) -> Instrument:
        """
        Create and register a new instrument.

        Args:
            name: Unique instrument name
            family: Instrument family
            tuning_style: Tuning style
            root: Lowest string (default: the family's conventional root)
            string_count: Number of strings (default: all the tuning defines)
            fret_count: Highest fret

        Returns:
            The created Instrument

        Raises:
            ValueError: if the name is taken
            UnsupportedInstrumentError: if the configuration has no tuning
        """
        if name in self._instruments:
            raise ValueError(ErrorMessages.INSTRUMENT_EXISTS.format(name=name))

        if root is None:
            root = DEFAULT_ROOTS.get(family, "E2")

        instrument = Instrument(
            family=family,
            tuning_style=tuning_style,
            root=root,
            string_count=string_count,
            fret_count=fret_count,
        )
        self._instruments[name] = instrument
        logger.info(f"Created instrument '{name}': {family.value} {tuning_style.value}")
        return instrument

    def get(self, name: str) -> Instrument | None:
        """Get an instrument by name, or None if not found."""
        return self._instruments.get(name)

    def list_instruments(self) -> list[tuple[str, Instrument]]:
        """All instruments as (name, instrument) pairs, in creation order."""
        return list(self._instruments.items())

    def delete(self, name: str) -> bool:
        """Delete an instrument. Returns False if it did not exist."""
        if name not in self._instruments:
            return False
        del self._instruments[name]
        logger.info(f"Deleted instrument '{name}'")
        return True

    def __contains__(self, name: str) -> bool:
        return name in self._instruments

    def __len__(self) -> int:
        return len(self._instruments)
