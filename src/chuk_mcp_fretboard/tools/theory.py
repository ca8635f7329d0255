"""
Theory tools - MCP tools for scales, chords and fretboard highlighting.

Tools for browsing the catalog, spelling scales and chords from a root,
and showing their notes on an instrument's fretboard.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from chuk_mcp_fretboard.catalog import Catalog
from chuk_mcp_fretboard.constants import ErrorMessages, SuccessMessages
from chuk_mcp_fretboard.core.chord import Chord
from chuk_mcp_fretboard.core.pitch import Pitch, PitchClass
from chuk_mcp_fretboard.core.scale import Scale
from chuk_mcp_fretboard.display import format_fretboard
from chuk_mcp_fretboard.errors import FretboardError
from chuk_mcp_fretboard.instruments import InstrumentManager

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _error(message: str) -> str:
    return json.dumps({"status": "error", "message": message})


def pitches_payload(pitches: Sequence[Pitch]) -> list[dict[str, Any]]:
    """Describe pitches for tool output (name, MIDI number, frequency)."""
    return [
        {
            "pitch": str(p),
            "pitch_class": str(p.pitch_class),
            "midi": p.to_midi(),
            "frequency": round(p.frequency(), 2),
        }
        for p in pitches
    ]


def register_theory_tools(
    mcp: ChukMCPServer,
    manager: InstrumentManager,
    catalog: Catalog,
) -> dict[str, Any]:
    """
    Register scale, chord and highlighting tools with the MCP server.

    Args:
        mcp: The MCP server instance
        manager: The instrument manager
        catalog: The scale/chord catalog

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def highlight(name: str, pitch_classes: Sequence[PitchClass], label: str) -> str:
        instrument = manager.get(name)
        if instrument is None:
            return _error(ErrorMessages.INSTRUMENT_NOT_FOUND.format(name=name))
        count = instrument.show_notes(pitch_classes)
        return json.dumps(
            {
                "status": "success",
                "message": SuccessMessages.NOTES_SHOWN.format(count=count, name=name),
                "showing": label,
                "notes": [str(pc) for pc in pitch_classes],
                "visible": count,
                "diagram": format_fretboard(instrument.fretboard),
            }
        )

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_list_scales() -> str:
        """
        List available scales.

        Returns:
            JSON string with scale names and step patterns

        Example:
            fretboard_list_scales()
        """
        try:
            scales = catalog.list_scales()
            return json.dumps(
                {
                    "status": "success",
                    "scales": [
                        {
                            "name": s.name,
                            "aliases": list(s.aliases),
                            "pattern": s.pattern(),
                            "notes": len(s) + 1,
                        }
                        for s in scales
                    ],
                    "count": len(scales),
                }
            )
        except Exception as e:
            logger.exception("Failed to list scales")
            return _error(str(e))

    tools["fretboard_list_scales"] = fretboard_list_scales

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_list_chords() -> str:
        """
        List available chords.

        Returns:
            JSON string with chord names, abbreviations and formulas

        Example:
            fretboard_list_chords()
        """
        try:
            chords = catalog.list_chords()
            return json.dumps(
                {
                    "status": "success",
                    "chords": [
                        {"name": c.name, "abbreviation": c.abbreviation, "formula": c.formula()}
                        for c in chords
                    ],
                    "count": len(chords),
                }
            )
        except Exception as e:
            logger.exception("Failed to list chords")
            return _error(str(e))

    tools["fretboard_list_chords"] = fretboard_list_chords

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_build_scale(root: str, scale: str = "major") -> str:
        """
        Spell a scale from a root.

        Args:
            root: Root pitch, e.g. 'C4' or 'A' (octave defaults to 4)
            scale: Scale name, e.g. 'major', 'dorian', 'minor pentatonic'

        Returns:
            JSON string with the scale's notes, octave note included

        Example:
            fretboard_build_scale(root="A3", scale="minor pentatonic")
        """
        try:
            built = Scale(Pitch.parse(root), catalog.require_scale(scale))
            return json.dumps(
                {
                    "status": "success",
                    "scale": str(built),
                    "pattern": built.definition.pattern(),
                    "notes": pitches_payload(built.notes),
                }
            )
        except (FretboardError, ValueError) as e:
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to build scale")
            return _error(str(e))

    tools["fretboard_build_scale"] = fretboard_build_scale

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_build_chord(root: str, chord: str = "major") -> str:
        """
        Spell a chord from a root.

        Args:
            root: Root pitch, e.g. 'C4' or 'G'
            chord: Chord name or abbreviation, e.g. 'minor', 'm7', 'dominant 9'

        Returns:
            JSON string with the chord's notes

        Example:
            fretboard_build_chord(root="C", chord="m")
        """
        try:
            built = Chord(Pitch.parse(root), catalog.require_chord(chord))
            return json.dumps(
                {
                    "status": "success",
                    "chord": built.symbol,
                    "name": built.definition.name,
                    "formula": built.definition.formula(),
                    "notes": pitches_payload(built.notes),
                }
            )
        except (FretboardError, ValueError) as e:
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to build chord")
            return _error(str(e))

    tools["fretboard_build_chord"] = fretboard_build_chord

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_show_scale(name: str, root: str, scale: str = "major") -> str:
        """
        Show a scale's notes on an instrument's fretboard.

        Every position whose pitch class is in the scale is shown, in any
        octave; everything else is hidden.

        Args:
            name: Instrument name
            root: Scale root, e.g. 'A'
            scale: Scale name

        Returns:
            JSON string with the visible count and diagram

        Example:
            fretboard_show_scale(name="strat", root="A", scale="minor pentatonic")
        """
        try:
            built = Scale(Pitch.parse(root), catalog.require_scale(scale))
            return highlight(name, built.pitch_classes(), str(built))
        except (FretboardError, ValueError) as e:
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to show scale")
            return _error(str(e))

    tools["fretboard_show_scale"] = fretboard_show_scale

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_show_chord(name: str, root: str, chord: str = "major") -> str:
        """
        Show a chord's tones on an instrument's fretboard.

        Args:
            name: Instrument name
            root: Chord root, e.g. 'G'
            chord: Chord name or abbreviation

        Returns:
            JSON string with the visible count and diagram

        Example:
            fretboard_show_chord(name="strat", root="G", chord="7")
        """
        try:
            built = Chord(Pitch.parse(root), catalog.require_chord(chord))
            return highlight(name, built.pitch_classes(), built.symbol)
        except (FretboardError, ValueError) as e:
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to show chord")
            return _error(str(e))

    tools["fretboard_show_chord"] = fretboard_show_chord

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_show_notes(name: str, notes: list[str]) -> str:
        """
        Show arbitrary pitch classes on an instrument's fretboard.

        Args:
            name: Instrument name
            notes: Pitch class names, e.g. ['C', 'E', 'G']

        Returns:
            JSON string with the visible count and diagram

        Example:
            fretboard_show_notes(name="strat", notes=["C", "Eb", "G"])
        """
        try:
            pitch_classes = [PitchClass.parse(note) for note in notes]
            return highlight(name, pitch_classes, " ".join(str(pc) for pc in pitch_classes))
        except (FretboardError, ValueError) as e:
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to show notes")
            return _error(str(e))

    tools["fretboard_show_notes"] = fretboard_show_notes

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_show_all(name: str) -> str:
        """
        Show every position on an instrument's fretboard.

        Args:
            name: Instrument name

        Returns:
            JSON string with the visible count

        Example:
            fretboard_show_all(name="strat")
        """
        instrument = manager.get(name)
        if instrument is None:
            return _error(ErrorMessages.INSTRUMENT_NOT_FOUND.format(name=name))
        count = instrument.show_all()
        return json.dumps(
            {
                "status": "success",
                "message": SuccessMessages.ALL_SHOWN.format(count=count, name=name),
                "visible": count,
            }
        )

    tools["fretboard_show_all"] = fretboard_show_all

    return tools
