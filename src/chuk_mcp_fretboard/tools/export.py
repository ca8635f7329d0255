"""
Export tools - MCP tools for MIDI export.

Tools for rendering scales and chords to MIDI files so they can be heard.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_fretboard.catalog import Catalog, normalize_name
from chuk_mcp_fretboard.compiler.midi import chord_to_midi, scale_to_midi
from chuk_mcp_fretboard.constants import SuccessMessages
from chuk_mcp_fretboard.core.chord import Chord
from chuk_mcp_fretboard.core.pitch import Pitch
from chuk_mcp_fretboard.core.scale import Scale
from chuk_mcp_fretboard.errors import FretboardError

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_export_tools(
    mcp: ChukMCPServer,
    catalog: Catalog,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        catalog: The scale/chord catalog
        output_dir: Directory for output files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_export_midi(
        root: str,
        name: str,
        kind: str = "scale",
        tempo: int = 120,
        arpeggiate: bool = False,
        output_name: str | None = None,
    ) -> str:
        """
        Render a scale or chord to a MIDI file.

        Scales are played upwards one note per beat. Chords are played as a
        block for one bar, or one tone per bar when arpeggiated.

        Args:
            root: Root pitch, e.g. 'C4'
            name: Scale or chord name
            kind: 'scale' or 'chord'
            tempo: Tempo in BPM
            arpeggiate: Arpeggiate chords instead of playing them as a block
            output_name: Optional output filename (without .mid extension)

        Returns:
            JSON string with the file path and notes

        Example:
            fretboard_export_midi(root="C4", name="major", kind="scale")
        """
        try:
            if kind == "scale":
                scale = Scale(Pitch.parse(root), catalog.require_scale(name))
                title = str(scale)
                notes = scale.notes
                midi = scale_to_midi(scale, tempo_bpm=tempo)
            elif kind == "chord":
                chord = Chord(Pitch.parse(root), catalog.require_chord(name))
                title = chord.symbol
                notes = chord.notes
                midi = chord_to_midi(chord, tempo_bpm=tempo, arpeggiate=arpeggiate)
            else:
                return json.dumps(
                    {"status": "error", "message": f"Unknown kind: {kind}. Use 'scale' or 'chord'."}
                )

            filename = f"{output_name or f'{root}_{normalize_name(name)}'}.mid"
            output_path = output_dir / filename
            output_dir.mkdir(parents=True, exist_ok=True)
            midi.save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "notes": [str(p) for p in notes],
                    "message": SuccessMessages.MIDI_EXPORTED.format(
                        title=title, path=output_path
                    ),
                }
            )
        except (FretboardError, ValueError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to export MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_export_midi"] = fretboard_export_midi

    return tools
