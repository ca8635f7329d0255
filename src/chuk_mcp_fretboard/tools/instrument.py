"""
Instrument tools - MCP tools for instrument lifecycle and tuning.

Tools for creating instruments, inspecting their fretboards, and retuning.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_fretboard.constants import (
    ErrorMessages,
    SuccessMessages,
    parse_family,
    parse_tuning_style,
)
from chuk_mcp_fretboard.display import format_fretboard
from chuk_mcp_fretboard.errors import FretboardError
from chuk_mcp_fretboard.instruments import InstrumentManager

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _error(message: str) -> str:
    return json.dumps({"status": "error", "message": message})


def register_instrument_tools(
    mcp: ChukMCPServer,
    manager: InstrumentManager,
) -> dict[str, Any]:
    """
    Register instrument tools with the MCP server.

    Args:
        mcp: The MCP server instance
        manager: The instrument manager

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_create_instrument(
        name: str,
        family: str = "guitar",
        tuning_style: str = "standard",
        root: str | None = None,
        string_count: int | None = None,
        fret_count: int = 24,
    ) -> str:
        """
        Create a fretted instrument.

        The open strings are derived from the root (lowest string) and the
        tuning style. Only guitar and bass tunings are available.

        Args:
            name: Unique name for the instrument
            family: 'guitar' or 'bass'
            tuning_style: 'standard', 'drop' or 'open'
            root: Lowest string pitch, e.g. 'E2' (default: E2 guitar, E1 bass)
            string_count: Number of strings (default: all the tuning defines)
            fret_count: Highest fret (default: 24)

        Returns:
            JSON string with the instrument's tuning

        Example:
            fretboard_create_instrument(name="strat", family="guitar", root="D2",
                                        tuning_style="drop")
        """
        try:
            parsed_family = parse_family(family)
            if parsed_family is None:
                return _error(ErrorMessages.UNKNOWN_FAMILY.format(name=family))
            parsed_style = parse_tuning_style(tuning_style)
            if parsed_style is None:
                return _error(ErrorMessages.UNKNOWN_TUNING_STYLE.format(name=tuning_style))

            instrument = manager.create(
                name=name,
                family=parsed_family,
                tuning_style=parsed_style,
                root=root,
                string_count=string_count,
                fret_count=fret_count,
            )
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.INSTRUMENT_CREATED.format(
                        family=parsed_family.value, name=name, style=parsed_style.value
                    ),
                    "instrument": {"name": name, **instrument.summary()},
                }
            )
        except (FretboardError, ValueError) as e:
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to create instrument")
            return _error(str(e))

    tools["fretboard_create_instrument"] = fretboard_create_instrument

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_get_instrument(name: str, with_octaves: bool = False) -> str:
        """
        Get an instrument's tuning and fretboard diagram.

        Hidden positions (after fretboard_show_scale etc.) are drawn as dashes.

        Args:
            name: Instrument name
            with_octaves: Label positions with octaves ('E2' instead of 'E')

        Returns:
            JSON string with tuning, diagram and visible positions

        Example:
            fretboard_get_instrument(name="strat")
        """
        try:
            instrument = manager.get(name)
            if instrument is None:
                return _error(ErrorMessages.INSTRUMENT_NOT_FOUND.format(name=name))

            return json.dumps(
                {
                    "status": "success",
                    "instrument": {"name": name, **instrument.summary()},
                    "selection": sorted(str(pc) for pc in instrument.selection or ()),
                    "diagram": format_fretboard(instrument.fretboard, with_octaves=with_octaves),
                    "positions": [
                        {"string": c.string, "fret": c.fret, "pitch": str(c.pitch)}
                        for c in instrument.fretboard.visible_cells()
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to get instrument")
            return _error(str(e))

    tools["fretboard_get_instrument"] = fretboard_get_instrument

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_list_instruments() -> str:
        """
        List all instruments in this session.

        Returns:
            JSON string with instrument summaries

        Example:
            fretboard_list_instruments()
        """
        try:
            instruments = manager.list_instruments()
            return json.dumps(
                {
                    "status": "success",
                    "instruments": [
                        {"name": name, **instrument.summary()} for name, instrument in instruments
                    ],
                    "count": len(instruments),
                }
            )
        except Exception as e:
            logger.exception("Failed to list instruments")
            return _error(str(e))

    tools["fretboard_list_instruments"] = fretboard_list_instruments

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_change_tuning(
        name: str,
        tuning_style: str | None = None,
        root: str | None = None,
    ) -> str:
        """
        Retune an instrument.

        The fretboard is rebuilt; any active note selection is kept.

        Args:
            name: Instrument name
            tuning_style: New tuning style (default: keep current)
            root: New lowest string pitch (default: keep current)

        Returns:
            JSON string with the new tuning

        Example:
            fretboard_change_tuning(name="strat", tuning_style="open", root="D2")
        """
        try:
            instrument = manager.get(name)
            if instrument is None:
                return _error(ErrorMessages.INSTRUMENT_NOT_FOUND.format(name=name))

            style = None
            if tuning_style is not None:
                style = parse_tuning_style(tuning_style)
                if style is None:
                    return _error(ErrorMessages.UNKNOWN_TUNING_STYLE.format(name=tuning_style))

            instrument.change_tuning(tuning_style=style, root=root)
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.TUNING_CHANGED.format(
                        name=name,
                        style=instrument.tuning_style.value,
                        root=instrument.root,
                    ),
                    "instrument": {"name": name, **instrument.summary()},
                }
            )
        except (FretboardError, ValueError) as e:
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to change tuning")
            return _error(str(e))

    tools["fretboard_change_tuning"] = fretboard_change_tuning

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_delete_instrument(name: str) -> str:
        """
        Delete an instrument.

        Args:
            name: Instrument name

        Returns:
            JSON string with status

        Example:
            fretboard_delete_instrument(name="strat")
        """
        if not manager.delete(name):
            return _error(ErrorMessages.INSTRUMENT_NOT_FOUND.format(name=name))
        return json.dumps({"status": "success", "message": f"Deleted instrument '{name}'."})

    tools["fretboard_delete_instrument"] = fretboard_delete_instrument

    return tools
