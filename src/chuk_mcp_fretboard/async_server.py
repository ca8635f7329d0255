#!/usr/bin/env python3
"""
Async Fretboard MCP Server using chuk-mcp-server

This server provides MCP tools for exploring scales and chords on fretted
instruments.

The server provides tools for:
- Creating instruments and deriving their tunings (standard, drop, open)
- Spelling scales and chords from a root
- Showing a scale, chord or note set on an instrument's fretboard
- Exporting scales and chords to MIDI files
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_fretboard.catalog import Catalog
from chuk_mcp_fretboard.constants import CATALOG_DIR_ENV, OUTPUT_DIR_ENV
from chuk_mcp_fretboard.instruments import InstrumentManager
from chuk_mcp_fretboard.tools import (
    register_export_tools,
    register_instrument_tools,
    register_theory_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-fretboard")

# Paths - standard project structure unless relocated by the environment
BASE_PATH = Path.cwd()
CATALOG_DIR = Path(os.environ.get(CATALOG_DIR_ENV, BASE_PATH / "catalog"))
OUTPUT_DIR = Path(os.environ.get(OUTPUT_DIR_ENV, BASE_PATH / "output"))
LIBRARY_PATH = Path(__file__).parent / "catalog" / "library"

# Create managers
instrument_manager = InstrumentManager()
catalog = Catalog(
    library_path=LIBRARY_PATH,
    project_path=CATALOG_DIR,
)

# Register all tools
instrument_tools = register_instrument_tools(mcp, instrument_manager)
theory_tools = register_theory_tools(mcp, instrument_manager, catalog)
export_tools = register_export_tools(mcp, catalog, OUTPUT_DIR)

# Export tool functions for direct access
fretboard_create_instrument = instrument_tools["fretboard_create_instrument"]
fretboard_get_instrument = instrument_tools["fretboard_get_instrument"]
fretboard_list_instruments = instrument_tools["fretboard_list_instruments"]
fretboard_change_tuning = instrument_tools["fretboard_change_tuning"]
fretboard_delete_instrument = instrument_tools["fretboard_delete_instrument"]

fretboard_list_scales = theory_tools["fretboard_list_scales"]
fretboard_list_chords = theory_tools["fretboard_list_chords"]
fretboard_build_scale = theory_tools["fretboard_build_scale"]
fretboard_build_chord = theory_tools["fretboard_build_chord"]
fretboard_show_scale = theory_tools["fretboard_show_scale"]
fretboard_show_chord = theory_tools["fretboard_show_chord"]
fretboard_show_notes = theory_tools["fretboard_show_notes"]
fretboard_show_all = theory_tools["fretboard_show_all"]

fretboard_export_midi = export_tools["fretboard_export_midi"]

logger.info("CHUK Fretboard MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Catalog dir: {CATALOG_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
