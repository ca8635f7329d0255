#!/usr/bin/env python3
"""
Entry point for the CHUK Fretboard MCP Server.

Runs the server over stdio or http. The project catalog (extra scales.yaml /
chords.yaml) and the MIDI output directory can be moved with flags, and
--check-catalog validates a catalog without starting the server.
"""

import argparse
import asyncio
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from chuk_mcp_fretboard.catalog import Catalog
from chuk_mcp_fretboard.constants import CATALOG_DIR_ENV, OUTPUT_DIR_ENV

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command-line options for the server."""
    parser = argparse.ArgumentParser(description="CHUK Fretboard MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--catalog-dir",
        type=Path,
        help="Directory with project scales.yaml / chords.yaml (default: ./catalog)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory for exported MIDI files (default: ./output)",
    )
    parser.add_argument(
        "--check-catalog",
        action="store_true",
        help="Load the catalog, report what was found and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def check_catalog(catalog_dir: Path | None) -> dict[str, int]:
    """
    Load the library plus an optional project catalog.

    Malformed entries are skipped (and logged) by the loader, so the counts
    reflect what the server would actually serve.

    Returns:
        Number of scales and chords loaded
    """
    catalog = Catalog(project_path=catalog_dir)
    counts = {"scales": len(catalog.list_scales()), "chords": len(catalog.list_chords())}
    logger.info(f"Catalog {catalog_dir or '(library only)'}: {counts}")
    return counts


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.check_catalog:
        counts = check_catalog(args.catalog_dir or Path.cwd() / "catalog")
        print(f"{counts['scales']} scales, {counts['chords']} chords")
        return

    # async_server reads its paths from the environment at import time
    if args.catalog_dir is not None:
        os.environ[CATALOG_DIR_ENV] = str(args.catalog_dir.resolve())
    if args.output_dir is not None:
        os.environ[OUTPUT_DIR_ENV] = str(args.output_dir.resolve())

    from chuk_mcp_fretboard.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Fretboard MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Fretboard MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
