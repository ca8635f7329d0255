"""
Plain-text fretboard diagrams.

Strings are printed highest first (the way a player looks down at the
neck), one column per fret. Hidden cells are drawn as dashes. No colour
codes - renderers that want colour can build on the cell data directly.
"""

from __future__ import annotations

from chuk_mcp_fretboard.core.fretboard import Fretboard

CELL_WIDTH = 4
HIDDEN = "-"


def _cell_text(text: str) -> str:
    return text.center(CELL_WIDTH, HIDDEN) if text == HIDDEN else text.center(CELL_WIDTH)


def format_fret_numbers(fret_count: int, label_width: int) -> str:
    """Header line with fret numbers."""
    numbers = "".join(str(fret).center(CELL_WIDTH) for fret in range(fret_count + 1))
    return " " * (label_width + 1) + numbers


def format_fretboard(
    fretboard: Fretboard,
    with_octaves: bool = False,
    show_hidden: bool = False,
) -> str:
    """
    Render a fretboard as text.

    Args:
        fretboard: The board to render
        with_octaves: Label cells 'E2' instead of 'E'
        show_hidden: Draw hidden cells' names instead of dashes

    Returns:
        Multi-line diagram, highest string first
    """
    labels = [str(p) if with_octaves else str(p.pitch_class) for p in fretboard.tuning]
    label_width = max((len(label) for label in labels), default=0)

    lines = [format_fret_numbers(fretboard.fret_count, label_width)]
    for string_index in reversed(range(fretboard.string_count)):
        cells = []
        for cell in fretboard.string(string_index):
            if cell.visible or show_hidden:
                name = str(cell.pitch) if with_octaves else str(cell.pitch.pitch_class)
                cells.append(_cell_text(name))
            else:
                cells.append(_cell_text(HIDDEN))
        lines.append(f"{labels[string_index].rjust(label_width)}|" + "".join(cells))
    return "\n".join(lines)
