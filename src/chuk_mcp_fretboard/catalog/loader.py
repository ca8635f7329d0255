"""
Catalog loader - discovers and loads scale and chord tables.

Tables can come from:
1. Built-in library (shipped with package)
2. Project catalog (user's project/catalog directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_fretboard.constants import ErrorMessages
from chuk_mcp_fretboard.core.chord import ChordDefinition, ChordInterval
from chuk_mcp_fretboard.core.pitch import Step
from chuk_mcp_fretboard.core.scale import ScaleDefinition
from chuk_mcp_fretboard.errors import UnknownCatalogNameError

logger = logging.getLogger(__name__)

SCALES_FILE = "scales.yaml"
CHORDS_FILE = "chords.yaml"


def normalize_name(name: str) -> str:
    """Lookup key: lowercase, with spaces, '-' and '_' removed."""
    return name.strip().lower().replace("-", "").replace("_", "").replace(" ", "")


def _as_list(value: Any) -> list[Any]:
    """A YAML field that may be written as one scalar or as a list."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


class Catalog:
    """
    Named scale and chord definitions.

    Definitions are loaded from YAML files in the library and project
    directories. Project entries override library entries with the same
    name. Lookups return None for unknown names; the require_* variants
    raise UnknownCatalogNameError.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the catalog.

        Args:
            library_path: Path to built-in catalog library
            project_path: Path to project catalog directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._scales: dict[str, ScaleDefinition] | None = None
        self._chords: dict[str, ChordDefinition] | None = None

    # Scales

    def list_scales(self) -> list[ScaleDefinition]:
        """All scale definitions, in table order."""
        return list(self._scale_table().values())

    def get_scale(self, name: str) -> ScaleDefinition | None:
        """
        Get a scale by name or alias.

        Args:
            name: Scale name (case, spaces, '-' and '_' are ignored)

        Returns:
            ScaleDefinition if found, None otherwise
        """
        key = normalize_name(name)
        table = self._scale_table()
        if key in table:
            return table[key]
        for scale in table.values():
            if key in (normalize_name(alias) for alias in scale.aliases):
                return scale
        return None

    def scale_at(self, index: int) -> ScaleDefinition | None:
        """Get a scale by its 0-based position in list_scales()."""
        scales = self.list_scales()
        if 0 <= index < len(scales):
            return scales[index]
        return None

    def require_scale(self, name: str) -> ScaleDefinition:
        """Get a scale by name, raising UnknownCatalogNameError if missing."""
        scale = self.get_scale(name)
        if scale is None:
            raise UnknownCatalogNameError(ErrorMessages.SCALE_NOT_FOUND.format(name=name))
        return scale

    # Chords

    def list_chords(self) -> list[ChordDefinition]:
        """All chord definitions, in table order."""
        return list(self._chord_table().values())

    def get_chord(self, name: str) -> ChordDefinition | None:
        """
        Get a chord by name or abbreviation.

        Names are matched loosely; abbreviations exactly ('m' is minor,
        'maj7' is major 7).

        Args:
            name: Chord name or abbreviation

        Returns:
            ChordDefinition if found, None otherwise
        """
        table = self._chord_table()
        for chord in table.values():
            if chord.abbreviation and chord.abbreviation == name.strip():
                return chord
        return table.get(normalize_name(name))

    def chord_at(self, index: int) -> ChordDefinition | None:
        """Get a chord by its 0-based position in list_chords()."""
        chords = self.list_chords()
        if 0 <= index < len(chords):
            return chords[index]
        return None

    def require_chord(self, name: str) -> ChordDefinition:
        """Get a chord by name, raising UnknownCatalogNameError if missing."""
        chord = self.get_chord(name)
        if chord is None:
            raise UnknownCatalogNameError(ErrorMessages.CHORD_NOT_FOUND.format(name=name))
        return chord

    def clear_cache(self) -> None:
        """Forget loaded tables so the next lookup re-reads the files."""
        self._scales = None
        self._chords = None

    # Loading

    def _scale_table(self) -> dict[str, ScaleDefinition]:
        if self._scales is None:
            self._scales = {}
            for data in self._load_entries(SCALES_FILE, "scales"):
                try:
                    scale = self._parse_scale(data)
                except (KeyError, ValueError) as e:
                    logger.warning(f"Skipping malformed scale {data.get('name')!r}: {e}")
                    continue
                self._scales[normalize_name(scale.name)] = scale
            logger.debug(f"Loaded {len(self._scales)} scales")
        return self._scales

    def _chord_table(self) -> dict[str, ChordDefinition]:
        if self._chords is None:
            self._chords = {}
            for data in self._load_entries(CHORDS_FILE, "chords"):
                try:
                    chord = self._parse_chord(data)
                except (KeyError, ValueError) as e:
                    logger.warning(f"Skipping malformed chord {data.get('name')!r}: {e}")
                    continue
                self._chords[normalize_name(chord.name)] = chord
            logger.debug(f"Loaded {len(self._chords)} chords")
        return self._chords

    def _load_entries(self, filename: str, section: str) -> list[dict[str, Any]]:
        """Library entries followed by project entries (later wins)."""
        entries: list[dict[str, Any]] = []
        paths = [self.library_path / filename]
        if self.project_path:
            paths.append(self.project_path / filename)

        for path in paths:
            if not path.exists():
                continue
            data = self._load_yaml_file(path)
            if data is None:
                continue
            items = data.get(section, [])
            if not isinstance(items, list):
                logger.warning(f"Skipping {path}: '{section}' is not a list")
                continue
            entries.extend(item for item in items if isinstance(item, dict))
        return entries

    def _load_yaml_file(self, path: Path) -> dict[str, Any] | None:
        """Load a YAML mapping, or None if the file is unreadable."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError):
            logger.warning(f"Skipping unreadable catalog file: {path}", exc_info=True)
            return None
        if not isinstance(data, dict):
            logger.warning(f"Skipping catalog file without a mapping: {path}")
            return None
        return data

    def _parse_scale(self, data: dict[str, Any]) -> ScaleDefinition:
        """Parse a scale from YAML data."""
        return ScaleDefinition(
            name=str(data["name"]),
            steps=tuple(Step.parse(step) for step in _as_list(data.get("steps"))),
            aliases=tuple(str(alias) for alias in _as_list(data.get("aliases"))),
        )

    def _parse_chord(self, data: dict[str, Any]) -> ChordDefinition:
        """Parse a chord from YAML data."""
        return ChordDefinition(
            name=str(data["name"]),
            abbreviation=str(data.get("abbreviation") or ""),
            intervals=tuple(
                ChordInterval.parse(str(i)) for i in _as_list(data.get("intervals"))
            ),
        )
