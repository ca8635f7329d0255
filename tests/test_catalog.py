"""
Tests for the scale and chord catalog.
"""

from pathlib import Path

import pytest

from chuk_mcp_fretboard.catalog import Catalog, normalize_name
from chuk_mcp_fretboard.core import Accidental, ChordInterval, Step
from chuk_mcp_fretboard.errors import UnknownCatalogNameError


class TestNormalizeName:
    """Tests for lookup key normalization."""

    def test_normalize(self) -> None:
        """Case, spaces, dashes and underscores are ignored."""
        assert normalize_name("Minor Pentatonic") == "minorpentatonic"
        assert normalize_name("natural_minor") == "naturalminor"
        assert normalize_name(" half-diminished 7 ") == "halfdiminished7"


class TestScaleLookup:
    """Tests for scale lookups against the built-in library."""

    def test_list_scales(self, catalog: Catalog) -> None:
        """The library ships the common scales and modes."""
        names = [s.name for s in catalog.list_scales()]
        assert names[0] == "major"
        for name in ("natural minor", "dorian", "minor pentatonic", "blues", "chromatic"):
            assert name in names

    def test_all_library_scales_close(self, catalog: Catalog) -> None:
        """Every shipped scale spans exactly one octave."""
        for scale in catalog.list_scales():
            assert scale.is_closed, scale.name

    def test_get_scale(self, catalog: Catalog) -> None:
        """Scales are found by loose name."""
        major = catalog.get_scale("Major")
        assert major is not None
        assert major.pattern() == "W W H W W W H"
        assert catalog.get_scale("natural_minor") is catalog.get_scale("Natural Minor")

    def test_aliases(self, catalog: Catalog) -> None:
        """Aliases resolve to the same definition."""
        assert catalog.get_scale("ionian") is catalog.get_scale("major")
        assert catalog.get_scale("aeolian") is catalog.get_scale("natural minor")
        assert catalog.get_scale("minor") is catalog.get_scale("natural minor")

    def test_steps_parsed(self, catalog: Catalog) -> None:
        """One-and-a-half steps come through as Step members."""
        harmonic = catalog.require_scale("harmonic minor")
        assert Step.ONE_AND_A_HALF in harmonic.steps
        chromatic = catalog.require_scale("chromatic")
        assert len(chromatic) == 12
        assert set(chromatic.steps) == {Step.HALF}

    def test_unknown_scale(self, catalog: Catalog) -> None:
        """Unknown names are None, or an error with require_scale."""
        assert catalog.get_scale("hungarian gypsy") is None
        with pytest.raises(UnknownCatalogNameError, match="not found"):
            catalog.require_scale("hungarian gypsy")
        with pytest.raises(LookupError):
            catalog.require_scale("hungarian gypsy")

    def test_scale_at(self, catalog: Catalog) -> None:
        """Index lookups are 0-based and None when out of range."""
        assert catalog.scale_at(0) is catalog.get_scale("major")
        assert catalog.scale_at(len(catalog.list_scales())) is None
        assert catalog.scale_at(-1) is None


class TestChordLookup:
    """Tests for chord lookups against the built-in library."""

    def test_get_by_name(self, catalog: Catalog) -> None:
        """Chords are found by name."""
        minor = catalog.get_chord("minor")
        assert minor is not None
        assert minor.formula() == "1 b3 5"
        assert catalog.get_chord("Dominant-7") is not None

    def test_get_by_abbreviation(self, catalog: Catalog) -> None:
        """Abbreviations match exactly."""
        assert catalog.get_chord("m") is catalog.get_chord("minor")
        assert catalog.get_chord("maj7") is catalog.get_chord("major 7")
        assert catalog.get_chord("7") is catalog.get_chord("dominant 7")
        assert catalog.get_chord("m7b5") is catalog.get_chord("half diminished 7")

    def test_major_has_no_abbreviation(self, catalog: Catalog) -> None:
        """The major triad is written with the root alone."""
        major = catalog.require_chord("major")
        assert major.abbreviation == ""
        assert major.intervals == (ChordInterval(1), ChordInterval(3), ChordInterval(5))

    def test_extended_intervals(self, catalog: Catalog) -> None:
        """Extended chords use degrees above the octave."""
        thirteenth = catalog.require_chord("13")
        assert ChordInterval(13) in thirteenth.intervals
        assert ChordInterval(7, Accidental.FLAT) in thirteenth.intervals

    def test_unknown_chord(self, catalog: Catalog) -> None:
        """Unknown chords are None, or an error with require_chord."""
        assert catalog.get_chord("mystic") is None
        with pytest.raises(UnknownCatalogNameError):
            catalog.require_chord("mystic")

    def test_chord_at(self, catalog: Catalog) -> None:
        """Index lookups are 0-based and None when out of range."""
        assert catalog.chord_at(0) is catalog.get_chord("major")
        assert catalog.chord_at(1000) is None


class TestProjectCatalog:
    """Tests for project overrides and malformed files."""

    def test_project_scale_added(self, temp_dir: Path) -> None:
        """Project scales extend the library."""
        (temp_dir / "scales.yaml").write_text(
            "scales:\n  - name: in sen\n    steps: [H, WH, W, WH, W]\n"
        )
        library_only = Catalog()
        catalog = Catalog(project_path=temp_dir)
        assert len(catalog.list_scales()) == len(library_only.list_scales()) + 1
        in_sen = catalog.require_scale("in sen")
        assert in_sen.pattern() == "H WH W WH W"

    def test_project_overrides_library(self, temp_dir: Path) -> None:
        """Project entries replace library entries with the same name."""
        (temp_dir / "chords.yaml").write_text(
            "chords:\n  - name: power\n    abbreviation: '5'\n    intervals: ['1', '5', '8']\n"
        )
        catalog = Catalog(project_path=temp_dir)
        power = catalog.require_chord("power")
        assert power.formula() == "1 5 8"
        assert len(catalog.list_chords()) == len(Catalog().list_chords())

    def test_malformed_entry_skipped(self, temp_dir: Path) -> None:
        """Bad entries are skipped; the rest still load."""
        (temp_dir / "chords.yaml").write_text(
            "chords:\n"
            "  - name: broken\n"
            "    intervals: ['1', 'x3']\n"
            "  - name: quartal\n"
            "    abbreviation: q\n"
            "    intervals: ['1', '4', 'b7']\n"
        )
        catalog = Catalog(project_path=temp_dir)
        assert catalog.get_chord("broken") is None
        assert catalog.require_chord("q").name == "quartal"

    def test_unreadable_file_ignored(self, temp_dir: Path) -> None:
        """Invalid YAML doesn't break the library."""
        (temp_dir / "scales.yaml").write_text("scales: [\n")
        catalog = Catalog(project_path=temp_dir)
        assert catalog.get_scale("major") is not None

    def test_missing_library(self, temp_dir: Path) -> None:
        """An empty library directory gives an empty catalog."""
        catalog = Catalog(library_path=temp_dir)
        assert catalog.list_scales() == []
        assert catalog.get_chord("minor") is None

    def test_clear_cache(self, temp_dir: Path) -> None:
        """Cleared catalogs re-read their files."""
        catalog = Catalog(library_path=temp_dir)
        assert catalog.get_scale("custom") is None
        (temp_dir / "scales.yaml").write_text(
            "scales:\n  - name: custom\n    steps: [WH, WH, WH, WH]\n"
        )
        assert catalog.get_scale("custom") is None
        catalog.clear_cache()
        assert catalog.require_scale("custom").is_closed

    def test_non_string_steps_skipped(self, temp_dir: Path) -> None:
        """Float and null steps skip the entry instead of breaking the catalog."""
        (temp_dir / "scales.yaml").write_text(
            "scales:\n"
            "  - name: fractional\n"
            "    steps: [1.5, W]\n"
            "  - name: empty step\n"
            "    steps: [~]\n"
            "  - name: boolean\n"
            "    steps: [true, W]\n"
        )
        catalog = Catalog(project_path=temp_dir)
        assert catalog.get_scale("fractional") is None
        assert catalog.get_scale("empty step") is None
        assert catalog.get_scale("boolean") is None
        assert catalog.get_scale("major") is not None
        assert len(catalog.list_scales()) == len(Catalog().list_scales())

    def test_scalar_alias(self, temp_dir: Path) -> None:
        """A single alias may be written without a list."""
        (temp_dir / "scales.yaml").write_text(
            "scales:\n"
            "  - name: hexatonic\n"
            "    aliases: augmented\n"
            "    steps: [WH, H, WH, H, WH, H]\n"
        )
        catalog = Catalog(project_path=temp_dir)
        hexatonic = catalog.require_scale("hexatonic")
        assert hexatonic.aliases == ("augmented",)
        assert catalog.get_scale("augmented") is hexatonic
        assert catalog.get_scale("a") is None
