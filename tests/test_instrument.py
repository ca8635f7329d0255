"""
Tests for the Instrument model and InstrumentManager.
"""

import pytest
from pydantic import ValidationError

from chuk_mcp_fretboard.constants import InstrumentFamily, TuningStyle
from chuk_mcp_fretboard.core import Pitch, PitchClass
from chuk_mcp_fretboard.errors import FretPositionError, UnsupportedInstrumentError
from chuk_mcp_fretboard.instruments import InstrumentManager
from chuk_mcp_fretboard.models import Instrument


def names(pitches: list[Pitch]) -> list[str]:
    return [str(p) for p in pitches]


class TestInstrumentModel:
    """Tests for construction and derived data."""

    def test_standard_guitar(self, guitar: Instrument) -> None:
        """Guitar defaults to standard tuning with 6 strings."""
        assert guitar.family == InstrumentFamily.GUITAR
        assert guitar.tuning_style == TuningStyle.STANDARD
        assert guitar.string_count == 6
        assert names(guitar.tuning) == ["E2", "A2", "D3", "G3", "B3", "E4"]

    def test_fretboard_shape(self, guitar: Instrument) -> None:
        """A 24-fret guitar has 6 x 25 positions."""
        board = guitar.fretboard
        assert board.string_count == 6
        assert board.fret_count == 24
        assert board.size == 150

    def test_fretboard_open_strings(self, guitar: Instrument) -> None:
        """Fret 0 on every string is the tuning."""
        assert [guitar.fretboard[s][0].pitch for s in range(6)] == guitar.tuning

    def test_root_accepts_pitch(self) -> None:
        """Root may be a Pitch or a pitch class."""
        from_pitch = Instrument(family=InstrumentFamily.BASS, root=Pitch(PitchClass.E, 1))
        assert names(from_pitch.tuning) == ["E1", "A1", "D2", "G2"]
        from_class = Instrument(family="bass", root=PitchClass.D)
        assert from_class.root == Pitch(PitchClass.D, 4)

    def test_invalid_root(self) -> None:
        """Unparseable roots fail validation."""
        with pytest.raises(ValidationError):
            Instrument(family="guitar", root="H2")
        with pytest.raises(ValidationError):
            Instrument(family="guitar", root="Fb2")

    def test_invalid_family(self) -> None:
        """Families outside the enum fail validation."""
        with pytest.raises(ValidationError):
            Instrument(family="kazoo", root="E2")

    def test_unsupported_family(self) -> None:
        """Known families without a tuning raise a typed error."""
        with pytest.raises(UnsupportedInstrumentError):
            Instrument(family="mandolin", root="G3")

    def test_too_many_strings(self) -> None:
        """A seven-string standard guitar is unsupported."""
        with pytest.raises(UnsupportedInstrumentError):
            Instrument(family="guitar", root="B1", string_count=7)

    def test_fewer_strings(self) -> None:
        """String count truncates the tuning."""
        instrument = Instrument(family="guitar", root="E2", string_count=3, fret_count=12)
        assert names(instrument.tuning) == ["E2", "A2", "D3"]
        assert instrument.fretboard.size == 3 * 13

    def test_field_bounds(self) -> None:
        """String and fret counts are range-checked."""
        with pytest.raises(ValidationError):
            Instrument(family="guitar", root="E2", string_count=0)
        with pytest.raises(ValidationError):
            Instrument(family="guitar", root="E2", fret_count=-1)
        with pytest.raises(ValidationError):
            Instrument(family="guitar", root="E2", fret_count=37)

    def test_cell_bounds(self, guitar: Instrument) -> None:
        """Out-of-range cells raise FretPositionError."""
        assert guitar.cell(0, 24).pitch == Pitch(PitchClass.E, 4)
        with pytest.raises(FretPositionError):
            guitar.cell(6, 0)
        with pytest.raises(FretPositionError):
            guitar.cell(0, 25)

    def test_tuning_is_a_copy(self, guitar: Instrument) -> None:
        """Mutating the returned tuning doesn't affect the instrument."""
        tuning = guitar.tuning
        tuning.clear()
        assert len(guitar.tuning) == 6

    def test_summary(self, guitar: Instrument) -> None:
        """Summary describes the configuration."""
        summary = guitar.summary()
        assert summary["family"] == "guitar"
        assert summary["root"] == "E2"
        assert summary["tuning"][-1] == "E4"
        assert summary["visible"] == 150


class TestInstrumentHighlight:
    """Tests for show_all / show_notes on an instrument."""

    def test_show_notes(self, guitar: Instrument) -> None:
        """Only matching pitch classes are visible."""
        count = guitar.show_notes([PitchClass.C, PitchClass.E, PitchClass.G])
        expected = sum(
            1 for cell in guitar.fretboard.cells() if cell.pitch.semitone in {0, 4, 7}
        )
        assert count == expected
        assert guitar.fretboard.visible_count() == expected
        assert guitar.selection == frozenset({PitchClass.C, PitchClass.E, PitchClass.G})

    def test_open_low_e_visible_for_e(self, guitar: Instrument) -> None:
        """The open low E is shown when E is selected."""
        guitar.show_notes([PitchClass.E])
        assert guitar.cell(0, 0).visible
        assert not guitar.cell(0, 1).visible

    def test_show_all(self, guitar: Instrument) -> None:
        """show_all restores every position and clears the selection."""
        guitar.show_notes([PitchClass.A])
        assert guitar.show_all() == 150
        assert guitar.selection is None

    def test_highlight_keeps_pitches(self, guitar: Instrument) -> None:
        """Pitches are the same before and after highlighting."""
        before = guitar.fretboard.pitches()
        guitar.show_notes([PitchClass.Fs])
        assert guitar.fretboard.pitches() == before


class TestRetuning:
    """Tests for change_tuning and recalculation."""

    def test_change_to_drop(self, guitar: Instrument) -> None:
        """Drop D from a D root."""
        guitar.change_tuning(TuningStyle.DROP, "D2")
        assert guitar.tuning_style == TuningStyle.DROP
        assert guitar.root == Pitch(PitchClass.D, 2)
        assert names(guitar.tuning) == ["D2", "A2", "D3", "G3", "B3", "E4"]
        assert guitar.fretboard[0][0].pitch == Pitch(PitchClass.D, 2)

    def test_change_root_only(self, guitar: Instrument) -> None:
        """Keeping the style but moving the root transposes everything."""
        guitar.change_tuning(root="D2")
        assert guitar.tuning_style == TuningStyle.STANDARD
        assert names(guitar.tuning) == ["D2", "G2", "C3", "F3", "A3", "D4"]

    def test_selection_survives_retune(self, guitar: Instrument) -> None:
        """The active selection is re-applied to the new fretboard."""
        guitar.show_notes([PitchClass.E])
        guitar.change_tuning(TuningStyle.DROP, "D2")
        expected = sum(1 for cell in guitar.fretboard.cells() if cell.pitch.semitone == 4)
        assert guitar.fretboard.visible_count() == expected
        assert not guitar.cell(0, 0).visible

    def test_unsupported_retune_leaves_instrument(self, guitar: Instrument) -> None:
        """A failed retune changes nothing."""
        with pytest.raises(UnsupportedInstrumentError):
            guitar.change_tuning(TuningStyle.CUSTOM)
        assert guitar.tuning_style == TuningStyle.STANDARD
        assert names(guitar.tuning) == ["E2", "A2", "D3", "G3", "B3", "E4"]

    def test_recalculate_fretboard(self, guitar: Instrument) -> None:
        """Changing the fret count and recalculating resizes the board."""
        guitar.fret_count = 12
        guitar.recalculate_fretboard()
        assert guitar.fretboard.size == 6 * 13

    def test_recalculate_tuning(self, bass: Instrument) -> None:
        """Changing the root and recalculating retunes."""
        bass.root = Pitch(PitchClass.D, 1)
        bass.recalculate_tuning()
        assert names(bass.tuning) == ["D1", "G1", "C2", "F2"]


class TestInstrumentManager:
    """Tests for the instrument registry."""

    def test_create_with_default_root(self) -> None:
        """Guitars default to E2 and basses to E1."""
        manager = InstrumentManager()
        guitar = manager.create("strat", InstrumentFamily.GUITAR)
        bass = manager.create("p-bass", InstrumentFamily.BASS)
        assert guitar.root == Pitch(PitchClass.E, 2)
        assert bass.root == Pitch(PitchClass.E, 1)
        assert len(manager) == 2
        assert "strat" in manager

    def test_duplicate_name(self) -> None:
        """Names are unique."""
        manager = InstrumentManager()
        manager.create("strat", InstrumentFamily.GUITAR)
        with pytest.raises(ValueError, match="already exists"):
            manager.create("strat", InstrumentFamily.BASS)

    def test_failed_create_not_registered(self) -> None:
        """Unsupported instruments are not added."""
        manager = InstrumentManager()
        with pytest.raises(UnsupportedInstrumentError):
            manager.create("uke", InstrumentFamily.UKULELE, root="G4")
        assert "uke" not in manager

    def test_get_list_delete(self) -> None:
        """Lookup, listing and deletion."""
        manager = InstrumentManager()
        created = manager.create("strat", InstrumentFamily.GUITAR, TuningStyle.OPEN, "D2")
        assert manager.get("strat") is created
        assert manager.get("missing") is None
        assert manager.list_instruments() == [("strat", created)]
        assert manager.delete("strat")
        assert not manager.delete("strat")
        assert len(manager) == 0
