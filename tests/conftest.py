"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_fretboard.catalog import Catalog
from chuk_mcp_fretboard.models import Instrument


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_midi_path(temp_dir: Path) -> Path:
    """Path for a temporary MIDI file."""
    return temp_dir / "test.mid"


@pytest.fixture
def catalog() -> Catalog:
    """Catalog backed by the built-in library only."""
    return Catalog()


@pytest.fixture
def guitar() -> Instrument:
    """Six-string guitar in standard E tuning, 24 frets."""
    return Instrument(family="guitar", root="E2")


@pytest.fixture
def bass() -> Instrument:
    """Four-string bass in standard E tuning, 24 frets."""
    return Instrument(family="bass", root="E1")
