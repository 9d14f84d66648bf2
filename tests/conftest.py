"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_theory.core import NoteName, Pitch, Scale


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
def note():
    """Shorthand note-name parser."""
    return NoteName.parse


@pytest.fixture
def pitch():
    """Shorthand pitch parser."""
    return Pitch.parse


@pytest.fixture
def c_major() -> Scale:
    return Scale.parse("C_major")
