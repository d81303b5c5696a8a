"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_harmony.core.pitch import Pitch
from chuk_mcp_harmony.harmony import SATB


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_wav_path(temp_dir: Path) -> Path:
    """Path for a temporary WAV file."""
    return temp_dir / "test.wav"


@pytest.fixture
def major_i() -> SATB:
    """C major, root doubled in bass and alto: C3 G3 C4 E4."""
    return SATB.new(
        0,
        soprano=Pitch.parse("E4"),
        alto=Pitch.parse("C4"),
        tenor=Pitch.parse("G3"),
        bass=Pitch.parse("C3"),
    )


@pytest.fixture
def minor_ii_4_2() -> SATB:
    """D minor seventh over C: C3 A3 D4 F4."""
    return SATB.new(
        2,
        soprano=Pitch.parse("F4"),
        alto=Pitch.parse("D4"),
        tenor=Pitch.parse("A3"),
        bass=Pitch.parse("C3"),
    )
