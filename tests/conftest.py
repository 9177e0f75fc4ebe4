"""
Pytest configuration and fixtures for grainview tests.
"""
import pytest
import numpy as np

from grainview.core.types import Grain
from grainview.core.track import GrainTrack
from grainview.core.editor import TrackEditor
from grainview.core.undo_manager import UndoManager
from grainview.core.config import AUDIO_CONFIG


@pytest.fixture
def three_grains() -> list[Grain]:
    """A 30 sample track cut into three 10 sample grains."""
    return [Grain(0, 10), Grain(10, 20), Grain(20, 30)]


@pytest.fixture
def sample_mono_audio() -> np.ndarray:
    """Generate 1 second of mono sine wave audio."""
    sr = AUDIO_CONFIG.default_samplerate
    t = np.linspace(0, 1, sr, dtype=np.float32)
    return np.sin(2 * np.pi * 440 * t).astype(np.float32)


@pytest.fixture
def sample_stereo_audio() -> np.ndarray:
    """Generate 1 second of stereo sine wave audio."""
    sr = AUDIO_CONFIG.default_samplerate
    t = np.linspace(0, 1, sr, dtype=np.float32)
    left = np.sin(2 * np.pi * 440 * t).astype(np.float32)
    right = np.sin(2 * np.pi * 880 * t).astype(np.float32)
    return np.column_stack((left, right))


@pytest.fixture
def sample_track(sample_stereo_audio) -> GrainTrack:
    """A 1 second track cut into 0.25 second grains."""
    track = GrainTrack(name="Test Track")
    track.set_data(sample_stereo_audio, AUDIO_CONFIG.default_samplerate, seconds_per_grain=0.25)
    return track


@pytest.fixture
def editor() -> TrackEditor:
    """Create an empty track editor."""
    return TrackEditor(seconds_per_grain=0.25)


@pytest.fixture
def undo_manager() -> UndoManager:
    """Create an undo manager."""
    return UndoManager(max_depth=10)
