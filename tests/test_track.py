"""
Tests for GrainTrack.
"""
import pytest
import numpy as np

from grainview.core.track import GrainTrack
from grainview.core.config import AUDIO_CONFIG, GRAIN_CONFIG
from grainview.core.types import Grain, View


class TestGrainTrack:
    """Tests for GrainTrack functionality."""
    
    def test_default_initialization(self):
        track = GrainTrack()
        assert track.name == "Track"
        assert track.data is None
        assert track.grains == ()
        assert track.samplerate == AUDIO_CONFIG.default_samplerate
        assert track.track_id
    
    def test_unique_ids(self):
        assert GrainTrack().track_id != GrainTrack().track_id
    
    def test_set_data(self, sample_stereo_audio):
        track = GrainTrack()
        result = track.set_data(sample_stereo_audio, 44100)
        
        assert track.data is not None
        assert track.samplerate == 44100
        assert result is track  # Fluent API
    
    def test_set_data_partitions(self, sample_track):
        assert len(sample_track.grains) == 4
        assert sample_track.grains[0] == Grain(0, 11025)
        assert sample_track.grains[-1].end == sample_track.duration_samples
    
    def test_default_grain_duration(self, sample_mono_audio):
        track = GrainTrack().set_data(sample_mono_audio, 44100)
        expected = round(GRAIN_CONFIG.seconds_per_grain * 44100)
        assert track.grains[0].length == min(expected, len(sample_mono_audio))
    
    def test_duration(self, sample_track):
        assert sample_track.duration_samples == AUDIO_CONFIG.default_samplerate
        assert np.isclose(sample_track.duration_seconds, 1.0, atol=0.01)
    
    def test_channels(self, sample_track, sample_mono_audio):
        assert sample_track.channels == 2
        assert sample_track.is_stereo
        mono = GrainTrack().set_data(sample_mono_audio, 44100)
        assert mono.is_mono
        assert not mono.is_stereo
    
    def test_get_mono(self, sample_track):
        mono = sample_track.get_mono()
        assert mono.ndim == 1
        assert len(mono) == sample_track.duration_samples
    
    def test_split_replaces_grains(self, sample_track):
        before = sample_track.grains
        assert sample_track.split(1000)
        
        assert len(sample_track.grains) == 5
        assert isinstance(sample_track.grains, tuple)
        assert sample_track.grains is not before
        assert before[0] == Grain(0, 11025)  # Old sequence untouched
    
    def test_split_on_boundary_rejected(self, sample_track):
        before = sample_track.grains
        assert not sample_track.split(11025)
        assert not sample_track.split(0)
        assert not sample_track.split(sample_track.duration_samples)
        assert sample_track.grains is before
    
    def test_split_without_data(self):
        assert not GrainTrack().split(10)
    
    def test_grains_to_show(self, sample_track):
        shown = sample_track.grains_to_show(View(0, sample_track.duration_samples))
        assert len(shown) == 6
        assert shown[0] == Grain(0, 0, filler=True, more=False)
        assert shown[-1] == Grain(44100, 44100, filler=True, more=False)
    
    def test_grains_in_view(self, sample_track):
        assert sample_track.grains_in_view(View(12000, 30000)) == (1, 2)
    
    def test_sample_cases(self, sample_track):
        cases = sample_track.sample_cases(case_rate=1000, rng=np.random.default_rng(1))
        assert len(cases) == len(sample_track.grains)
        assert all(len(case) == 12 for case in cases)  # ceil(11025 / 1000)
    
    def test_sample_cases_without_data(self):
        assert GrainTrack().sample_cases() == []
    
    def test_copy(self, sample_track):
        sample_track.split(1000)
        copy = sample_track.copy()
        
        assert copy.name == sample_track.name
        assert copy.grains == sample_track.grains
        assert copy.track_id != sample_track.track_id
        assert copy.data is not sample_track.data  # Deep copy
        assert np.allclose(copy.data, sample_track.data)
    
    def test_repr(self, sample_track):
        rep = repr(sample_track)
        assert "Test Track" in rep
        assert "1.00s" in rep
        assert "4 grains" in rep
