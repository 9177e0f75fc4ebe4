"""
Track representation for grainview.
A track owns its sample buffer and the current grain sequence over it.
"""
from __future__ import annotations
import uuid
from typing import Optional
import numpy as np

from .config import AUDIO_CONFIG, GRAIN_CONFIG
from . import grains as grain_algebra
from .types import AudioArray, Grain, MonoArray, View, ViewIndexes


class GrainTrack:
    """
    Represents a single audio track with its data and grain partition.
    
    `grains` is only ever replaced as a whole, never mutated in place,
    so a reader always sees a complete sequence.
    """
    def __init__(self, name: str = "Track", track_id: Optional[str] = None):
        self.track_id = track_id or uuid.uuid4().hex
        self.name = name
        self.data: Optional[AudioArray] = None  # numpy array (samples,) or (samples, channels)
        self.samplerate = AUDIO_CONFIG.default_samplerate
        self.grains: tuple[Grain, ...] = ()

    def set_data(
        self,
        data: AudioArray,
        samplerate: int,
        seconds_per_grain: Optional[float] = None
    ) -> "GrainTrack":
        """Sets the audio data and rebuilds an equally spaced grain partition."""
        if seconds_per_grain is None:
            seconds_per_grain = GRAIN_CONFIG.seconds_per_grain
        self.data = data
        self.samplerate = samplerate
        self.grains = tuple(grain_algebra.partition_equally(len(data), seconds_per_grain, samplerate))
        return self  # Fluent API

    @property
    def duration_samples(self) -> int:
        """Total number of samples in the track."""
        return len(self.data) if self.data is not None else 0

    @property
    def duration_seconds(self) -> float:
        if self.samplerate <= 0:
            return 0.0
        return self.duration_samples / self.samplerate

    @property
    def channels(self) -> int:
        if self.data is None:
            return 0
        return 1 if self.data.ndim == 1 else self.data.shape[1]

    @property
    def is_mono(self) -> bool:
        return self.channels == 1

    @property
    def is_stereo(self) -> bool:
        return self.channels == 2

    def get_mono(self) -> Optional[MonoArray]:
        """Mono mixdown of the track data."""
        if self.data is None:
            return None
        if self.data.ndim == 1:
            return self.data
        return self.data.mean(axis=1).astype(np.float32)

    # --- Grain operations ---

    def split(self, split_point: int) -> bool:
        """Splits the grain containing split_point. Returns whether anything changed."""
        if not self.grains:
            return False
        new_grains = grain_algebra.split(self.grains, split_point)
        if len(new_grains) == len(self.grains):
            return False
        self.grains = tuple(new_grains)
        return True

    def grains_in_view(self, view: View) -> ViewIndexes:
        return grain_algebra.grains_in_view(self.grains, view)

    def grains_to_show(self, view: View) -> list[Grain]:
        return grain_algebra.grains_to_show(self.grains, view)

    def sample_cases(
        self,
        case_rate: Optional[int] = None,
        rng: Optional[np.random.Generator] = None
    ) -> list[np.ndarray]:
        """Representative absolute values per grain, for drawing summaries."""
        if self.data is None:
            return []
        if case_rate is None:
            case_rate = GRAIN_CONFIG.case_rate
        return grain_algebra.sample_cases(self.grains, self.data, case_rate, rng=rng)

    def copy(self) -> "GrainTrack":
        """Deep copy of data; grains are immutable values and are shared."""
        new_track = GrainTrack(name=self.name)
        new_track.data = self.data.copy() if self.data is not None else None
        new_track.samplerate = self.samplerate
        new_track.grains = self.grains
        return new_track

    def __repr__(self) -> str:
        return (f"GrainTrack(name={self.name!r}, {self.duration_seconds:.2f}s, "
                f"{len(self.grains)} grains)")
