"""
Numeric helpers shared by the grain algebra and the track editor.
"""
from __future__ import annotations
from typing import Optional
import numpy as np

from .config import AUDIO_CONFIG


def seconds_to_samples(seconds: float, samplerate: int = AUDIO_CONFIG.default_samplerate) -> int:
    """Convert a duration in seconds to a whole number of samples."""
    return int(round(seconds * samplerate))


def random_index(
    low: int,
    high: int,
    size: int,
    rng: Optional[np.random.Generator] = None
) -> np.ndarray:
    """
    Draw uniform random integers in [low, high).
    
    Args:
        low: Inclusive lower bound
        high: Exclusive upper bound
        size: Number of draws
        rng: Generator to draw from (None = fresh default generator)
    
    Returns:
        An int64 array of length `size`
    """
    rng = rng if rng is not None else np.random.default_rng()
    return rng.integers(low, high, size=size)


def clamp(value, low, high):
    """Limit value to the inclusive range [low, high]."""
    return max(low, min(value, high))
