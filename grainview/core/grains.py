"""
Grain algebra for grainview.
All functions are pure: input sequences are never mutated and every
grain produced by a split is an independent value.
"""
from __future__ import annotations
import logging
import math
from typing import Optional
import numpy as np

from .config import AUDIO_CONFIG
from .numeric import random_index, seconds_to_samples
from .search import division_search, logical_segment
from .types import (
    AudioArray,
    EmptyGrainSequenceError,
    Grain,
    GrainSequence,
    View,
    ViewIndexes,
)

logger = logging.getLogger("GrainView")


def _require_grains(grains: GrainSequence) -> None:
    if not grains:
        raise EmptyGrainSequenceError("Grain sequence must contain at least one grain")


# =============================================================================
# SPLITTING
# =============================================================================

def split_one(grain: Grain, split_point: int) -> list[Grain]:
    """
    Split a single grain into two adjacent grains at split_point.

    A point on or before the grain's start, or on or after its last sample,
    produces no new boundary and the original grain is returned alone.

    Args:
        grain: Grain to split
        split_point: Sample index that becomes the start of the right half

    Returns:
        [grain] unchanged, or [left, right] carrying copies of grain's metadata
    """
    # grain.end minus one because it is exclusive
    if split_point <= grain.start or split_point >= grain.end - 1:
        return [grain]
    left = grain.with_bounds(grain.start, split_point)
    right = grain.with_bounds(split_point, grain.end)
    return [left, right]


def split(grains: GrainSequence, split_point: int) -> GrainSequence:
    """
    Split whichever grain of the sequence contains split_point.

    Args:
        grains: Non-empty, contiguous grain sequence
        split_point: Sample index to cut at

    Returns:
        A new sequence with the containing grain replaced by its halves, or
        `grains` itself when the point is at or outside the track's edges.
    """
    _require_grains(grains)
    first_sample = grains[0].start
    last_sample = grains[-1].end - 1
    if split_point <= first_sample or split_point >= last_sample:
        logger.debug(f"Split at {split_point} outside ({first_sample}, {last_sample}), ignored")
        return grains

    target_index = division_search(split_point, grains)
    before = list(grains[:target_index])
    after = list(grains[target_index + 1:])
    return before + split_one(grains[target_index], split_point) + after


# =============================================================================
# CONSTRUCTION & MEASUREMENT
# =============================================================================

def partition_equally(
    sample_count,
    seconds_per_grain: float,
    samplerate: int = AUDIO_CONFIG.default_samplerate
) -> list[Grain]:
    """
    Partition [0, sample_count) into equally sized grains.

    Args:
        sample_count: Number of samples, or a sample buffer to take the length of
        seconds_per_grain: Duration of each grain; the last grain may be shorter
        samplerate: Samples per second used for the conversion

    Returns:
        Freshly built grains with no metadata
    """
    if not isinstance(sample_count, (int, np.integer)):
        sample_count = len(sample_count)
    if sample_count <= 0:
        raise EmptyGrainSequenceError("Cannot partition an empty sample range")
    grain_length = seconds_to_samples(seconds_per_grain, samplerate)
    if grain_length < 1:
        raise ValueError(
            f"{seconds_per_grain}s at {samplerate}Hz is shorter than one sample"
        )
    return logical_segment(int(sample_count), grain_length)


def grain_lengths(grains: GrainSequence) -> list[int]:
    """Length in samples of every grain."""
    return [grain.end - grain.start for grain in grains]


def sample_cases(
    grains: GrainSequence,
    data: AudioArray,
    case_rate: int,
    rng: Optional[np.random.Generator] = None
) -> list[np.ndarray]:
    """
    Draw a representative set of absolute values from inside each grain.

    Args:
        grains: Grains built over `data`
        data: Sample buffer, mono (samples,) or multi-channel (samples, channels)
        case_rate: Number of data points represented by each case
        rng: Random generator (None = unseeded)

    Returns:
        One array per grain, positionally aligned with `grains`, holding
        ceil(length / case_rate) absolute values
    """
    if case_rate <= 0:
        raise ValueError(f"Case rate must be positive, got {case_rate}")
    # Summarize the first channel, as the waveform view draws it
    channel = data[:, 0] if data.ndim > 1 else data
    rng = rng if rng is not None else np.random.default_rng()

    cases = []
    for grain, length in zip(grains, grain_lengths(grains)):
        if length <= 0:
            cases.append(np.empty(0, dtype=channel.dtype))
            continue
        count = math.ceil(length / case_rate)
        indexes = random_index(grain.start, grain.end, size=count, rng=rng)
        cases.append(np.abs(channel[indexes]))
    return cases


# =============================================================================
# VIEW RESOLUTION
# =============================================================================

def grains_in_view(grains: GrainSequence, view: View) -> ViewIndexes:
    """
    Find the inclusive index range of grains touched by a view.

    The end is resolved from the last sample inside the view. Either edge
    falling past the end of the track clamps to the last grain.
    """
    _require_grains(grains)
    last_index = len(grains) - 1
    track_length = grains[last_index].end

    start_index = division_search(view.start, grains, track_length)
    end_index = division_search(view.end - 1, grains, track_length)
    return ViewIndexes(
        start_index=last_index if start_index is None else start_index,
        end_index=last_index if end_index is None else end_index,
    )


def create_filler_grain(start: int, end: int, more: bool) -> Grain:
    """Synthetic grain for view space; `more` marks content past its far edge."""
    return Grain(start=start, end=end, filler=True, more=more)


def grains_to_show(grains: GrainSequence, view: View) -> list[Grain]:
    """
    Real grains touched by the view, wrapped in a filler grain at each end.

    The start filler runs from view.start to the first shown grain and the
    end filler from the last shown grain to view.end, so the result always
    spans exactly [view.start, view.end). A view edge inside a real grain
    gives a filler with start > end, overlapping that grain.

    Args:
        grains: Entire grain sequence of a track
        view: Window to show

    Returns:
        [start_filler, *visible_grains, end_filler]
    """
    start_index, end_index = grains_in_view(grains, view)
    last_index = len(grains) - 1

    first_shown = grains[start_index]
    start_filler = create_filler_grain(
        view.start,
        first_shown.start,
        more=start_index != 0,
    )

    last_shown = grains[end_index]
    end_filler = create_filler_grain(
        last_shown.end,
        view.end,
        more=end_index != last_index,
    )

    return [start_filler, *grains[start_index:end_index + 1], end_filler]
