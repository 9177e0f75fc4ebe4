"""
Generic lookups over grain sequences.
All functions are pure and never index outside the sequence they are given.
"""
from __future__ import annotations
from typing import Optional

from .types import EmptyGrainSequenceError, Grain, GrainSequence


def contains(target: int, grain: Grain) -> bool:
    """Whether target lies in the half-open interval [grain.start, grain.end)."""
    return target >= grain.start and target < grain.end


def division_search(
    target: int,
    grains: GrainSequence,
    upper_bound: Optional[int] = None
) -> Optional[int]:
    """
    Binary search for the index of the grain containing target.
    
    The comparator is `contains`: a hit returns the index, a target before
    the candidate's start moves left, anything else moves right. A grain's
    end therefore belongs to the following grain.
    
    Args:
        target: Sample index to locate
        grains: Sorted, contiguous grain sequence
        upper_bound: Total track length; targets at or past it are out of range
    
    Returns:
        The containing index, 0 for targets before the first grain, or None
        when target is past the end of the track.
    """
    if not grains:
        raise EmptyGrainSequenceError("Cannot search an empty grain sequence")
    if upper_bound is not None and target >= upper_bound:
        return None

    low, high = 0, len(grains)
    while low < high:
        mid = (low + high) // 2
        grain = grains[mid]
        if contains(target, grain):
            return mid
        if target < grain.start:
            high = mid
        else:
            low = mid + 1

    # Before the first grain: nearest real content is the first grain
    if low == 0:
        return 0
    return None


def logical_segment(length: int, segment_length: int) -> list[Grain]:
    """
    Cut [0, length) into consecutive grains of segment_length samples.
    The final grain is shortened when length is not an exact multiple.
    """
    if segment_length < 1:
        raise ValueError(f"Segment length must be positive, got {segment_length}")
    return [
        Grain(start, min(start + segment_length, length))
        for start in range(0, length, segment_length)
    ]
