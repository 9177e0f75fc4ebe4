"""
Type definitions for the grainview core module.
Provides the grain value types and aliases shared by the algebra and the editor.
"""
from __future__ import annotations
import copy
from dataclasses import dataclass, field, replace
from typing import Any, Callable, NamedTuple, Sequence
import numpy as np
from numpy.typing import NDArray

# Audio data types
AudioArray = NDArray[np.float32]  # Shape: (samples,) or (samples, channels)
MonoArray = NDArray[np.float32]   # Shape: (samples,)

# Callback types
UndoFunc = Callable[[], None]
RedoFunc = Callable[[], None]


class EmptyGrainSequenceError(ValueError):
    """Raised when an operation receives a grain sequence with no grains."""


@dataclass(frozen=True, slots=True, eq=True, unsafe_hash=False)
class Grain:
    """
    Half-open interval [start, end) of sample indices plus caller metadata.
    Filler grains are synthesized at view edges and may be zero-length or
    inverted (start > end) where a view edge falls inside a real grain.

    Grains are unhashable: `meta` is a mutable dict.
    """
    start: int
    end: int
    filler: bool = False
    more: bool = False  # Real content exists past a filler's far edge
    meta: dict[str, Any] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    @property
    def length(self) -> int:
        return self.end - self.start

    def with_bounds(self, start: int, end: int) -> "Grain":
        """Copy of this grain over new bounds; metadata is deep-copied."""
        return replace(self, start=start, end=end, meta=copy.deepcopy(self.meta))


# Ordered, contiguous, non-overlapping grains covering a track
GrainSequence = Sequence[Grain]


@dataclass(frozen=True, slots=True)
class View:
    """Requested window of sample indices, [start, end)."""
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise ValueError(f"View start ({self.start}) must be before end ({self.end})")

    @property
    def length(self) -> int:
        return self.end - self.start


class ViewIndexes(NamedTuple):
    """Inclusive indexes of the first and last real grains touched by a view."""
    start_index: int
    end_index: int
