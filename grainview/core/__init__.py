"""
grainview Core Module

This module contains the grain algebra and the editing layer built on it:
- grains: split, partition, view resolution and sample cases
- search: containment and division binary search
- GrainTrack: Track representation
- TrackEditor: Track list, selection and undoable edits
"""
from .config import AUDIO_CONFIG, GRAIN_CONFIG, UNDO_CONFIG
from .types import EmptyGrainSequenceError, Grain, GrainSequence, View, ViewIndexes
from .search import contains, division_search, logical_segment
from .numeric import clamp, random_index, seconds_to_samples
from .grains import (
    create_filler_grain,
    grain_lengths,
    grains_in_view,
    grains_to_show,
    partition_equally,
    sample_cases,
    split,
    split_one,
)
from .track import GrainTrack
from .undo_manager import UndoManager
from .editor import TrackEditor

__all__ = [
    # Types
    'Grain',
    'GrainSequence',
    'View',
    'ViewIndexes',
    'EmptyGrainSequenceError',
    # Algebra
    'split_one',
    'split',
    'partition_equally',
    'grain_lengths',
    'sample_cases',
    'grains_in_view',
    'grains_to_show',
    'create_filler_grain',
    'contains',
    'division_search',
    'logical_segment',
    # Numeric helpers
    'seconds_to_samples',
    'random_index',
    'clamp',
    # Main classes
    'GrainTrack',
    'UndoManager',
    'TrackEditor',
    # Config
    'AUDIO_CONFIG',
    'GRAIN_CONFIG',
    'UNDO_CONFIG',
]
