"""
Centralized configuration for grainview.
All magic numbers and default settings in one place.
"""
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AudioConfig:
    """Audio buffer configuration."""
    default_samplerate: int = 44100


@dataclass(frozen=True, slots=True)
class GrainConfig:
    """Grain partitioning and summarization settings."""
    seconds_per_grain: float = 1.0
    case_rate: int = 100  # Data points per sample case


@dataclass(frozen=True, slots=True)
class UndoConfig:
    """Undo/Redo configuration."""
    max_depth: int = 50


# Global config instances (immutable singletons)
AUDIO_CONFIG = AudioConfig()
GRAIN_CONFIG = GrainConfig()
UNDO_CONFIG = UndoConfig()
