from typing import Optional
import numpy as np
from PyQt6.QtCore import QObject, pyqtSignal

from grainview.core.config import AUDIO_CONFIG, GRAIN_CONFIG, UNDO_CONFIG
from grainview.core.numeric import clamp
from grainview.core.track import GrainTrack
from grainview.core.types import Grain, View
from grainview.core.undo_manager import UndoManager
from grainview.utils.logger import logger

class TrackEditor(QObject):
    """
    Track-editing layer over the grain algebra.
    Owns the ordered track list and the selection; every change to a
    track's grains is a wholesale replacement registered with undo.
    """
    tracksChanged = pyqtSignal()
    selectionChanged = pyqtSignal(str)  # Selected track id, "" for none
    grainsChanged = pyqtSignal(str)     # Id of the track whose grains changed

    def __init__(self, seconds_per_grain=GRAIN_CONFIG.seconds_per_grain):
        super().__init__()
        self.tracks: list[GrainTrack] = []
        self.selected_track: Optional[str] = None
        self.samplerate = AUDIO_CONFIG.default_samplerate
        self.seconds_per_grain = seconds_per_grain
        self.undo_manager = UndoManager(max_depth=UNDO_CONFIG.max_depth)
        logger.info("TrackEditor initialized")

    # --- Track Management ---

    @property
    def track_ids(self) -> list[str]:
        return [t.track_id for t in self.tracks]

    def get_track(self, track_id) -> Optional[GrainTrack]:
        """Looks up a track by id."""
        for track in self.tracks:
            if track.track_id == track_id:
                return track
        return None

    def add_track(self, name, data, samplerate=None) -> GrainTrack:
        """Creates a track over data, partitioned into equal grains."""
        if samplerate is None:
            samplerate = self.samplerate
        track = GrainTrack(name).set_data(np.asarray(data), samplerate, self.seconds_per_grain)
        self.tracks.append(track)
        logger.info(f"Track added: {name} ({len(track.grains)} grains)")
        self.tracksChanged.emit()
        if self.selected_track is None:
            self.select_track(track.track_id)
        return track

    def select_track(self, track_id) -> bool:
        if track_id is not None and self.get_track(track_id) is None:
            logger.warning(f"Cannot select unknown track {track_id}")
            return False
        if track_id != self.selected_track:
            self.selected_track = track_id
            self.selectionChanged.emit(track_id or "")
        return True

    def remove_track(self, track_id) -> bool:
        """Removes a track with undo support, reselecting a neighbour if needed."""
        track = self.get_track(track_id)
        if track is None:
            logger.warning(f"Cannot remove unknown track {track_id}")
            return False

        index = self.tracks.index(track)
        was_selected = self.selected_track == track_id

        def undo():
            self.tracks.insert(index, track)
            self.tracksChanged.emit()
            if was_selected:
                self.select_track(track_id)

        def redo():
            self._detach_track(index, was_selected)

        self.undo_manager.push_action(f"Remove track {track.name}", undo, redo)
        self._detach_track(index, was_selected)
        return True

    def _detach_track(self, index, was_selected):
        del self.tracks[index]
        self.tracksChanged.emit()
        if not was_selected:
            return
        if not self.tracks:
            self.select_track(None)
            return
        # Prefer the track that took the removed one's place, else the new last
        new_max_index = len(self.tracks) - 1
        self.select_track(self.tracks[clamp(index, 0, new_max_index)].track_id)

    def clear_project(self):
        """Resets the editor to a clean state."""
        self.tracks = []
        self.undo_manager.clear()
        self.tracksChanged.emit()
        self.select_track(None)
        logger.info("Project cleared")

    # --- Editing Operations ---

    def undo(self): return self.undo_manager.undo()
    def redo(self): return self.undo_manager.redo()

    def split_track(self, track_id, split_point) -> bool:
        """Cuts the grain containing split_point on one track."""
        track = self.get_track(track_id)
        if track is None:
            logger.warning(f"Cannot split unknown track {track_id}")
            return False

        old_grains = track.grains
        if not track.split(split_point):
            logger.debug(f"Split at {split_point} left {track.name} unchanged")
            return False
        new_grains = track.grains

        def undo():
            track.grains = old_grains
            self.grainsChanged.emit(track.track_id)

        def redo():
            track.grains = new_grains
            self.grainsChanged.emit(track.track_id)

        self.undo_manager.push_action(f"Split {track.name} at {split_point}", undo, redo)
        self.grainsChanged.emit(track.track_id)
        return True

    # --- View ---

    def visible_grains(self, track_id, view: View) -> list[Grain]:
        """Grains to draw for a track in the given view, with edge fillers."""
        track = self.get_track(track_id)
        if track is None:
            return []
        return track.grains_to_show(view)
