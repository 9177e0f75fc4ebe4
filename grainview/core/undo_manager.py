"""
Undo/redo history for track edits.
Edits register a pair of callbacks; the history only decides which one runs.
"""
from __future__ import annotations
from collections import deque
from typing import Optional

from grainview.utils.logger import logger
from .config import UNDO_CONFIG
from .types import RedoFunc, UndoFunc


class UndoAction:
    __slots__ = ('description', 'undo_func', 'redo_func')

    def __init__(self, description: str, undo_func: UndoFunc, redo_func: RedoFunc):
        self.description = description
        self.undo_func = undo_func
        self.redo_func = redo_func


class UndoManager:
    """Bounded undo stack; the oldest edit is dropped past max_depth."""

    def __init__(self, max_depth: int = UNDO_CONFIG.max_depth):
        self.max_depth = max_depth
        self.undo_stack: deque[UndoAction] = deque(maxlen=max_depth)
        self.redo_stack: list[UndoAction] = []

    def __len__(self) -> int:
        return len(self.undo_stack)

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    @property
    def undo_description(self) -> Optional[str]:
        return self.undo_stack[-1].description if self.undo_stack else None

    @property
    def redo_description(self) -> Optional[str]:
        return self.redo_stack[-1].description if self.redo_stack else None

    def push_action(self, description: str, undo_func: UndoFunc, redo_func: RedoFunc) -> None:
        self.undo_stack.append(UndoAction(description, undo_func, redo_func))
        self.redo_stack.clear()
        logger.debug(f"Undo action pushed: {description}")

    def undo(self) -> bool:
        if not self.undo_stack:
            logger.debug("Nothing to undo")
            return False
        action = self.undo_stack.pop()
        if not self._run(action.undo_func, "undo", action):
            return False
        self.redo_stack.append(action)
        return True

    def redo(self) -> bool:
        if not self.redo_stack:
            logger.debug("Nothing to redo")
            return False
        action = self.redo_stack.pop()
        if not self._run(action.redo_func, "redo", action):
            return False
        self.undo_stack.append(action)
        return True

    def _run(self, func, verb: str, action: UndoAction) -> bool:
        try:
            func()
        except Exception as e:
            # The failed action is dropped from history
            logger.error(f"Error during {verb} of '{action.description}': {e}")
            return False
        logger.info(f"{verb.capitalize()}: {action.description}")
        return True

    def clear(self) -> None:
        self.undo_stack.clear()
        self.redo_stack.clear()
        logger.debug("Undo/Redo stacks cleared")
