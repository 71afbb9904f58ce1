"""
Z-order bookkeeping for mounted windows.

The stack keeps the z_index values of its windows an exact permutation of
0..N-1 after every mount, unmount and promotion. Higher is closer to the top.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from .geometry import Rect

logger = logging.getLogger(__name__)


@dataclass
class WindowState:
    id: str
    title: str
    rect: Rect
    resizable: bool = True
    z_index: int = 0


class FocusStack:
    def __init__(self, windows=()):
        self._windows: Dict[str, WindowState] = {}
        if windows:
            self.initialize(windows)

    def __len__(self):
        return len(self._windows)

    def __contains__(self, window_id):
        return window_id in self._windows

    def __iter__(self):
        return iter(self.ordered())

    def get(self, window_id) -> Optional[WindowState]:
        return self._windows.get(window_id)

    def initialize(self, windows):
        """Replace the registry, stacking windows in the order given (first at the bottom)."""
        self._windows = {}
        for win in windows:
            self.mount(win)

    def mount(self, window):
        if window.id in self._windows:
            raise ValueError(f"window {window.id!r} is already mounted")
        window.z_index = len(self._windows)
        self._windows[window.id] = window
        logger.debug("Mounted %s at z=%d", window.id, window.z_index)
        return window

    def unmount(self, window_id):
        win = self._windows.pop(window_id, None)
        if win is None:
            return None
        for other in self._windows.values():
            if other.z_index > win.z_index:
                other.z_index -= 1
        logger.debug("Unmounted %s from z=%d", window_id, win.z_index)
        return win

    def promote(self, window_id):
        """Raise a window to the top; windows above it each drop one slot."""
        target = self._windows.get(window_id)
        if target is None:
            return False
        cutoff = target.z_index
        for win in self._windows.values():
            if win is not target and win.z_index > cutoff:
                win.z_index -= 1
        target.z_index = max(len(self._windows) - 1, 0)
        if target.z_index != cutoff:
            logger.debug("Promoted %s from z=%d to z=%d", window_id, cutoff, target.z_index)
        return True

    def ordered(self) -> List[WindowState]:
        """Windows bottom to top."""
        return sorted(self._windows.values(), key=lambda w: w.z_index)

    def topmost(self) -> Optional[WindowState]:
        if not self._windows:
            return None
        return max(self._windows.values(), key=lambda w: w.z_index)
