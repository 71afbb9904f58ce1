"""
Pointer protocol for the desktop: press on a handle, drag, release.

The controller is the only owner of drag state. It is driven synchronously
from the event loop, one event at a time.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from . import pointer
from .geometry import DEFAULT_LIMITS, Rect, drag_rect
from .handles import HandleKind, handle_kind, is_focusable
from .pointer import event_position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DragSession:
    window_id: str
    kind: HandleKind
    anchor: Tuple[int, int]
    start_rect: Rect


class DesktopController:
    def __init__(self, stack, limits=DEFAULT_LIMITS, on_focus: Optional[Callable] = None):
        self.stack = stack
        self.limits = limits
        self.on_focus = on_focus
        self.session: Optional[DragSession] = None

    @property
    def dragging(self):
        return self.session is not None

    def dispatch(self, event):
        handler = {
            pointer.MOUSE_DOWN: self.handle_mouse_down,
            pointer.MOUSE_MOVE: self.handle_mouse_move,
            pointer.MOUSE_UP: self.handle_mouse_up,
            pointer.TOUCH_START: self.handle_touch_start,
            pointer.TOUCH_MOVE: self.handle_touch_move,
            pointer.TOUCH_END: self.handle_touch_end,
        }.get(getattr(event, "type", None))
        if handler is not None:
            handler(event)

    # Touch goes through the same handlers but leaves the default action
    # alone so the page can still scroll on touch devices.
    def handle_touch_start(self, event):
        self.handle_mouse_down(event, prevent_default=False)

    def handle_touch_move(self, event):
        self.handle_mouse_move(event, prevent_default=False)

    def handle_touch_end(self, event):
        self.handle_mouse_up(event, prevent_default=False)

    def handle_mouse_down(self, event, prevent_default=True):
        if prevent_default:
            event.prevent_default()

        element = event.target
        if element is None:
            return
        win = self.stack.get(element.window_id)

        if is_focusable(element) and win is not None:
            self.stack.promote(win.id)
            self._focus(win.id)
        else:
            self._focus(None)

        # A press always ends whatever session was left dangling.
        self.session = None

        kind = handle_kind(element)
        if kind is None or win is None:
            return
        if kind.is_resize and not win.resizable:
            return
        pos = event_position(event)
        if pos is None:
            return
        self.session = DragSession(win.id, kind, pos, win.rect)
        logger.debug("Drag %s started on %s at %s", kind.name, win.id, pos)

    def handle_mouse_move(self, event, prevent_default=True):
        if prevent_default:
            event.prevent_default()

        session = self.session
        if session is None:
            return
        win = self.stack.get(session.window_id)
        if win is None:
            self.session = None
            return
        pos = event_position(event)
        if pos is None:
            return
        win.rect = drag_rect(session.kind, session.start_rect, session.anchor, pos,
                             self.limits, prior=win.rect)

    def handle_mouse_up(self, event, prevent_default=True):
        if prevent_default:
            event.prevent_default()
        self.cancel_drag()

    def cancel_drag(self):
        if self.session is not None:
            logger.debug("Drag %s ended on %s", self.session.kind.name, self.session.window_id)
            self.session = None

    def unmount(self, window_id):
        if self.session is not None and self.session.window_id == window_id:
            self.cancel_drag()
        return self.stack.unmount(window_id)

    def _focus(self, window_id):
        if self.on_focus is not None:
            self.on_focus(window_id)
