"""Pointer events as the desktop sees them, and the mouse/touch position unifier."""
from dataclasses import dataclass, field
from typing import Optional, Tuple

MOUSE_DOWN, MOUSE_MOVE, MOUSE_UP = "mousedown", "mousemove", "mouseup"
TOUCH_START, TOUCH_MOVE, TOUCH_END = "touchstart", "touchmove", "touchend"


@dataclass
class PointerEvent:
    """A mouse or touch event delivered to the desktop surface.

    Mouse events carry ``client_x``/``client_y``; touch events carry the list
    of active touch points in ``touches`` (empty on ``touchend``).
    """
    type: str
    target: object = None
    client_x: int = 0
    client_y: int = 0
    touches: Tuple[Tuple[int, int], ...] = ()
    default_prevented: bool = field(default=False, compare=False)

    @property
    def is_touch(self):
        return self.type.startswith("touch")

    def prevent_default(self):
        self.default_prevented = True


def event_position(event) -> Optional[Tuple[int, int]]:
    """Client (x, y) of a pointer event; touch events use the first touch only.

    Returns None for a touch event with no active touch point.
    """
    if event.is_touch:
        if not event.touches:
            return None
        x, y = event.touches[0]
        return x, y
    return event.client_x, event.client_y
