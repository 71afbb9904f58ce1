"""
Handle markers and the classifier that reads them.

Every piece of window chrome the desktop hit-tests is an Element carrying a
single tag. Classification looks only at that tag, never at positions.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

TITLEBAR = "titlebar"
BODY = "body"
WINDOW = "window"
CONTROL = "control"
DESKTOP = "desktop"


class HandleKind(Enum):
    MOVE = "titlebar"
    RESIZE_N = "resizer-n"
    RESIZE_S = "resizer-s"
    RESIZE_E = "resizer-e"
    RESIZE_W = "resizer-w"
    RESIZE_NE = "resizer-ne"
    RESIZE_NW = "resizer-nw"
    RESIZE_SE = "resizer-se"
    RESIZE_SW = "resizer-sw"

    @property
    def tag(self):
        return self.value

    @property
    def is_resize(self):
        return self is not HandleKind.MOVE


RESIZE_KINDS = tuple(k for k in HandleKind if k.is_resize)

_KIND_BY_TAG = {k.tag: k for k in HandleKind}


@dataclass(frozen=True)
class Element:
    """One tagged piece of chrome. ``window_id`` is None for the desktop itself."""
    tag: str
    window_id: Optional[str] = None


def handle_kind(element) -> Optional[HandleKind]:
    if element is None:
        return None
    return _KIND_BY_TAG.get(element.tag)


def is_drag_handle(element):
    return handle_kind(element) is not None


def is_focusable(element):
    if element is None:
        return False
    return is_drag_handle(element) or element.tag == BODY
