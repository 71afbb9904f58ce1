"""Deskshell: draggable, resizable, stackable windows on a pygame desktop."""
from .controller import DesktopController, DragSession
from .focus import FocusStack, WindowState
from .geometry import Limits, Rect, drag_patch, drag_rect
from .handles import Element, HandleKind, handle_kind, is_drag_handle, is_focusable
from .pointer import PointerEvent, event_position

__version__ = "1.0.0"
