"""
Window geometry for a drag in progress.

All deltas are taken against the rectangle and pointer position captured
when the drag started, never against the previous move event.
"""
from dataclasses import dataclass, replace

from . import config
from .handles import HandleKind


@dataclass(frozen=True)
class Rect:
    top: int
    left: int
    width: int
    height: int

    @property
    def right(self):
        return self.left + self.width

    @property
    def bottom(self):
        return self.top + self.height


@dataclass(frozen=True)
class Limits:
    min_width: int = config.MIN_WIDTH
    min_height: int = config.MIN_HEIGHT
    body_margin: int = config.BODY_MARGIN
    # Off by default. When on, E/S results and the NE height also get the
    # min_width/min_height floor the W/N handles always apply.
    clamp_far_edges: bool = False


DEFAULT_LIMITS = Limits()


def drag_patch(kind, start, anchor, current, limits=DEFAULT_LIMITS):
    """Fields of the window rect that a drag of ``kind`` rewrites.

    ``start`` is the rect at drag start, ``anchor`` the pointer position at
    drag start and ``current`` the pointer position now. Only the keys in the
    returned dict change; everything else keeps its value.
    """
    ax, ay = anchor
    x, y = current

    dx_move = start.left + x - ax
    dy_move = start.top + y - ay
    dx_resize = start.width + x - ax
    dy_resize = start.height + y - ay
    dx_resize_offset = start.width - x + ax
    dy_resize_offset = start.height - y + ay
    x_move_limit = start.left + start.width - limits.min_width
    y_move_limit = start.top + start.height - limits.min_height - limits.body_margin - 1

    if limits.clamp_far_edges:
        dx_resize = max(dx_resize, limits.min_width)
        dy_resize = max(dy_resize, limits.min_height)

    if kind is HandleKind.MOVE:
        return {"left": dx_move, "top": dy_move}
    elif kind is HandleKind.RESIZE_E:
        return {"width": dx_resize}
    elif kind is HandleKind.RESIZE_S:
        return {"height": dy_resize}
    elif kind is HandleKind.RESIZE_SE:
        return {"width": dx_resize, "height": dy_resize}
    elif kind is HandleKind.RESIZE_NE:
        height = dy_resize_offset
        if limits.clamp_far_edges:
            height = max(height, limits.min_height)
        return {"top": dy_move, "width": dx_resize, "height": height}
    elif kind is HandleKind.RESIZE_W:
        return {"left": min(dx_move, x_move_limit),
                "width": max(dx_resize_offset, limits.min_width)}
    elif kind is HandleKind.RESIZE_N:
        return {"top": min(dy_move, y_move_limit),
                "height": max(dy_resize_offset, limits.min_height)}
    elif kind is HandleKind.RESIZE_SW:
        return {"left": min(dx_move, x_move_limit),
                "width": max(dx_resize_offset, limits.min_width),
                "height": dy_resize}
    elif kind is HandleKind.RESIZE_NW:
        return {"left": min(dx_move, x_move_limit),
                "top": min(dy_move, y_move_limit),
                "width": max(dx_resize_offset, limits.min_width),
                "height": max(dy_resize_offset, limits.min_height)}
    raise ValueError(f"unknown handle kind: {kind!r}")


def drag_rect(kind, start, anchor, current, limits=DEFAULT_LIMITS, prior=None):
    """New window rect for the drag; untouched fields come from ``prior`` (default ``start``).

    A field that works out to 0 is not written, so it keeps its prior value.
    """
    patch = drag_patch(kind, start, anchor, current, limits)
    return replace(prior or start, **{k: v for k, v in patch.items() if v})
