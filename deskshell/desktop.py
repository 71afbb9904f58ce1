"""
The desktop surface: wallpaper, windows, and the pygame event plumbing.

Pointer events are handled here for the whole surface rather than per window,
since motion events are not delivered for every pixel and a fast drag would
otherwise outrun the window it started on.
"""
import logging

import pygame

from . import config
from .bluescreen import INVALID_SCREEN_SIZE, BlueScreen, screen_size_cause, viewport_supported
from .controller import DesktopController
from .focus import FocusStack, WindowState
from .geometry import Limits, Rect
from .handles import DESKTOP, Element
from .pointer import (MOUSE_DOWN, MOUSE_MOVE, MOUSE_UP, TOUCH_END, TOUCH_MOVE,
                      TOUCH_START, PointerEvent)
from .window import draw_window, hit_test

logger = logging.getLogger(__name__)


class Desktop:
    def __init__(self, windows=(), settings=None, size=config.DEFAULT_SIZE):
        self.settings = {**config.DEFAULT_SETTINGS, **(settings or {})}
        self.stack = FocusStack(windows)
        limits = Limits(clamp_far_edges=self.settings.get("clamp_far_edges", False))
        self.controller = DesktopController(self.stack, limits, on_focus=self.set_focus)
        self.focused_id = None
        self.bluescreen = None
        self._seq = len(self.stack)
        self._finger = None
        self.resize(size)

    # ---------- windows ----------
    def spawn_window(self, title, size=(520,360), resizable=True):
        n = len(self.stack)
        rect = Rect(top=120 + n*12, left=180 + n*16,
                    width=max(config.MIN_WIDTH, size[0]), height=max(config.MIN_HEIGHT, size[1]))
        self._seq += 1
        win = WindowState(f"win-{self._seq}", title, rect, resizable=resizable)
        self.stack.mount(win)
        self.set_focus(win.id)
        return win

    def close(self, window_id):
        win = self.controller.unmount(window_id)
        if win is not None and self.focused_id == window_id:
            self.set_focus(None)
        return win

    def set_focus(self, window_id):
        self.focused_id = window_id

    def element_at(self, pos):
        for win in reversed(self.stack.ordered()):
            element = hit_test(win, pos)
            if element is not None:
                return element
        return Element(DESKTOP)

    # ---------- settings ----------
    def toggle_theme(self):
        self.settings["theme"] = "Light" if self.settings["theme"] == "Dark" else "Dark"

    def cycle_wallpaper(self, step=1):
        self.settings["wallpaper_index"] = (self.settings["wallpaper_index"] + step) % len(config.WALLPAPERS)

    # ---------- events ----------
    @property
    def engaged(self):
        return self.bluescreen is None

    def resize(self, size):
        self.size = tuple(size)
        w, h = self.size
        if viewport_supported(w, h):
            if self.bluescreen is not None:
                logger.info("Display is %dx%d, desktop restored", w, h)
            self.bluescreen = None
        else:
            if self.bluescreen is None:
                logger.info("Display is %dx%d, showing blue screen", w, h)
            self.release_pointer()
            self.bluescreen = BlueScreen(INVALID_SCREEN_SIZE, screen_size_cause(w, h))

    def release_pointer(self):
        """Drop the drag and forget the tracked finger; its FINGERUP may never reach us."""
        self.controller.cancel_drag()
        self._finger = None

    def _finger_pos(self, e):
        w, h = self.size
        return int(e.x * w), int(e.y * h)

    def pointer_event(self, e):
        """Translate a pygame event into a PointerEvent, or None if it is not one we track."""
        if e.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION):
            # pygame mirrors touches as mouse events; the finger events cover those
            if getattr(e, "touch", False):
                return None
            if e.type == pygame.MOUSEMOTION:
                return PointerEvent(MOUSE_MOVE, None, *e.pos)
            if e.button != 1:
                return None
            # only a press needs to know what is under the pointer
            if e.type == pygame.MOUSEBUTTONDOWN:
                return PointerEvent(MOUSE_DOWN, self.element_at(e.pos), *e.pos)
            return PointerEvent(MOUSE_UP, None, *e.pos)

        if e.type == pygame.FINGERDOWN:
            if self._finger is not None:
                return None
            self._finger = e.finger_id
            pos = self._finger_pos(e)
            return PointerEvent(TOUCH_START, self.element_at(pos), touches=(pos,))
        if e.type == pygame.FINGERMOTION:
            if e.finger_id != self._finger:
                return None
            pos = self._finger_pos(e)
            return PointerEvent(TOUCH_MOVE, touches=(pos,))
        if e.type == pygame.FINGERUP:
            if e.finger_id != self._finger:
                return None
            self._finger = None
            return PointerEvent(TOUCH_END)
        return None

    def handle_event(self, e):
        if e.type == pygame.VIDEORESIZE:
            self.resize((e.w, e.h)); return
        if e.type == pygame.WINDOWFOCUSLOST:
            # nearest thing pygame has to losing pointer capture
            self.release_pointer(); return
        if e.type == pygame.KEYDOWN:
            if e.key == pygame.K_F2:
                self.cycle_wallpaper()
            elif e.key == pygame.K_F3:
                self.toggle_theme()
            return
        if not self.engaged:
            return
        pe = self.pointer_event(e)
        if pe is not None:
            self.controller.dispatch(pe)

    # ---------- drawing ----------
    def draw_wallpaper(self, surf):
        surf.fill(config.wallpaper(self.settings))
        vg = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
        if self.settings["theme"] == "Dark":
            pygame.draw.rect(vg, (0,0,0,70), vg.get_rect())
        else:
            pygame.draw.rect(vg, (255,255,255,40), vg.get_rect())
        surf.blit(vg, (0,0))

    def draw(self, surf):
        if not self.engaged:
            self.bluescreen.draw(surf)
            return
        self.draw_wallpaper(surf)
        colors = config.theme(self.settings)
        for win in self.stack.ordered():
            draw_window(surf, win, colors, focused=win.id == self.focused_id)
