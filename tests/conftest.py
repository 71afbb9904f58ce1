import os

# Headless pygame for the desktop and blue screen tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from deskshell.focus import FocusStack, WindowState
from deskshell.geometry import Rect


def make_window(window_id, top=100, left=100, width=300, height=200, resizable=True, title=None):
    return WindowState(window_id, title or window_id.title(), Rect(top, left, width, height), resizable=resizable)


@pytest.fixture
def windows():
    return [make_window("a"), make_window("b", top=150, left=160), make_window("c", top=200, left=220)]


@pytest.fixture
def stack(windows):
    return FocusStack(windows)


def pytest_report_header(config):
    return f"SDL_VIDEODRIVER={os.environ.get('SDL_VIDEODRIVER')}"
