"""Error screen shown instead of the desktop when the display is too small."""
from . import config
from .draw import draw_text, font, wrap_text

INVALID_SCREEN_SIZE = "0x1A (INVALID_SCREEN_SIZE)"
BLUE = (0, 0, 170)
WHITE = (255, 255, 255)


def viewport_supported(width, height):
    return width >= config.REQUIRED_VIEWPORT_WIDTH and height >= config.REQUIRED_VIEWPORT_HEIGHT


def screen_size_cause(width, height):
    return (f"The system requires a screen resolution of at least "
            f"{config.REQUIRED_VIEWPORT_WIDTH}x{config.REQUIRED_VIEWPORT_HEIGHT}. "
            f"Current resolution is {width}x{height}.")


class BlueScreen:
    def __init__(self, error_code, cause):
        self.error_code = error_code
        self.cause = cause

    def paragraphs(self):
        return ["A problem has been detected and the desktop has been shut down to prevent damage.",
                "", self.cause, "", f"Error code: {self.error_code}"]

    def draw(self, surf):
        surf.fill(BLUE)
        w, _ = surf.get_size()
        pad = max(16, w // 20)
        draw_text(surf, ":(", (pad, pad), font(64), WHITE)
        fnt = font(16)
        y = pad + 96
        for para in self.paragraphs():
            for line in wrap_text(para, fnt, w - pad*2) or [""]:
                draw_text(surf, line, (pad, y), fnt, WHITE)
                y += fnt.get_height() + 4
