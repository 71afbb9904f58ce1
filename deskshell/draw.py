"""Small pygame drawing helpers shared by the window chrome, desktop and blue screen."""
from functools import lru_cache

import pygame


@lru_cache(maxsize=None)
def font(size=16, name="Segoe UI", bold=False):
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.SysFont(name, size, bold=bold)


def draw_text(surf, text, pos, fnt=None, color=(235,240,245)):
    fnt = fnt or font()
    surf.blit(fnt.render(str(text), True, color), pos)


def rounded_rect(surf, rect, color, radius=8):
    pygame.draw.rect(surf, color, rect, border_radius=radius)


def wrap_text(text, fnt, max_width):
    """Greedy word wrap; a single word wider than max_width gets its own line."""
    lines, line = [], ""
    for word in text.split():
        candidate = f"{line} {word}" if line else word
        if line and fnt.size(candidate)[0] > max_width:
            lines.append(line)
            line = word
        else:
            line = candidate
    if line:
        lines.append(line)
    return lines
