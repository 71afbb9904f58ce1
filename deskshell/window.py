"""
Window chrome: where each handle sits on screen, hit testing, and drawing.

The layout tags every region with the marker the classifier reads, so the
controller never needs to know about pixels.
"""
import pygame

from . import config
from .draw import draw_text, font, rounded_rect
from .handles import BODY, CONTROL, TITLEBAR, WINDOW, Element, HandleKind

TITLE_BUTTONS = ['x', '□', '–']


def to_pygame(rect):
    return pygame.Rect(rect.left, rect.top, max(rect.width, 0), max(rect.height, 0))


def titlebar_rect(win):
    r = to_pygame(win.rect)
    return pygame.Rect(r.x, r.y, r.w, config.TITLEBAR_H)


def content_rect(win):
    r = to_pygame(win.rect)
    return pygame.Rect(r.x, r.y + config.TITLEBAR_H, r.w, max(r.h - config.TITLEBAR_H, 0))


def button_rects(win):
    t = titlebar_rect(win)
    bx = t.right - 28
    rects = []
    for label in TITLE_BUTTONS:
        rects.append((label, pygame.Rect(bx, t.y+6, 22, 18)))
        bx -= 26
    return rects


def resizer_rects(win):
    r, g = to_pygame(win.rect), config.RESIZE_GRIP
    # corners first so they win over the edges they overlap
    return [
        (HandleKind.RESIZE_NW, pygame.Rect(r.x, r.y, g, g)),
        (HandleKind.RESIZE_NE, pygame.Rect(r.right-g, r.y, g, g)),
        (HandleKind.RESIZE_SW, pygame.Rect(r.x, r.bottom-g, g, g)),
        (HandleKind.RESIZE_SE, pygame.Rect(r.right-g, r.bottom-g, g, g)),
        (HandleKind.RESIZE_N, pygame.Rect(r.x, r.y, r.w, g)),
        (HandleKind.RESIZE_S, pygame.Rect(r.x, r.bottom-g, r.w, g)),
        (HandleKind.RESIZE_W, pygame.Rect(r.x, r.y, g, r.h)),
        (HandleKind.RESIZE_E, pygame.Rect(r.right-g, r.y, g, r.h)),
    ]


def layout(win):
    """(Element, pygame.Rect) regions of a window in hit-test priority order."""
    regions = []
    if win.resizable:
        regions += [(Element(kind.tag, win.id), rect) for kind, rect in resizer_rects(win)]
    regions += [(Element(CONTROL, win.id), rect) for _, rect in button_rects(win)]
    regions.append((Element(TITLEBAR, win.id), titlebar_rect(win)))
    regions.append((Element(BODY, win.id), content_rect(win)))
    regions.append((Element(WINDOW, win.id), to_pygame(win.rect)))
    return regions


def hit_test(win, pos):
    for element, rect in layout(win):
        if rect.collidepoint(pos):
            return element
    return None


def draw_window(surf, win, colors, focused=False):
    r = to_pygame(win.rect)
    # shadow
    shad = r.inflate(12,12)
    s = pygame.Surface((shad.w, shad.h), pygame.SRCALPHA)
    pygame.draw.rect(s, (0,0,0,100), s.get_rect(), border_radius=12)
    surf.blit(s, shad.topleft)
    # frame
    rounded_rect(surf, r, colors["panel"])
    # titlebar
    t = titlebar_rect(win)
    rounded_rect(surf, t, colors["accent"] if focused else colors["alt"])
    draw_text(surf, win.title, (t.x+10, t.y+6), font(18), colors["text"])
    for label, b in button_rects(win):
        rounded_rect(surf, b, colors["panel"])
        draw_text(surf, label, (b.x+6, b.y-2), font(18), colors["text"])
    rounded_rect(surf, content_rect(win), colors["alt"])
    if win.resizable:
        g = config.RESIZE_GRIP * 2
        pygame.draw.polygon(surf, (120,120,120), [(r.right-g+2, r.bottom-2), (r.right-2, r.bottom-2), (r.right-2, r.bottom-g+2)])
