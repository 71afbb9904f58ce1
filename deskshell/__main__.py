"""
Deskshell - a desktop shell simulator.
Drag windows by the title bar, resize from any edge or corner, click to raise.
F2 cycles the wallpaper, F3 toggles the theme; both are saved on exit.
"""
import argparse
import logging

import pygame

from . import config
from .desktop import Desktop

logger = logging.getLogger("deskshell")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="deskshell", description="Desktop shell simulator")
    parser.add_argument("--width", type=int, default=config.DEFAULT_SIZE[0])
    parser.add_argument("--height", type=int, default=config.DEFAULT_SIZE[1])
    parser.add_argument("--settings", default=None, help=f"settings file (default {config.SETTINGS_FILE})")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    settings = config.load_settings(args.settings)

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption("Deskshell")
    clock = pygame.time.Clock()

    desktop = Desktop(settings=settings, size=screen.get_size())
    desktop.spawn_window("Welcome", size=(540,420))
    desktop.spawn_window("Documents")
    desktop.spawn_window("About", size=(360,240), resizable=False)
    logger.info("Desktop started with %d windows", len(desktop.stack))

    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode((ev.w, ev.h), pygame.RESIZABLE)
                desktop.handle_event(ev)
            else:
                desktop.handle_event(ev)
        desktop.draw(screen)
        pygame.display.flip()
        clock.tick(config.FPS)

    config.save_settings(desktop.settings, args.settings)
    pygame.quit()


if __name__ == "__main__":
    main()
