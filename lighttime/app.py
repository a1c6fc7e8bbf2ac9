import argparse
import logging

import pygame
import pygame_gui

from lighttime import constants as C
from lighttime.ui_manager import CalculatorPanel
from lighttime.units import find_distance_unit

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Light Time Calculator")
    parser.add_argument(
        "--unit",
        default=C.DEFAULT_DISTANCE_UNIT,
        help="Distance unit symbol selected at startup",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    try:
        find_distance_unit(args.unit)
    except KeyError:
        parser.error(f"unknown distance unit '{args.unit}'")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((C.WIDTH, C.HEIGHT))
    pygame.display.set_caption("Light Time Calculator")

    manager = pygame_gui.UIManager((C.WIDTH, C.HEIGHT))
    panel = CalculatorPanel(manager, args.unit)
    logger.debug("Calculated %s", panel.calculate())
    clock = pygame.time.Clock()

    running = True
    while running:
        time_delta = clock.tick(C.FPS) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            result = panel.process_event(event)
            if result is not None:
                logger.debug("Calculated %s", result)
            manager.process_events(event)

        manager.update(time_delta)
        screen.fill(C.BLACK)
        manager.draw_ui(screen)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
