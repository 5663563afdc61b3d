"""
Altitude Plot - Main Application

Window showing how high a deep-sky object climbs over an observer's
horizon tonight.
"""

import logging
import sys

import pygame

from ui.theme import get_theme
from ui.screen_altitude import AltitudeScreen

# Window settings
WIDTH, HEIGHT = 1280, 800
FPS = 30
TITLE = "Altitude Plot"


class AltitudePlotApp:
    """
    Main application

    Owns the window and the main loop; all drawing is done by the
    altitude screen.
    """

    def __init__(self):
        pygame.init()

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()

        self.theme = get_theme()
        self.altitude_screen = AltitudeScreen()

        self.running = True
        print(f"\n{TITLE}")
        print("=" * 60)
        print(f"Observer: {self.altitude_screen.observer.name}")
        print(f"Target:   {self.altitude_screen.target.label}")
        print("=" * 60)

    def run(self):
        """Main loop"""
        print("\nPress ESC to quit\n")

        while self.running:
            dt = self.clock.tick(FPS) / 1000.0

            events = pygame.event.get()
            for event in events:
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.VIDEORESIZE:
                    self.handle_resize(event.w, event.h)

            if self.altitude_screen.handle_input(events) == "QUIT":
                self.running = False

            self.altitude_screen.update(dt)

            self.screen.fill(self.theme.colors.BG_DARK)
            self.altitude_screen.render(self.screen)
            pygame.display.flip()

        self.quit()

    def handle_resize(self, width: int, height: int):
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)

    def quit(self):
        print("\nShutting down...")
        pygame.quit()


def main():
    """Entry point"""
    logging.basicConfig(level=logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        app = AltitudePlotApp()
        app.run()
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        pygame.quit()
        sys.exit(0)
    except Exception as e:
        print(f"\n\nFATAL ERROR: {e}")
        import traceback
        traceback.print_exc()
        pygame.quit()
        sys.exit(1)


if __name__ == "__main__":
    main()
