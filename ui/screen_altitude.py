"""
Altitude Screen

Plots the altitude of a target over the night, from 12h before to 12h
after UTC midnight, for a fixed observer.

Keys: LEFT/RIGHT cycle the built-in targets, ESC quits.
"""

import pygame
from datetime import datetime, timezone
from typing import Callable, List, Optional

from core.astro_time import altitude_curve, utc_midnight
from core.targets import M13, PARIS, TARGETS
from core.types import Observer, SkyTarget
from rendering.function_plotter import FunctionPlot, PlotConfig
from .theme import get_theme

# Hours from midnight on x, altitude in degrees on y
X_MIN, X_MAX = -12, 12
Y_MIN, Y_MAX = 0, 90
SAMPLE_INTERVAL_PX = 0.1

HEADER_H = 60
FOOTER_H = 50


def _possessive(name: str) -> str:
    return name + ("'" if name.endswith("s") else "'s")


class AltitudeScreen:
    """
    Altitude-over-time plot for one observer and a list of targets

    The plotted function is rebuilt when the target or the UTC date
    changes; FunctionPlot then redraws on the next render.
    """

    def __init__(self, observer: Observer = PARIS,
                 targets: Optional[List[SkyTarget]] = None,
                 target: SkyTarget = M13,
                 clock: Optional[Callable[[], datetime]] = None):
        self.theme = get_theme()
        self.observer = observer
        self.targets = list(targets) if targets is not None else list(TARGETS)
        if target not in self.targets:
            self.targets.insert(0, target)
        self.target_idx = self.targets.index(target)
        self._clock = clock or (lambda: datetime.now(timezone.utc))

        self.origin = utc_midnight(self._clock())
        self.plot = FunctionPlot(config=PlotConfig(
            x_min=X_MIN, x_max=X_MAX,
            y_min=Y_MIN, y_max=Y_MAX,
            interval=SAMPLE_INTERVAL_PX,
        ))
        self._rebuild_function()

    @property
    def target(self) -> SkyTarget:
        return self.targets[self.target_idx]

    @property
    def title(self) -> str:
        return f"{self.target.label} in {_possessive(self.observer.name)} sky tonight"

    def _rebuild_function(self):
        self.plot.set_function(altitude_curve(self.observer, self.target, self.origin))

    def select_target(self, idx: int):
        self.target_idx = idx % len(self.targets)
        self._rebuild_function()

    def handle_input(self, events: list) -> Optional[str]:
        """
        Returns:
            "QUIT" to leave, None to stay
        """
        for event in events:
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                return "QUIT"
            elif event.key == pygame.K_RIGHT:
                self.select_target(self.target_idx + 1)
            elif event.key == pygame.K_LEFT:
                self.select_target(self.target_idx - 1)
        return None

    def update(self, dt: float):
        midnight = utc_midnight(self._clock())
        if midnight != self.origin:
            self.origin = midnight
            self._rebuild_function()

    def plot_rect(self, surface: pygame.Surface) -> pygame.Rect:
        m = self.theme.margin
        return pygame.Rect(m * 4, HEADER_H + m * 2,
                           surface.get_width() - m * 6,
                           surface.get_height() - HEADER_H - FOOTER_H - m * 5)

    def render(self, surface: pygame.Surface):
        W, H = surface.get_size()
        colors = self.theme.colors
        fonts = self.theme.fonts

        header = pygame.Rect(10, 10, W - 20, HEADER_H - 10)
        self.theme.draw_panel(surface, header)
        self.theme.draw_text(surface, fonts.title(), header.x + 12, header.y + 12,
                             self.title, colors.FG_PRIMARY)

        area = self.plot_rect(surface)
        if area.width > 0 and area.height > 0:
            self.plot.configure(width=area.width, height=area.height)
            self._draw_grid(surface, area)
            self.plot.render(surface, area.topleft)

        footer = pygame.Rect(10, H - FOOTER_H, W - 20, FOOTER_H - 10)
        self.theme.draw_panel(surface, footer)
        obs = self.observer
        info = (f"{obs.name} {obs.lat_deg:.4f}N {obs.lon_deg:.4f}E  |  "
                f"RA {self.target.ra_deg:.3f}  Dec {self.target.dec_deg:+.3f}  |  "
                f"0h = {self.origin.strftime('%Y-%m-%d %H:%M UTC')}  |  "
                f"[<-/->] Target  [ESC] Quit")
        self.theme.draw_text(surface, fonts.small(), footer.x + 12, footer.y + 12,
                             info, colors.FG_DIM)

    def _draw_grid(self, surface: pygame.Surface, area: pygame.Rect):
        """Hour and altitude grid behind the curve"""
        colors = self.theme.colors
        font = self.theme.fonts.small()
        x_scale, y_scale = self.plot.config.scales(area.size)

        for hour in range(X_MIN, X_MAX + 1, 3):
            x = area.x + int((hour - X_MIN) * x_scale)
            pygame.draw.line(surface, colors.GRID, (x, area.top), (x, area.bottom), 1)
            self.theme.draw_text(surface, font, x, area.bottom + 4,
                                 f"{hour:+d}h", colors.FG_DARK, align='center')

        for alt in range(Y_MIN, Y_MAX + 1, 30):
            y = area.bottom - int((alt - Y_MIN) * y_scale)
            color = colors.HORIZON if alt == 0 else colors.GRID
            pygame.draw.line(surface, color, (area.left, y), (area.right, y), 1)
            self.theme.draw_text(surface, font, area.left - 6, y - 7,
                                 f"{alt}°", colors.FG_DARK, align='right')
