"""
Function Plotter

Samples a real function y = f(x) over [x_min, x_max] and draws it as a
polyline on a pygame Surface.

- The domain/codomain rectangle is mapped affinely onto the surface
  (x right, y up; pixel rows grow downward).
- `interval` is a pixel spacing: consecutive samples are `interval`
  pixels apart on the x axis.
- Samples where x or f(x) is not a finite number are skipped. The path
  runs straight from the last kept point to the next one, no gap.
"""

import logging
import math
import numbers
from dataclasses import dataclass, fields, replace
from typing import Callable, List, Optional, Tuple

import numpy as np
import pygame

from .colors import parse_color

logger = logging.getLogger(__name__)

PlotFunction = Callable[[float], Optional[float]]
Point = Tuple[float, float]


def default_function(x: float) -> None:
    """Plots nothing"""
    return None


@dataclass(frozen=True)
class PlotConfig:
    """
    Plot configuration

    Domain and codomain bounds are in function units, `width`/`height`
    and `interval` in pixels.
    """
    x_min: float = -10.0
    x_max: float = 10.0
    y_min: float = -10.0
    y_max: float = 10.0
    width: int = 1000
    height: int = 1000
    stroke_color: str = "#fbf"
    line_width: float = 5
    background_color: str = "transparent"
    interval: float = 1.0

    def __post_init__(self):
        for name in ("x_min", "x_max", "y_min", "y_max"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite, got {getattr(self, name)}")
        if self.x_min == self.x_max:
            raise ValueError("x_min and x_max must differ")
        if self.y_min == self.y_max:
            raise ValueError("y_min and y_max must differ")
        if not (math.isfinite(self.x_max - self.x_min)
                and math.isfinite(self.y_max - self.y_min)):
            raise ValueError("Domain and codomain spans must be finite")
        for name in ("width", "height"):
            value = getattr(self, name)
            if not isinstance(value, numbers.Integral) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Invalid raster size: {self.width}x{self.height}")
        if not (math.isfinite(self.interval) and self.interval > 0):
            raise ValueError(f"interval must be a positive number, got {self.interval}")
        if self.line_width < 0:
            raise ValueError(f"line_width must be >= 0, got {self.line_width}")

        step = self.step()
        if self.x_min + step == self.x_min or self.x_max - step == self.x_max:
            raise ValueError(f"interval {self.interval} px is below float "
                             f"resolution at x = {self.x_min}..{self.x_max}")

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def scales(self, size: Optional[Tuple[int, int]] = None) -> Tuple[float, float]:
        """(x_scale, y_scale) in pixels per function unit"""
        w, h = size if size is not None else self.size
        return w / (self.x_max - self.x_min), h / (self.y_max - self.y_min)

    def step(self, size: Optional[Tuple[int, int]] = None) -> float:
        """Distance between samples in function units"""
        x_scale, _ = self.scales(size)
        return self.interval / x_scale


def _is_finite_number(value) -> bool:
    return (isinstance(value, numbers.Real)
            and not isinstance(value, bool)
            and math.isfinite(value))


def sample_function(fn: PlotFunction, config: PlotConfig,
                    size: Optional[Tuple[int, int]] = None) -> List[Point]:
    """
    Evaluate fn across the domain

    Args:
        fn: Function to sample; may return None/NaN/inf to mark a gap
        config: Plot configuration
        size: Raster size overriding config.width/height

    Returns:
        Kept (x, y) samples in function units, in increasing x
    """
    step = config.step(size)

    samples = []
    i = 0
    x = config.x_min
    while x <= config.x_max:
        if math.isfinite(x):
            y = fn(x)
            if _is_finite_number(y):
                samples.append((x, float(y)))
        i += 1
        next_x = config.x_min + i * step
        if next_x <= x:
            # step lost below float resolution (e.g. a huge surface)
            logger.warning("sample_function: x stalled at %r, stopping scan", x)
            break
        x = next_x
    return samples


def to_pixels(samples: List[Point], config: PlotConfig,
              size: Optional[Tuple[int, int]] = None) -> List[Point]:
    """Map (x, y) samples to surface coordinates"""
    if not samples:
        return []
    h = size[1] if size is not None else config.height
    x_scale, y_scale = config.scales(size)

    xy = np.asarray(samples, dtype=np.float64)
    px = (xy[:, 0] - config.x_min) * x_scale
    py = h - (xy[:, 1] - config.y_min) * y_scale
    return list(zip(px.tolist(), py.tolist()))


def clear_surface(surface: pygame.Surface, background_color: str = "transparent"):
    """Wipe the surface, then fill the background colour if any"""
    surface.fill((0, 0, 0, 0))
    background = parse_color(background_color)
    if background is not None:
        surface.fill(background)


def plot_function(surface: Optional[pygame.Surface], fn: PlotFunction,
                  config: PlotConfig) -> List[Point]:
    """
    Clear `surface` and draw fn on it

    The scale is taken from the actual surface size.

    Args:
        surface: Target surface; None is a no-op
        fn: Function to plot
        config: Plot configuration

    Returns:
        The stroked path in pixel coordinates ([] if nothing was drawn)
    """
    if surface is None:
        logger.debug("plot_function: no surface, skipping draw")
        return []

    size = surface.get_size()
    clear_surface(surface, config.background_color)
    if size[0] <= 0 or size[1] <= 0:
        logger.debug("plot_function: empty %dx%d surface, skipping draw", *size)
        return []

    samples = sample_function(fn, config, size)
    points = to_pixels(samples, config, size)
    logger.debug("plot_function: %d points on %dx%d surface",
                 len(points), size[0], size[1])

    width = int(round(config.line_width))
    stroke = parse_color(config.stroke_color)
    if len(points) >= 2 and width > 0 and stroke is not None:
        pygame.draw.lines(surface, stroke, False, points, width)
    return points


class FunctionPlot:
    """
    A function plot that redraws itself when its inputs change

    Owns a transparent surface of config.width x config.height. Changing
    the function or any configuration value marks the plot dirty; the next
    render() (or an explicit draw()) clears and redraws the whole surface.
    """

    def __init__(self, fn: Optional[PlotFunction] = None,
                 config: Optional[PlotConfig] = None):
        self._fn = fn if fn is not None else default_function
        self._config = config if config is not None else PlotConfig()
        self._surface = None
        self._dirty = True
        self.points: List[Point] = []
        self.draw_count = 0

    @property
    def fn(self) -> PlotFunction:
        return self._fn

    @property
    def config(self) -> PlotConfig:
        return self._config

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def surface(self) -> pygame.Surface:
        if self._surface is None or self._surface.get_size() != self._config.size:
            self._surface = pygame.Surface(self._config.size, pygame.SRCALPHA)
            self._dirty = True
        return self._surface

    def set_function(self, fn: Optional[PlotFunction]):
        fn = fn if fn is not None else default_function
        if fn is not self._fn:
            self._fn = fn
            self._dirty = True

    def configure(self, **changes) -> PlotConfig:
        """
        Replace configuration values, e.g. configure(y_min=0, y_max=90)

        Raises:
            ValueError: the resulting configuration is invalid
            TypeError: unknown field name
        """
        known = {f.name for f in fields(PlotConfig)}
        unknown = set(changes) - known
        if unknown:
            raise TypeError(f"Unknown plot options: {sorted(unknown)}")

        new_config = replace(self._config, **changes)
        if new_config != self._config:
            self._config = new_config
            self._dirty = True
        return self._config

    def invalidate(self):
        self._dirty = True

    def draw(self) -> List[Point]:
        """Clear and redraw the owned surface"""
        self.points = plot_function(self.surface, self._fn, self._config)
        self._dirty = False
        self.draw_count += 1
        return self.points

    def render(self, target: Optional[pygame.Surface], pos: Tuple[int, int] = (0, 0)):
        """Redraw if needed and blit onto target"""
        if target is None:
            return
        if self._dirty or self._surface is None:
            self.draw()
        target.blit(self.surface, pos)
