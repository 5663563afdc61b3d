"""
Rendering - function plots on pygame surfaces
"""

from .colors import parse_color
from .function_plotter import (
    FunctionPlot,
    PlotConfig,
    default_function,
    plot_function,
    sample_function,
    to_pixels,
)

__all__ = [
    'parse_color',
    'FunctionPlot',
    'PlotConfig',
    'default_function',
    'plot_function',
    'sample_function',
    'to_pixels',
]
