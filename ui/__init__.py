"""
UI Module - Theme and screens
"""
from .theme import get_theme, Colors, Fonts
from .screen_altitude import AltitudeScreen

__all__ = [
    "get_theme", "Colors", "Fonts",
    "AltitudeScreen",
]
