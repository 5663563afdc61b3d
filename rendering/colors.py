"""
Colour parsing for plot styling

Plot colours are given the way a style sheet would give them
("#fbf", "#ffbbff80", "transparent", "white") and turned into
pygame colours once per draw.
"""

from typing import Optional, Tuple, Union

import pygame

ColorValue = Union[str, Tuple[int, int, int], Tuple[int, int, int, int], pygame.Color]

TRANSPARENT = "transparent"


def _expand_hex(value: str) -> str:
    """#rgb / #rgba -> #rrggbb / #rrggbbaa"""
    digits = value[1:]
    if len(digits) in (3, 4):
        digits = "".join(c * 2 for c in digits)
    return "#" + digits


def parse_color(value: ColorValue) -> Optional[pygame.Color]:
    """
    Convert a colour specification to a pygame.Color

    Args:
        value: "#rgb", "#rgba", "#rrggbb", "#rrggbbaa", a pygame colour
            name, an RGB(A) tuple or a pygame.Color

    Returns:
        pygame.Color, or None for "transparent"

    Raises:
        ValueError: unknown colour string
    """
    if isinstance(value, pygame.Color):
        return pygame.Color(value)
    if isinstance(value, tuple):
        return pygame.Color(*value)

    text = value.strip().lower()
    if text == TRANSPARENT:
        return None
    if text.startswith("#"):
        text = _expand_hex(text)
        if len(text) not in (7, 9):
            raise ValueError(f"Invalid hex colour: {value!r}")
    try:
        return pygame.Color(text)
    except ValueError:
        raise ValueError(f"Unknown colour: {value!r}") from None
