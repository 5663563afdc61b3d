"""
UI Theme - phosphor green on dark teal

Palette, fonts and the two drawing helpers the altitude window needs:
bordered panels and left/center/right aligned text.
"""

import pygame
from typing import Dict, Optional, Tuple
from dataclasses import dataclass

RGB = Tuple[int, int, int]


class Colors:
    """
    Window palette

    The curve itself is styled through PlotConfig, these cover the
    chrome around it.
    """

    BG_DARK = (0, 12, 10)
    BG_PANEL = (0, 20, 15)

    FG_PRIMARY = (0, 255, 120)   # titles
    FG_DIM = (0, 180, 80)        # footer info
    FG_DARK = (0, 120, 50)       # axis labels

    GRID = (0, 55, 30)
    HORIZON = (35, 130, 35)      # altitude 0

    BORDER_NORMAL = FG_PRIMARY


@dataclass(frozen=True)
class FontConfig:
    """Font families and point sizes per role"""
    families: Tuple[str, ...] = ("Consolas", "Courier New", "Courier", "monospace")
    size_title: int = 24
    size_normal: int = 18
    size_small: int = 14
    bold_title: bool = True

    def spec(self, role: str) -> Tuple[int, bool]:
        """(size, bold) for a role name; unknown roles read as 'normal'"""
        if role == 'title':
            return self.size_title, self.bold_title
        if role == 'small':
            return self.size_small, False
        return self.size_normal, False


class Fonts:
    """
    Per-theme font cache

    Fonts are loaded on first use. pygame.font.SysFont falls back to the
    default font when none of the families is installed.
    """

    def __init__(self, config: Optional[FontConfig] = None):
        self.config = config or FontConfig()
        self._cache: Dict[str, pygame.font.Font] = {}

    def get(self, role: str = 'normal') -> pygame.font.Font:
        """
        Font for 'title', 'normal' or 'small'
        """
        font = self._cache.get(role)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            size, bold = self.config.spec(role)
            font = pygame.font.SysFont(list(self.config.families), size, bold=bold)
            self._cache[role] = font
        return font

    def title(self) -> pygame.font.Font:
        return self.get('title')

    def normal(self) -> pygame.font.Font:
        return self.get('normal')

    def small(self) -> pygame.font.Font:
        return self.get('small')

    def clear(self):
        """Forget loaded fonts, e.g. after pygame.quit()"""
        self._cache.clear()


class Theme:
    """Palette, fonts and spacing for one window"""

    def __init__(self, fonts: Optional[Fonts] = None):
        self.colors = Colors()
        self.fonts = fonts or Fonts()

        self.padding = 8
        self.margin = 12
        self.border_width = 2

    def draw_panel(self, surface: pygame.Surface, rect: pygame.Rect,
                   fg_color: Optional[RGB] = None, bg_color: Optional[RGB] = None):
        """Filled rectangle with a border"""
        pygame.draw.rect(surface, bg_color or self.colors.BG_PANEL, rect)
        pygame.draw.rect(surface, fg_color or self.colors.BORDER_NORMAL, rect,
                         self.border_width)

    def draw_text(self, surface: pygame.Surface, font: pygame.font.Font,
                  x: int, y: int, text: str, color: RGB,
                  align: str = 'left') -> pygame.Rect:
        """
        Blit text anchored at (x, y), without antialiasing

        Args:
            align: which edge of the text sits on x: 'left', 'center' or 'right'

        Returns:
            The rectangle covered by the text
        """
        rendered = font.render(text, False, color)
        rect = rendered.get_rect(topleft=(x, y))
        if align == 'center':
            rect.centerx = x
        elif align == 'right':
            rect.right = x
        surface.blit(rendered, rect)
        return rect


_theme = None


def get_theme() -> Theme:
    """Shared theme of the running window"""
    global _theme
    if _theme is None:
        _theme = Theme()
    return _theme
