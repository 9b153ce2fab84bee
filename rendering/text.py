"""HUD text overlay."""

from contextlib import contextmanager

import pygame
from OpenGL.GL import *

from config import scene as config


@contextmanager
def screen_space(screen_size: tuple):
    """Pixel-space projection with depth off and alpha blending on."""
    glMatrixMode(GL_PROJECTION)
    glPushMatrix()
    glLoadIdentity()
    glOrtho(0, screen_size[0], 0, screen_size[1], -1, 1)
    glMatrixMode(GL_MODELVIEW)
    glPushMatrix()
    glLoadIdentity()
    glDisable(GL_DEPTH_TEST)
    glEnable(GL_BLEND)
    glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
    try:
        yield
    finally:
        glDisable(GL_BLEND)
        glEnable(GL_DEPTH_TEST)
        glPopMatrix()
        glMatrixMode(GL_PROJECTION)
        glPopMatrix()
        glMatrixMode(GL_MODELVIEW)


class TextRenderer:
    """Draws HUD lines from the top-left corner in a single overlay pass."""

    def __init__(self, font_name: str = "monospace", font_size: int = 18, line_height: int = 25):
        pygame.font.init()
        self.font = pygame.font.SysFont(font_name, font_size)
        self.line_height = line_height
        self.color = tuple(int(c * 255) for c in config.COLORS["text"])

    def _rasterize(self, text: str):
        """Render one line to (width, height, RGBA bytes flipped for GL)."""
        surface = self.font.render(text, True, self.color)
        w, h = surface.get_size()
        return w, h, pygame.image.tobytes(surface, "RGBA", True)

    def draw_lines(self, lines, x: int, y: int, screen_size: tuple):
        """
        Draw lines top-down starting at (x, y), measured from the top-left.

        Args:
            lines: Strings to draw, one per row
            x: X position from left edge
            y: Y position of the first row from top edge
            screen_size: (width, height) of the screen
        """
        images = [self._rasterize(line) for line in lines]
        if not images:
            return

        with screen_space(screen_size):
            top = screen_size[1] - y
            for row, (w, h, data) in enumerate(images):
                glRasterPos2f(x, top - row * self.line_height - h)
                glDrawPixels(w, h, GL_RGBA, GL_UNSIGNED_BYTE, data)

    def draw_text(self, text: str, x: int, y: int, screen_size: tuple):
        self.draw_lines([text], x, y, screen_size)
