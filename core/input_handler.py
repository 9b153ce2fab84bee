"""Input handling: pygame events and held keys to per-frame snapshots."""

import pygame
from pygame.locals import *

from .snapshot import InputSnapshot


class InputHandler:
    """Collects keyboard and mouse input between frames."""

    def __init__(self):
        self.mouse_dragging = False
        self.last_mouse_pos = (0, 0)
        self._drag = [0.0, 0.0]
        self._scroll = 0.0
        self._mode_1_pressed = False
        self._mode_2_pressed = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns False if the application should quit, True otherwise.
        """
        if event.type == QUIT:
            return False
        elif event.type == KEYDOWN:
            if event.key == K_ESCAPE:
                return False
            elif event.key == K_1:
                self._mode_1_pressed = True
            elif event.key == K_2:
                self._mode_2_pressed = True
        elif event.type == MOUSEBUTTONDOWN:
            if event.button == 1:
                self.mouse_dragging = True
                self.last_mouse_pos = event.pos
        elif event.type == MOUSEBUTTONUP:
            if event.button == 1:
                self.mouse_dragging = False
        elif event.type == MOUSEMOTION:
            if self.mouse_dragging:
                self._drag[0] += event.pos[0] - self.last_mouse_pos[0]
                self._drag[1] += event.pos[1] - self.last_mouse_pos[1]
                self.last_mouse_pos = event.pos
        elif event.type == MOUSEWHEEL:
            self._scroll += event.y

        return True

    def snapshot(self, keys=None) -> InputSnapshot:
        """
        Build this frame's snapshot and reset the accumulated deltas.

        Args:
            keys: Key state indexable by key code (defaults to pygame.key.get_pressed())
        """
        if keys is None:
            keys = pygame.key.get_pressed()

        snap = InputSnapshot(
            forward_held=bool(keys[K_w]),
            backward_held=bool(keys[K_s]),
            turn_left_held=bool(keys[K_a]),
            turn_right_held=bool(keys[K_d]),
            camera_mode_1_pressed=self._mode_1_pressed,
            camera_mode_2_pressed=self._mode_2_pressed,
            pointer_drag=(self._drag[0], self._drag[1]),
            scroll=self._scroll,
        )

        self._drag = [0.0, 0.0]
        self._scroll = 0.0
        self._mode_1_pressed = False
        self._mode_2_pressed = False
        return snap
