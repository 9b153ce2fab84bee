"""Boat mesh and rendering."""

import numpy as np
from OpenGL.GL import *

from config import scene as config
from core import transforms


# Local axes: +X right, +Y up, -Z forward (bow)
HULL_VERTICES = np.array([
    [0.0, 0.25, -1.0],    # 0 bow
    [-0.4, 0.25, -0.2],   # 1 port mid
    [0.4, 0.25, -0.2],    # 2 starboard mid
    [-0.35, 0.25, 0.8],   # 3 port stern
    [0.35, 0.25, 0.8],    # 4 starboard stern
    [0.0, -0.2, -0.5],    # 5 keel front
    [0.0, -0.2, 0.7],     # 6 keel back
], dtype=np.float32)

DECK_INDICES = np.array([
    0, 1, 2,
    1, 3, 2,
    2, 3, 4,
], dtype=np.uint32)

HULL_INDICES = np.array([
    0, 5, 1,  1, 5, 6,  1, 6, 3,   # port
    0, 2, 5,  2, 6, 5,  2, 4, 6,   # starboard
    3, 6, 4,                       # transom
], dtype=np.uint32)


class BoatRenderer:
    """Draws the boat with the model matrix computed by the controller."""

    def __init__(self):
        self.hull_color = config.COLORS["boat_hull"]
        self.deck_color = config.COLORS["boat_deck"]

    def draw(self, frame):
        glMatrixMode(GL_PROJECTION)
        glLoadMatrixf(transforms.to_gl(frame.projection))
        glMatrixMode(GL_MODELVIEW)
        glLoadMatrixf(transforms.to_gl(frame.view @ frame.boat_model))

        glEnableClientState(GL_VERTEX_ARRAY)
        glVertexPointer(3, GL_FLOAT, 0, HULL_VERTICES)

        glColor3f(*self.hull_color)
        glDrawElements(GL_TRIANGLES, len(HULL_INDICES), GL_UNSIGNED_INT, HULL_INDICES)
        glColor3f(*self.deck_color)
        glDrawElements(GL_TRIANGLES, len(DECK_INDICES), GL_UNSIGNED_INT, DECK_INDICES)

        glDisableClientState(GL_VERTEX_ARRAY)
