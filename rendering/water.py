"""Water surface rendering."""

import numpy as np
from OpenGL.GL import *

from config import scene as config
from core import transforms


class WaterRenderer:
    """Draws the sampled surface grid as filled triangles with a wire overlay."""

    def __init__(self):
        self.color = config.COLORS["water"]
        self.line_color = tuple(min(1.0, c + 0.15) for c in self.color)

    def draw(self, frame):
        """
        Draw the water mesh for one frame.

        Args:
            frame: RenderFrame with vertices, indices and camera matrices
        """
        glMatrixMode(GL_PROJECTION)
        glLoadMatrixf(transforms.to_gl(frame.projection))
        glMatrixMode(GL_MODELVIEW)
        glLoadMatrixf(transforms.to_gl(frame.view))

        vertices = np.ascontiguousarray(frame.vertices, dtype=np.float32)
        indices = frame.indices

        glEnableClientState(GL_VERTEX_ARRAY)
        glVertexPointer(3, GL_FLOAT, 0, vertices)

        glEnable(GL_POLYGON_OFFSET_FILL)
        glPolygonOffset(1.0, 1.0)
        glColor3f(*self.color)
        glDrawElements(GL_TRIANGLES, len(indices), GL_UNSIGNED_INT, indices)
        glDisable(GL_POLYGON_OFFSET_FILL)

        # Wireframe pass so the wave shape is visible without lighting
        glPolygonMode(GL_FRONT_AND_BACK, GL_LINE)
        glColor3f(*self.line_color)
        glDrawElements(GL_TRIANGLES, len(indices), GL_UNSIGNED_INT, indices)
        glPolygonMode(GL_FRONT_AND_BACK, GL_FILL)

        glDisableClientState(GL_VERTEX_ARRAY)
