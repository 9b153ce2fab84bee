"""Main application class that ties everything together."""

import math
import pygame
from pygame.locals import *
from OpenGL.GL import *

from config import scene as config
from rendering import BoatRenderer, TextRenderer, WaterRenderer
from .input_handler import InputHandler
from .scene import CameraMode, Scene


class Application:
    """Main application managing the window, loop and rendering."""

    def __init__(self, scene: Scene = None):
        pygame.init()
        self.screen_size = (config.WINDOW["width"], config.WINDOW["height"])
        pygame.display.set_mode(self.screen_size, DOUBLEBUF | OPENGL | RESIZABLE)
        pygame.display.set_caption(config.WINDOW["title"])

        # Simulation
        print("[App] Building scene...")
        self.scene = scene if scene is not None else Scene()
        self.input_handler = InputHandler()

        # Rendering components
        self.water_renderer = WaterRenderer()
        self.boat_renderer = BoatRenderer()
        self.text_renderer = TextRenderer()

        # State
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 0

        self._setup_gl()
        print(f"[App] Ready! ({self.scene.grid.vertex_count:,} water vertices, "
              f"{self.scene.alignment.value} alignment)")

    def _setup_gl(self):
        """Initialize OpenGL settings."""
        glClearColor(*config.COLORS["background"])
        glEnable(GL_DEPTH_TEST)
        glViewport(0, 0, *self.screen_size)

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == VIDEORESIZE:
                self._resize(event.w, event.h)
            elif not self.input_handler.handle_event(event):
                self.running = False

    def _resize(self, width: int, height: int):
        if width <= 0 or height <= 0:
            return
        self.screen_size = (width, height)
        glViewport(0, 0, width, height)
        self.scene.on_resize(width, height)

    def _update(self, dt: float):
        """Update scene state."""
        previous_mode = self.scene.camera_mode
        self.scene.update(dt, self.input_handler.snapshot())
        if self.scene.camera_mode is not previous_mode:
            print(f"[App] Camera mode: {self.scene.camera_mode.name}")

    def _render(self):
        """Render the scene."""
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)

        frame = self.scene.render_frame()
        self.water_renderer.draw(frame)
        self.boat_renderer.draw(frame)

        # Draw HUD
        pose = self.scene.boat.pose
        mode = "FOLLOW" if frame.camera_mode is CameraMode.FOLLOW else "FIXED"
        self.text_renderer.draw_lines([
            f"FPS: {self.fps:.0f}  |  t = {frame.time:.1f}s  |  Camera: {mode}",
            f"Boat: ({pose.x:.1f}, {pose.y:.2f}, {pose.z:.1f})  "
            f"Heading: {math.degrees(pose.heading):.0f}°",
            "WASD: Steer | Drag: Orbit | Wheel: Zoom | 1/2: Fixed/Follow camera",
        ], 10, 10, self.screen_size)

        pygame.display.flip()

    def run(self):
        """Main application loop."""
        print("[App] Starting main loop...")

        while self.running:
            dt = self.clock.tick() / 1000.0  # Uncapped FPS
            self.fps = self.clock.get_fps()

            self._handle_events()
            self._update(dt)
            self._render()

        pygame.quit()
        print("[App] Shutdown complete")
