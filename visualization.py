# visualization.py
"""
Handles the window, input, frame clock and drawing using Pygame.
"""
import logging
import pygame
import numpy as np
from constants import (
    BACKGROUND_COLOR, FULLSCREEN, WINDOW_WIDTH, WINDOW_HEIGHT, FPS, GRADIENT_STEPS
)
from typing import Optional, Sequence, Tuple

# Forward reference for type hinting to avoid circular import
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from simulation import ParticleField


# --- Data Contracts ---
#
# class Visualizer:
#   - __init__(self, vis_params: Optional[dict] = None):
#     - Inputs:
#       - vis_params: "fullscreen", "width", "height", "fps",
#         "background_color", "gradient_steps" from the configuration.
#     - Side Effects: Initializes Pygame and creates a display surface.
#
#   - tick(self) -> float:
#     - Outputs: Seconds elapsed since the previous call, >= 0.
#
#   - handle_input(self, field: "ParticleField") -> bool:
#     - Outputs: False if the user has quit, True otherwise.
#     - Side Effects: A left click spawns particles in the field.
#
#   - draw(self, field: "ParticleField") -> None:
#     - Side Effects: Clears the screen, draws every particle, flips.
#
#   - draw_triangle_fan(self, points, colors) -> None:
#     - Inputs: points[0] is the hub, points[1:] the ring, in pixels;
#       colors holds one RGB tuple per point.

class Visualizer:
    """
    The render surface, input source and clock of the particle engine.
    """
    def __init__(self, vis_params: Optional[dict] = None):
        """
        Initializes Pygame and the display window.
        """
        vis_params = vis_params if vis_params is not None else {}
        pygame.init()

        if vis_params.get('fullscreen', FULLSCREEN):
            display_info = pygame.display.Info()
            width, height = display_info.current_w, display_info.current_h
            self.screen = pygame.display.set_mode((width, height), pygame.FULLSCREEN)
        else:
            width = vis_params.get('width', WINDOW_WIDTH)
            height = vis_params.get('height', WINDOW_HEIGHT)
            self.screen = pygame.display.set_mode((width, height))

        self.width = width
        self.height = height
        self.fps = vis_params.get('fps', FPS)
        self.background_color = pygame.Color(tuple(vis_params.get('background_color', BACKGROUND_COLOR)))
        self.gradient_steps = max(1, int(vis_params.get('gradient_steps', GRADIENT_STEPS)))

        pygame.display.set_caption("Particles")
        self.clock = pygame.time.Clock()

        logging.info(f"Visualizer initialized with Pygame display ({width}x{height}).")

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def tick(self) -> float:
        """Waits for the next frame and returns the elapsed seconds."""
        return self.clock.tick(self.fps) / 1000.0

    def handle_input(self, field: "ParticleField") -> bool:
        """
        Processes pending events.

        Returns:
            bool: False if the application should exit, True otherwise.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logging.info("Quit event received. Shutting down visualizer.")
                return False

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    logging.info("ESC key pressed. Shutting down visualizer.")
                    return False

            if event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1: # Left mouse click
                    logging.info(f"Left click at {event.pos}.")
                    field.spawn(event.pos)
        return True

    def draw(self, field: "ParticleField") -> None:
        """Draws every live particle and presents the frame."""
        self.screen.fill(self.background_color)
        field.draw(self)
        pygame.display.flip()

    def draw_triangle_fan(
        self, points: Sequence[Tuple[int, int]], colors: Sequence[Tuple[int, int, int]]
    ) -> None:
        """
        Rasterizes a triangle fan with a hub-to-ring color gradient.

        Pygame fills polygons with a single color, so the gradient is built
        from concentric copies of the fan, each shrunk toward the hub and
        colored a step closer to the hub color. The outermost layer is drawn
        first so inner layers paint over it.
        """
        if len(points) < 3:
            return
        hub = np.asarray(points[0], dtype=np.float64)
        ring = np.asarray(points[1:], dtype=np.float64)
        inner = pygame.Color(colors[0])
        outer = pygame.Color(colors[1])

        for step in range(self.gradient_steps, 0, -1):
            t = step / self.gradient_steps
            layer = hub + (ring - hub) * t
            color = inner.lerp(outer, t)
            for i in range(len(layer) - 1):
                pygame.draw.polygon(
                    self.screen, color,
                    [tuple(hub), tuple(layer[i]), tuple(layer[i + 1])]
                )

    def close(self):
        """Shuts down Pygame."""
        pygame.quit()
