# particle.py
"""
A single polygonal particle.

This module defines the Particle class. A particle owns its vertices as a
2 x N point table in the logical Cartesian frame, together with a center,
a velocity, an angular velocity, a time-to-live and two colors. Every
frame it is rotated and scaled about its own center, then translated
under gravity.
"""
import logging
import math
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

import numpy as np

from constants import (
    TTL, SCALE, G, RADIUS_MIN, RADIUS_MAX, VELOCITY_MIN, VELOCITY_MAX,
    START_ANGLE_MAX, ANGULAR_VELOCITY_MAX, INNER_COLOR
)
from matrix import Matrix, RotationMatrix, ScalingMatrix, TranslationMatrix
from view import CartesianView

# --- Data Contracts ---
#
# class Particle:
#   - __init__(self, target_size, num_points, mouse_click_position,
#              rng=None, params=None):
#     - Inputs:
#       - target_size: (width, height) of the render surface in pixels.
#       - num_points: int >= 3, the number of vertices.
#       - mouse_click_position: (x, y) pixel position of the click.
#       - rng: numpy Generator used for every random draw.
#       - params: optional overrides for "ttl", "scale_factor",
#         "gravity", "radius_min", "radius_max", "velocity_min",
#         "velocity_max".
#     - Invariants:
#       - self.points is a Matrix of shape (2, num_points) for the whole
#         lifetime of the particle.
#       - self.center is a float64 array of shape (2,) and is the pivot of
#         every rotation and scaling.
#
#   - update(self, dt: float) -> None:
#     - Side Effects: ttl -= dt, then rotate, then scale, then translate.
#       The order is fixed: rotate and scale pivot on the center before
#       it has moved this frame.
#
#   - draw(self, target: FanTarget) -> None:
#     - Side Effects: None on the particle. Submits a triangle fan to
#       target.draw_triangle_fan(points, colors).


class FanTarget(Protocol):
    def draw_triangle_fan(
        self, points: Sequence[Tuple[int, int]], colors: Sequence[Tuple[int, int, int]]
    ) -> None: ...


class Particle:
    """
    A rotating, shrinking, falling polygon born at a click position.
    """
    def __init__(
        self,
        target_size: Tuple[int, int],
        num_points: int,
        mouse_click_position: Sequence[float],
        rng: Optional[np.random.Generator] = None,
        params: Optional[Dict[str, Any]] = None,
    ):
        if num_points < 3:
            msg = f"A particle needs at least 3 points, got {num_points}."
            logging.error(msg)
            raise ValueError(msg)
        params = params if params is not None else {}
        self.rng = rng if rng is not None else np.random.default_rng()

        self.ttl = float(params.get('ttl', TTL))
        self.scale_factor = float(params.get('scale_factor', SCALE))
        self.gravity = float(params.get('gravity', G))
        self.num_points = num_points

        # The Cartesian plane is centered on the origin, sized to the
        # target, with Y pointing up.
        self.view = CartesianView(target_size)
        self.center = self.view.pixel_to_coords(mouse_click_position)

        self.angular_velocity = self.rng.uniform(0.0, ANGULAR_VELOCITY_MAX)

        velocity_min = params.get('velocity_min', VELOCITY_MIN)
        velocity_max = params.get('velocity_max', VELOCITY_MAX)
        self.vx = self.rng.uniform(velocity_min, velocity_max)
        if self.rng.integers(0, 2):
            self.vx = -self.vx
        self.vy = self.rng.uniform(velocity_min, velocity_max)

        self.inner_color = INNER_COLOR
        self.outer_color = tuple(int(c) for c in self.rng.integers(0, 256, size=3))

        self.points = self._generate_points(
            params.get('radius_min', RADIUS_MIN),
            params.get('radius_max', RADIUS_MAX),
        )

        logging.debug(
            f"Particle created at ({self.center[0]:.1f}, {self.center[1]:.1f}) "
            f"with {num_points} points, v=({self.vx:.1f}, {self.vy:.1f}), "
            f"w={self.angular_velocity:.3f} rad/s."
        )

    def _generate_points(self, radius_min: float, radius_max: float) -> Matrix:
        """
        Lays the vertices out around the center at equal angular steps.

        The step is 2*pi / (N - 1), so the last vertex lands on top of the
        first one's angle rather than one step before it.
        """
        points = Matrix(2, self.num_points)
        theta = self.rng.uniform(0.0, START_ANGLE_MAX)
        d_theta = 2 * math.pi / (self.num_points - 1)
        for j in range(self.num_points):
            r = self.rng.uniform(radius_min, radius_max)
            points[0, j] = self.center[0] + r * math.cos(theta)
            points[1, j] = self.center[1] + r * math.sin(theta)
            theta += d_theta
        return points

    @property
    def is_alive(self) -> bool:
        return self.ttl > 0

    def update(self, dt: float) -> None:
        """
        Advances the particle by dt seconds.
        """
        self.ttl -= dt
        self.rotate(dt * self.angular_velocity)
        self.scale(self.scale_factor)

        dx = self.vx * dt
        self.vy -= self.gravity * dt
        dy = self.vy * dt
        self.translate(dx, dy)

    def translate(self, x_shift: float, y_shift: float) -> None:
        self.points = TranslationMatrix(x_shift, y_shift, self.points.cols).apply(self.points)
        self.center = self.center + np.array([x_shift, y_shift])

    def rotate(self, theta: float) -> None:
        """Rotates the points counter-clockwise about the center."""
        pivot = self.center.copy()
        self.translate(-pivot[0], -pivot[1])
        self.points = RotationMatrix(theta).apply(self.points)
        self.translate(pivot[0], pivot[1])

    def scale(self, c: float) -> None:
        """Scales the points about the center."""
        pivot = self.center.copy()
        self.translate(-pivot[0], -pivot[1])
        self.points = ScalingMatrix(c).apply(self.points)
        self.translate(pivot[0], pivot[1])

    def fan_vertices(self) -> Tuple[List[Tuple[int, int]], List[Tuple[int, int, int]]]:
        """
        Projects the particle into pixel space.

        Returns the hub followed by every vertex, and one color per entry.
        """
        hub = self.view.coords_to_pixel(self.center)
        ring = [(int(x), int(y)) for x, y in self.view.coords_to_pixels(self.points)]
        colors = [self.inner_color] + [self.outer_color] * len(ring)
        return [hub] + ring, colors

    def draw(self, target: FanTarget) -> None:
        points, colors = self.fan_vertices()
        target.draw_triangle_fan(points, colors)
