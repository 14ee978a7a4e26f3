# view.py
"""
Mapping between the logical Cartesian frame and pixel space.

Particles live in a Cartesian frame centered on the world origin with
the Y axis pointing up. The render surface uses pixels with a top-left
origin and Y pointing down. CartesianView converts between the two.
"""
from typing import Optional, Sequence, Tuple

import numpy as np

from matrix import Matrix

# --- Data Contracts ---
#
# class CartesianView:
#   - __init__(self, target_size, center=(0, 0), size=None, y_up=True):
#     - Inputs:
#       - target_size: (width, height) of the render surface in pixels.
#       - center: logical coordinate shown at the middle of the surface.
#       - size: logical (width, height) of the visible area. Defaults
#         to the target size, i.e. one logical unit per pixel.
#       - y_up: True to invert the Y axis relative to pixel space.
#   - pixel_to_coords(pixel) -> np.ndarray of shape (2,), float64.
#   - coords_to_pixel(coords) -> Tuple[int, int], rounded.
#   - coords_to_pixels(points: Matrix) -> np.ndarray of shape (N, 2), int.
#   - Invariants: coords_to_pixel(pixel_to_coords(p)) == p for integer p.


class CartesianView:
    """
    A named logical view onto a render surface.
    """
    def __init__(
        self,
        target_size: Tuple[int, int],
        center: Tuple[float, float] = (0.0, 0.0),
        size: Optional[Tuple[float, float]] = None,
        y_up: bool = True,
    ):
        width, height = target_size
        if width <= 0 or height <= 0:
            raise ValueError(f"Target size must be positive, got {target_size}.")
        self.target_size = (width, height)
        self.center = np.array(center, dtype=np.float64)
        view_w, view_h = size if size is not None else (width, height)
        # A negative height flips Y so that larger y is further up.
        self.size = np.array([view_w, -view_h if y_up else view_h], dtype=np.float64)
        self._target = np.array([width, height], dtype=np.float64)

    def pixel_to_coords(self, pixel: Sequence[float]) -> np.ndarray:
        normalized = np.asarray(pixel, dtype=np.float64) / self._target - 0.5
        return self.center + normalized * self.size

    def coords_to_pixel(self, coords: Sequence[float]) -> Tuple[int, int]:
        pixel = self._to_pixel_array(np.asarray(coords, dtype=np.float64))
        return int(pixel[0]), int(pixel[1])

    def coords_to_pixels(self, points: Matrix) -> np.ndarray:
        """Maps every column of a 2 x N point table to an (N, 2) pixel array."""
        return self._to_pixel_array(points.to_array().T).astype(np.int64)

    def _to_pixel_array(self, coords: np.ndarray) -> np.ndarray:
        normalized = (coords - self.center) / self.size + 0.5
        return np.rint(normalized * self._target)
