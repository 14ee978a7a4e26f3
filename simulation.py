# simulation.py
"""
Owns the live particles and advances them frame by frame.

This module defines the ParticleField class, the display-independent half
of the engine. It spawns particles at click positions, updates them every
frame and removes the ones whose time-to-live has run out.
"""
import logging
from typing import Any, Dict, List, Sequence

import numpy as np

from constants import PARTICLES_PER_CLICK, MIN_POINTS, MAX_POINTS
from particle import Particle, FanTarget

# --- Data Contracts ---
#
# class ParticleField:
#   - __init__(self, params: Dict[str, Any], width: int, height: int):
#     - Inputs:
#       - params: Dictionary of simulation parameters from config.json.
#         - "seed": int or null
#         - "particles_per_click": int
#         - "min_points": int >= 3
#         - "max_points": int >= min_points
#         - every Particle override ("ttl", "gravity", ...)
#       - width, height: size of the render surface in pixels.
#     - Side Effects: Creates the master SeedSequence.
#
#   - spawn(self, click: Sequence[float]) -> List[Particle]:
#     - Side Effects: Appends particles_per_click new particles. Each one
#       receives its own generator spawned from the master seed.
#
#   - step(self, dt: float) -> None:
#     - Side Effects: Updates every particle, then drops the dead ones.
#     - Invariants: Particles keep their creation order.


class ParticleField:
    """
    A container for all live particles.
    """
    def __init__(self, params: Dict[str, Any], width: int, height: int):
        self.params = params
        self.width = width
        self.height = height
        self.particles_per_click = int(params.get('particles_per_click', PARTICLES_PER_CLICK))
        self.min_points = int(params.get('min_points', MIN_POINTS))
        self.max_points = int(params.get('max_points', MAX_POINTS))
        self.seed = params.get('seed')

        if self.min_points < 3 or self.max_points < self.min_points:
            msg = (
                f"Configuration error: point range [{self.min_points}, "
                f"{self.max_points}] is invalid. Particles need at least 3 "
                f"points and max_points must not be below min_points."
            )
            logging.critical(msg)
            raise ValueError(msg)

        # All randomness derives from one master seed. Every particle gets
        # an independent child stream so spawn order alone decides its shape.
        self._seed_sequence = np.random.SeedSequence(self.seed)
        self.rng = np.random.default_rng(self._seed_sequence.spawn(1)[0])

        self.particles: List[Particle] = []
        self.total_spawned = 0

        logging.info(
            f"ParticleField initialized for a {width}x{height} surface, "
            f"{self.particles_per_click} particles per click, "
            f"{self.min_points}-{self.max_points} points each."
        )

    def __len__(self) -> int:
        return len(self.particles)

    def spawn(self, click: Sequence[float]) -> List[Particle]:
        """Creates a burst of particles at a pixel position."""
        born = []
        for _ in range(self.particles_per_click):
            num_points = int(self.rng.integers(self.min_points, self.max_points + 1))
            child_rng = np.random.default_rng(self._seed_sequence.spawn(1)[0])
            born.append(Particle(
                (self.width, self.height), num_points, click,
                rng=child_rng, params=self.params
            ))
        self.particles.extend(born)
        self.total_spawned += len(born)
        logging.debug(
            f"Spawned {len(born)} particles at pixel {tuple(click)}. "
            f"{len(self.particles)} alive."
        )
        return born

    def step(self, dt: float) -> None:
        """
        Executes one frame of the simulation.
        """
        if dt < 0:
            msg = f"Elapsed time must be non-negative, got {dt}."
            logging.error(msg)
            raise ValueError(msg)

        for particle in self.particles:
            particle.update(dt)

        # The engine, not the particle, is responsible for removal.
        before = len(self.particles)
        self.particles = [p for p in self.particles if p.is_alive]
        expired = before - len(self.particles)
        if expired:
            logging.debug(f"{expired} particles expired. {len(self.particles)} alive.")

    def draw(self, target: FanTarget) -> None:
        for particle in self.particles:
            particle.draw(target)
