# constants.py
"""
Application-level constants.

These values are static and do not change between runs. They are the
defaults for rendering, window size and particle physics, used whenever
the configuration file does not override them.
"""
import math

# Visualization settings
# Set to True to run in borderless fullscreen mode.
# Set to False to run in a fixed-size window (WINDOW_WIDTH x WINDOW_HEIGHT).
FULLSCREEN = True
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
FPS = 60
BACKGROUND_COLOR = (0, 0, 0)

# Number of concentric layers used to fake the hub-to-ring color gradient
# of a triangle fan. More layers give a smoother gradient.
GRADIENT_STEPS = 8

# --- Particle physics ---
# Time-to-live of a new particle, in seconds.
TTL = 5.0
# Per-frame shrink factor applied about the particle center.
SCALE = 0.999
# Gravitational acceleration in logical units per second squared.
G = 1000.0

# --- Particle generation ---
# Radius range of each generated vertex, in logical units.
RADIUS_MIN = 20.0
RADIUS_MAX = 80.0
# Magnitude range of the initial velocity components.
VELOCITY_MIN = 100.0
VELOCITY_MAX = 500.0
# Upper bound (exclusive) of the initial vertex angle.
START_ANGLE_MAX = math.pi / 2
# Upper bound (exclusive) of the angular velocity, radians per second.
ANGULAR_VELOCITY_MAX = math.pi

INNER_COLOR = (255, 255, 255) # White

# --- Spawning ---
PARTICLES_PER_CLICK = 5
MIN_POINTS = 4
MAX_POINTS = 12

# Tolerance used for floating point comparisons.
EPSILON = 1e-9
