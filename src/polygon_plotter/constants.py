"""Global constants for the application."""

import math

# Polygon settings
DEFAULT_NUM_POINTS = 20  # Vertex count used when none is given
MIN_NUM_POINTS = 2  # A polygon needs at least two vertices to draw a line
DEFAULT_BOUNDS = 1.1  # Padded user-space half-width so the unit circle fits

# Animation settings
ANIMATION_DELAY_MS = 20  # Delay between ticks in milliseconds
ROTATION_STEP = math.pi / 1000  # Radians the polygon turns per tick
FULL_TURN = 2 * math.pi
ZOOM_OFFSET = 0.5  # Scale is ZOOM_OFFSET + sin(angle)

# Output settings
DEFAULT_WINDOW_SIZE = 500  # Width and height of rendered frames in pixels
DEFAULT_MAX_FRAMES = 200  # Frames written when no limit is given
DEFAULT_THEME = "dark"

# Colors
MAX_CHANNEL = 255
COLOR_RAMP = 256  # Channel ramp: index * COLOR_RAMP // num_points
