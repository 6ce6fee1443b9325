"""Physical constants, numeric tolerances and display defaults."""

import numpy as np

# --- Time ---
J2000_JD = 2451545.0
DAYS_PER_CENTURY = 36525.0
SECONDS_PER_DAY = 86400.0

# --- Physics ---
AU_KM = 1.49597871e8
MU_SUN_KM3PS2 = 1.327e11  # Sun gravitational parameter used for orbit periods

# --- Kepler solver ---
KEPLER_TOLERANCE = 1e-6  # radians
KEPLER_MAX_ITER = 30

# --- Orbit traces ---
DEFAULT_ORBIT_POINTS = 100

# --- Display ---
WIDTH, HEIGHT = 1280, 800
UI_SIDEBAR_WIDTH = 280
FPS = 60
KM_PER_PIXEL_BASE = 2.0e7  # roughly Neptune's orbit across the window
ZOOM_BASE = 1.0 / KM_PER_PIXEL_BASE
ZOOM_MIN = ZOOM_BASE / 20.0
ZOOM_MAX = ZOOM_BASE * 400.0
ZOOM_STEP = 1.15
CAMERA_SMOOTHING = 0.1
INITIAL_PAN_OFFSET = np.array([(WIDTH - UI_SIDEBAR_WIDTH) / 2, HEIGHT / 2])

# Body radii are exaggerated on screen; pixels = radius_km * scale, clamped
BODY_PIXEL_SCALE = 1.0e-3
MIN_BODY_PIXELS = 3
MAX_BODY_PIXELS = 14
SUN_RADIUS_PIXELS = 10
PICK_MARGIN_PIXELS = 4

# --- Colors ---
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRAY = (128, 128, 128)
ORBIT_COLOR = (85, 85, 85)
SUN_COLOR = (255, 255, 85)
