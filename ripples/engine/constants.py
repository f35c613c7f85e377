# ripples/engine/constants.py
import math

# --- Surface ---
PLANE_WIDTH, PLANE_HEIGHT = 5, 4
GRID_RESOLUTION = 12
MESH_ROTATION = (-0.5 * math.pi, 0.0, 0.15 * math.pi)

# --- Ripple noise (time in milliseconds) ---
BASE_FREQUENCY = 0.5
BASE_SPEED = 0.0005
COUNTER_FREQUENCY = 0.2
COUNTER_SPEED = 0.0002
COUNTER_WEIGHT = 1.5

# --- Parameters ---
AMPLITUDE_MIN, AMPLITUDE_MAX = 0.0, 1.5
DEFAULT_AMPLITUDE = 1.0

# --- Camera ---
FOV = 45.0
NEAR, FAR = 1.0, 50.0
CAMERA_POSITION = (0.0, 1.0, 10.0)
MIN_POLAR_ANGLE = 0.4 * math.pi
MAX_POLAR_ANGLE = 0.6 * math.pi
DAMPING_FACTOR = 0.05
ROTATE_SPEED = 1.0

# --- Matcaps ---
MATCAP_URLS = [f"https://ksenia-k.com/img/threejs/matcaps/{i}.png" for i in range(1, 8)]
DEFAULT_MATCAP_INDEX = 5
PREVIEW_PADDING = 3
PREVIEW_STRIP_FRACTION = 0.8

# --- Render loop ---
FRAME_INTERVAL_MS = 16
CLEAR_COLOR = (0.0, 0.0, 0.0, 0.0)
