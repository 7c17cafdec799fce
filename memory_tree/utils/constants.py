import math

# =========================
# EASING
# =========================
EASE_FACTOR = 0.05          # fraction of the remaining distance covered per tick
SPIN_RANGE = 0.1            # spin velocity drawn from [-SPIN_RANGE/2, SPIN_RANGE/2]
SPIN_GAIN = 2.0             # free-spin step = spin velocity * SPIN_GAIN

# =========================
# TREE LAYOUT (descending helix)
# =========================
TREE_SWEEP = 50 * math.pi   # ~25 turns from apex to base
TREE_RADIUS = 15.0          # radius at the base
TREE_HEIGHT = 40.0
TREE_BOTTOM = -20.0
TREE_JITTER = 1.0           # x/z jitter drawn from [-TREE_JITTER/2, TREE_JITTER/2]

# =========================
# SCATTER LAYOUT (spherical shell)
# =========================
SCATTER_MIN_RADIUS = 8.0
SCATTER_MAX_RADIUS = 20.0

# =========================
# FOCUS LAYOUT
# =========================
CAMERA_POSITION = (0.0, 2.0, 50.0)
FOCUS_ANCHOR = (0.0, 2.0, 40.0)     # 10 units in front of the resting camera
FOCUS_SCALE = 3.0
FOCUS_PUSH = 2.0                    # non-subjects are scattered this much further out

# =========================
# GESTURES
# =========================
LANDMARK_COUNT = 21
WRIST = 0
THUMB_TIP = 4
INDEX_TIP = 8
MIDDLE_TIP = 12
RING_TIP = 16
PINKY_TIP = 20
PALM_CENTER = 9             # middle finger MCP
FINGER_TIPS = (INDEX_TIP, MIDDLE_TIP, RING_TIP, PINKY_TIP)

PINCH_THRESHOLD = 0.05      # strict: distance < threshold
FIST_THRESHOLD = 0.25       # openness below -> FIST
OPEN_THRESHOLD = 0.40       # openness above -> OPEN

# =========================
# ORIENTATION
# =========================
ORIENT_BLEND = 0.1
FOCUS_BLEND = 0.1
YAW_GAIN = 4.0              # (x - 0.5) * 4 -> [-2, 2] rad
PITCH_GAIN = 2.0            # (y - 0.5) * 2 -> [-1, 1] rad
IDLE_YAW_STEP = 0.002
IDLE_PITCH_DECAY = 0.95
