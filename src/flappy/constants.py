"""
constants.py: Centralized configuration for game physics, spawning and rendering.
"""

import math

# -------- Variants --------
VARIANT_CLASSIC = "classic"
VARIANT_ENHANCED = "enhanced"
VARIANTS = (VARIANT_CLASSIC, VARIANT_ENHANCED)
DEFAULT_VARIANT = VARIANT_ENHANCED

# -------- Window Config --------
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
RENDER_FPS = 60                 # One simulation step per rendered frame

# -------- Avatar Config (pixels / frame) --------
BIRD_START_X = 50.0
BIRD_START_Y = 150.0
BIRD_WIDTH = 67.0
BIRD_HEIGHT = 69.8
GRAVITY = 0.15                  # Added to velocity every frame
JUMP_IMPULSE = 4.6              # Velocity after a flap is -JUMP_IMPULSE

# Tilt animation (radians)
INITIAL_ANGLE = 0.0
MAX_DOWN_ANGLE = math.pi / 4
ANGLE_STEP = 0.05               # Per falling frame, clamped at MAX_DOWN_ANGLE
FLAP_ANGLE_KICK = -0.4          # Applied on flap, no upward clamp
FLAP_TIMER_FRAMES = 10

# -------- Obstacle Config --------
PIPE_WIDTH = 50.0
GAP_FRACTION = 1 / 3            # Gap height as a fraction of viewport height
TOP_MAX_FRACTION = 1 / 2        # Top pipe height drawn from [0, height * this)

# Spawn interval (frames) derived from viewport width
SPAWN_WIDTH_DIVISOR = 3
MIN_SPAWN_INTERVAL = 90         # Enhanced variant bounds
MAX_SPAWN_INTERVAL = 300

# Game speed (pixels / frame)
BASE_GAME_SPEED = 1.0
SPEED_REFERENCE_SIZE = 800.0    # max(width, height) giving BASE_GAME_SPEED
MAX_GAME_SPEED = 3.0

# -------- Render Config --------
BACKGROUND_COLOR = (112, 197, 206)
PIPE_COLOR = (84, 170, 64)
PIPE_EDGE_COLOR = (52, 110, 40)
BIRD_COLOR = (250, 214, 70)
BIRD_FLAP_COLOR = (255, 168, 60)
TEXT_COLOR = (255, 255, 255)
OVERLAY_COLOR = (0, 0, 0, 128)  # rgba(0, 0, 0, 0.5)

SCORE_FONT_SIZE = 20
SCORE_POS = (10, 25)
TITLE_FONT_SIZE = 40
HINT_FONT_SIZE = 20
GAME_OVER_TEXT = "Game Over"
RESTART_HINT_TEXT = "Press Space or Click to Restart"
TITLE_OFFSET_X = -100
HINT_OFFSET = (-140, 40)
