"""
constants.py: Centralized configuration for the game and the window host.
"""

# -------- Window & Timing Config --------
GAME_TITLE = "Flappy Dragon"
TICK_RATE = 30                  # Simulation ticks per second
TICK_TIME = 1.0 / TICK_RATE     # Fixed time step (Delta Time)
RENDER_FPS = 60
MAX_TICK_DT = 1000.0            # Longest step simulated by a single tick
CELL_SIZE = 12                  # Pixels per character cell in the window

# -------- Game World Config (character cells) --------
SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50
PLAYER_X = 5                    # Fixed player column
PLAYER_START_Y = SCREEN_HEIGHT // 2

# -------- Physics Config (rows / second / second) --------
GRAVITY_ACCEL = 60.0            # Vertical acceleration (rows/s^2)
FLAP_IMPULSE = -20.0            # Velocity set by a flap (rows/s)
MAX_FALL_VELOCITY = 40.0        # Clamping for stability (rows/s)

# -------- Obstacle Config --------
OBSTACLE_WIDTH = 2
OBSTACLE_GAP = 12
OBSTACLE_SPEED = 20.0           # Horizontal speed (columns/second)
OBSTACLE_SPACING = 30.0         # Columns travelled between spawns
OBSTACLE_MARGIN = 2             # Minimum rows between a gap and the screen edge

# -------- Glyphs & Colors --------
PLAYER_GLYPH = "@"
OBSTACLE_GLYPH = "|"
YELLOW = (255, 255, 0)
GREEN = (0, 200, 0)
WHITE = (255, 255, 255)
RED = (255, 50, 50)
BLACK = (0, 0, 0)
