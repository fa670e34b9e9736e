"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# PLAYER
# =============================================================================
STARTING_RESOURCES = 100
STARTING_LIVES = 10

# =============================================================================
# TIMING (all in seconds)
# =============================================================================
FRAME_TIME = 0.01             # nominal duration of one tick

# =============================================================================
# WAVES
# =============================================================================
ENEMIES_PER_WAVE_STEP = 10    # live enemies needed to grow the wave by one
SPAWN_X = 0.0                 # every enemy enters the map here
SPAWN_Y = 0.0

# =============================================================================
# CAMERA
# =============================================================================
CAMERA_SPEED = 1.0            # units per key press
