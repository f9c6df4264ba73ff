"""Slime-specific configuration constants.

Times are in simulated milliseconds, speeds in pixels per second.
"""

# Slime body
SLIME_RADIUS = 12.0  # Collision radius at size gene 1.0
SLIME_DEFAULT_POSITION = (150.0, 150.0)

# Movement
SLIME_BASE_SPEED = 50.0  # Multiplied by the speed gene
SPRINT_SPEED_MULTIPLIER = 1.5
BOUNDARY_PADDING = 10.0  # Distance kept from the world edge

# =============================================================================
# ENERGY
# =============================================================================
# Energy drains every tick. Moving costs extra in proportion to the speed
# gene, and sprinting multiplies that movement cost.
MAX_ENERGY = 100.0
INITIAL_ENERGY = 50.0  # Newborn and spawned slimes start half full
ENERGY_DECREASE_RATE = 0.005  # Energy lost per ms just for being alive
MOVEMENT_ENERGY_FACTOR = 0.5  # Movement cost = rate * dt * speed * factor
SPRINT_ENERGY_MULTIPLIER = 2.5
SPRINT_MIN_ENERGY_RATIO = 0.2  # Sprint requests below 20% are ignored

# Hunger thresholds as RATIOS of max energy (inclusive upper bounds)
HUNGRY_THRESHOLD_RATIO = 0.30
STARVING_THRESHOLD_RATIO = 0.15

# =============================================================================
# RANDOM WALK
# =============================================================================
# Hungrier slimes move more often and change direction sooner.
SATISFIED_MOVE_PROBABILITY = 0.8
HUNGRY_MOVE_PROBABILITY = 0.95

SATISFIED_DIRECTION_CHANGE_MS = (1000.0, 5000.0)
HUNGRY_DIRECTION_CHANGE_MS = (800.0, 3000.0)
STARVING_DIRECTION_CHANGE_MS = (500.0, 2000.0)

# Death
DEATH_FADE_DURATION_MS = 1000.0

# Reproduction
DEFAULT_MUTATION_RATE = 0.05
