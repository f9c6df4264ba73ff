"""World and spawning defaults."""

# World
DEFAULT_WORLD_WIDTH = 800
DEFAULT_WORLD_HEIGHT = 600
DEFAULT_SEED = "slimesim"

# =============================================================================
# SPAWNING
# =============================================================================
# Spawn positions are retried a bounded number of times. A crowded world
# simply skips the spawn instead of searching forever.
MAX_PLACEMENT_ATTEMPTS = 20
SLIME_MIN_SEPARATION = 30.0
FOOD_MIN_SEPARATION = 20.0

# Slime population
DEFAULT_INITIAL_POPULATION = 20
DEFAULT_SLIME_SPAWN_RATE = 0.2  # Slimes per second (one every 5 s)
DEFAULT_MAX_POPULATION = 100
DEFAULT_SPAWN_AREA_PADDING = 0.1  # Fraction of each edge kept clear

# Food
DEFAULT_INITIAL_FOOD = 30
DEFAULT_FOOD_SPAWN_RATE = 0.5  # Food per second
DEFAULT_MAX_FOOD = 50
DEFAULT_SPECIAL_FOOD_CHANCE = 0.05
DEFAULT_PREMIUM_FOOD_CHANCE = 0.15

# Scene defaults used by the headless runner
SCENE_INITIAL_FOOD = 40
SCENE_FOOD_SPAWN_RATE = 0.3
SCENE_MAX_FOOD = 60
