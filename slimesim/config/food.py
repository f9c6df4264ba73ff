"""Food configuration constants.

Food comes in three tiers. Rarer food is larger and far more nutritious,
which makes a lucky find worth several basic meals.
"""

# Nutritional value per tier (ordinal: basic, premium, special)
BASIC_NUTRITION = 10.0
PREMIUM_NUTRITION = 25.0
SPECIAL_NUTRITION = 50.0

# Display size ranges in pixels, [min, max)
FOOD_SIZE_MIN = 5.0
FOOD_SIZE_MAX = 15.0
BASIC_SIZE_RANGE = (FOOD_SIZE_MIN, FOOD_SIZE_MIN + 3)
PREMIUM_SIZE_RANGE = (FOOD_SIZE_MIN + 3, FOOD_SIZE_MIN + 6)
SPECIAL_SIZE_RANGE = (FOOD_SIZE_MIN + 6, FOOD_SIZE_MAX)

# Display colors (RGB)
BASIC_FOOD_COLOR = (76, 175, 80)  # Green
PREMIUM_FOOD_COLOR = (255, 193, 7)  # Amber
SPECIAL_FOOD_COLOR = (156, 39, 176)  # Purple
