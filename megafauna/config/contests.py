"""Contest tuning constants."""

# Herbivore niche bonus: flat for dentition/DNA niches, per size point for
# size niches.
NICHE_BONUS = 10

# Weight of the suitability tier in the historic single-integer herbivore
# score (display only)
LEGACY_SUITABILITY_POINTS = 100

# Carnivores accept prey whose size is within this many points of their own
PREY_SIZE_WINDOW = 1

# A biome holds at most this many prey animals at once
MAX_PREY_PER_CONTEST = 2
