"""DNA alphabet and dentition constants."""

# Roadrunner DNA governs mobility and defense: a predator must match it to
# catch its prey.
ROADRUNNER_LETTERS = frozenset("AMNS")

# Dietary DNA governs what an animal can digest.
DIETARY_LETTERS = frozenset("BGHIP")

DNA_LETTERS = ROADRUNNER_LETTERS | DIETARY_LETTERS

# Predator DNA ranks carnivores competing for the same prey
PREDATOR_LETTER = "P"

# Player dentitions (teeth count doubles as the player's color)
MIN_PLAYER_DENTITION = 2
MAX_PLAYER_DENTITION = 5
PLAYER_DENTITIONS = tuple(range(MIN_PLAYER_DENTITION, MAX_PLAYER_DENTITION + 1))
PLAYER_COLORS = {2: "Red", 3: "Orange", 4: "Green", 5: "White"}
DINOSAUR_DENTITIONS = frozenset({2, 4})

# Carnivorous immigrants are one-tooth predators
IMMIGRANT_PREDATOR_DENTITION = 1

# Herbivorous immigrants have no teeth and lose every dentition tiebreak
IMMIGRANT_HERBIVORE_DENTITION = 0

# Silhouettes 0-3, nicknamed per body plan family
SILHOUETTE_COUNT = 4
DINOSAUR_SILHOUETTES = ("dino", "fin", "bird", "croc")
MAMMAL_SILHOUETTES = ("cat", "rhino", "bat", "dolphin")
