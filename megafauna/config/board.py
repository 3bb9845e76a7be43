"""Board geometry constants."""

# Real latitude rows, top (north) to bottom
LATITUDE_KEYS = "AJHT"

# Pseudo-latitude collecting every orogeny habitat on the board
OROGENY_LATITUDE_KEY = "O"

# All keys a tile may name
ALL_LATITUDE_KEYS = "THJAO"

LATITUDE_NAMES = {
    "A": "Arctic",
    "J": "Jet Stream",
    "H": "Horse Latitude",
    "T": "Tropics",
    "O": "Orogeny",
}

# Printed climax numbers, one digit per habitat, row-major
CLIMAX_NUMBERS = {
    "A": "263541",
    "J": "614532",
    "H": "243561",
    "T": "73856412",
}

# Width of the rectangular part of the board; the Tropics carry two extra
# habitats hanging below columns 2 and 3.
RECTANGLE_COLUMNS = 6
EXTRA_HABITAT_ANCHORS = (2, 3)

# (row, col) coordinates of orogeny habitats
OROGENY_CELLS = ((0, 4), (1, 1), (1, 3), (2, 0), (2, 4), (3, 1))

# Upper bound on any climax number, printed or from a biome
MAX_CLIMAX_NUMBER = 1000
