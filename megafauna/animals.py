"""Animals: player species and immigrants.

Every animal has a dentition, a size and a genome. Player species also
carry a silhouette (0-3) identifying the body plan within the player's
color; immigrants instead remember the tile they arrived on.

Animals compare by identity: two species with the same numbers are still
different pieces on the board, and contests hand back the very object
that won.
"""

from dataclasses import dataclass
from typing import Optional

from megafauna.config.genetics import (
    DINOSAUR_DENTITIONS,
    DINOSAUR_SILHOUETTES,
    IMMIGRANT_HERBIVORE_DENTITION,
    IMMIGRANT_PREDATOR_DENTITION,
    MAMMAL_SILHOUETTES,
    PLAYER_COLORS,
    PLAYER_DENTITIONS,
    SILHOUETTE_COUNT,
)
from megafauna.exceptions import AnimalError, InvalidTileError
from megafauna.genetics.genome import Genome
from megafauna.tiles import Tile


@dataclass(eq=False)
class Animal:
    """Common attributes of anything that can eat or be eaten."""

    dentition: int
    size: int
    genome: Genome
    silhouette: Optional[int] = None
    source_tile: Optional[str] = None

    def __post_init__(self) -> None:
        if self.silhouette is not None and self.source_tile is not None:
            raise AnimalError("an animal is either a player species or an immigrant, not both")
        if self.silhouette is not None and not 0 <= self.silhouette < SILHOUETTE_COUNT:
            raise AnimalError(f"silhouette must be 0-{SILHOUETTE_COUNT - 1}, got {self.silhouette}")

    @property
    def is_player_species(self) -> bool:
        return self.dentition in PLAYER_DENTITIONS and self.silhouette is not None

    def __repr__(self) -> str:
        origin = f"silhouette={self.silhouette}" if self.silhouette is not None else f"tile={self.source_tile}"
        return f"{type(self).__name__}(dentition={self.dentition}, size={self.size}, genome={self.genome}, {origin})"


class Species(Animal):
    """One of a player's four species."""

    def __init__(self, dentition: int, silhouette: int, size: int, genome: Genome):
        if dentition not in PLAYER_DENTITIONS:
            raise AnimalError(f"player dentition must be one of {PLAYER_DENTITIONS}, got {dentition}")
        super().__init__(dentition=dentition, size=size, genome=genome, silhouette=silhouette)

    @property
    def is_dinosaur(self) -> bool:
        return self.dentition in DINOSAUR_DENTITIONS

    @property
    def color(self) -> str:
        return PLAYER_COLORS[self.dentition]

    @property
    def nickname(self) -> str:
        names = DINOSAUR_SILHOUETTES if self.is_dinosaur else MAMMAL_SILHOUETTES
        return names[self.silhouette]


class Immigrant(Animal):
    """An animal that arrived on an immigrant tile."""

    def __init__(self, tile: Tile, dentition: int, size: int, genome: Genome):
        self.tile = tile
        super().__init__(dentition=dentition, size=size, genome=genome, source_tile=tile.key)

    @classmethod
    def from_tile(cls, tile: Tile, size: Optional[int] = None) -> "Immigrant":
        """Create the animal printed on an immigrant tile.

        Carnivorous immigrants are one-tooth predators. The tile prints no
        size for them, so the caller must supply a positive one.

        Raises:
            InvalidTileError: If the tile is not an immigrant tile, or is a
                carnivore tile and no positive size was given
        """
        data = tile.immigrant
        if data is None:
            raise InvalidTileError(f"tile {tile.key} is not an immigrant tile")
        if data.is_herbivore:
            return cls(tile, IMMIGRANT_HERBIVORE_DENTITION, data.size, data.dna)
        if size is None or size <= 0:
            raise InvalidTileError(f"carnivorous immigrant on tile {tile.key} needs a positive size, got {size}")
        return cls(tile, IMMIGRANT_PREDATOR_DENTITION, size, data.dna)

    @property
    def is_herbivore(self) -> bool:
        return self.tile.immigrant.is_herbivore
