"""Biome: a biome tile resting in a habitat, with its animal slots."""

from dataclasses import dataclass, field
from typing import List, Optional

from megafauna.animals import Animal
from megafauna.contests.carnivore import CarnivoreContest
from megafauna.contests.herbivore import HerbivoreContest
from megafauna.exceptions import InvalidTileError
from megafauna.tiles import BiomeTileData, Tile


@dataclass(eq=False)
class Biome:
    """A placed biome.

    Attributes:
        tile: The biome tile
        habitat_key: Key of the habitat it occupies, if placed
        predators / herbivores / rooters: Resident animals per slot
    """

    tile: Tile
    habitat_key: Optional[str] = None
    predators: List[Animal] = field(default_factory=list)
    herbivores: List[Animal] = field(default_factory=list)
    rooters: List[Animal] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.tile.is_biome_tile:
            raise InvalidTileError(f"tile {self.tile.key} is not a biome tile")

    @property
    def data(self) -> BiomeTileData:
        return self.tile.biome

    @property
    def key(self) -> str:
        return self.tile.key

    @property
    def climax_number(self) -> int:
        return self.data.climax_number

    def herbivore_contest(self, candidates: List[Animal]) -> HerbivoreContest:
        """Contest for the herbivore slot against this biome's requirements."""
        return HerbivoreContest(candidates, self.data.requirements, self.data.niche)

    def predation_contest(self) -> CarnivoreContest:
        """Contest between the resident predators and herbivores."""
        return CarnivoreContest(self.predators, self.herbivores)
