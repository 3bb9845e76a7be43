"""Tile models handed to the core by the data loaders.

A tile is either a biome (placed on the board) or an immigrant (an animal
arriving from outside). Loaders build these from their tabular sources;
the models validate the fields the rules depend on so corrupt data is
rejected before any contest or placement runs.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from megafauna.config.board import ALL_LATITUDE_KEYS, OROGENY_LATITUDE_KEY
from megafauna.exceptions import InvalidTileError
from megafauna.genetics.genome import Genome
from megafauna.niche import Niche


def _coerce_genome(value: Any) -> Any:
    if isinstance(value, str):
        return Genome.from_spec(value)
    return value


class BiomeTileData(BaseModel):
    """Rules data printed on a biome tile."""

    model_config = ConfigDict(frozen=True)

    climax_number: int = Field(gt=0)
    niche: Niche
    requirements: Genome
    rooter_requirements: Optional[Genome] = None
    red_star: bool = False
    blue_star: bool = False
    is_warming: bool = False
    is_cooling: bool = False

    @field_validator("requirements", "rooter_requirements", mode="before")
    @classmethod
    def _parse_genome(cls, value: Any) -> Any:
        return _coerce_genome(value)

    @field_validator("niche", mode="before")
    @classmethod
    def _parse_niche(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Niche.from_spec(value)
        return value


class ImmigrantTileData(BaseModel):
    """Rules data printed on an immigrant tile.

    Herbivorous immigrants have a printed size; carnivorous ones have none
    and enter play as one-tooth predators.
    """

    model_config = ConfigDict(frozen=True)

    size: Optional[int] = Field(default=None, gt=0)
    dna: Genome

    @field_validator("dna", mode="before")
    @classmethod
    def _parse_genome(cls, value: Any) -> Any:
        return _coerce_genome(value)

    @property
    def is_herbivore(self) -> bool:
        return self.size is not None


class Tile(BaseModel):
    """A biome or immigrant tile.

    Attributes:
        key: Unique identifier from the source data
        latitude_key: One of T, H, J, A or O (orogeny)
        is_mesozoic: False for Cenozoic tiles; ignored for homeland tiles
        homeland_dentition: Set when the tile is a player's homeland
        is_land / is_sea: Terrain of a biome, habitat of an immigrant
        biome / immigrant: Exactly one payload is present
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1)
    latitude_key: str
    is_mesozoic: bool = True
    homeland_dentition: Optional[int] = None
    supertitle: str = ""
    title: str = ""
    is_land: bool = False
    is_sea: bool = False
    biome: Optional[BiomeTileData] = None
    immigrant: Optional[ImmigrantTileData] = None

    @field_validator("latitude_key")
    @classmethod
    def _check_latitude_key(cls, value: str) -> str:
        if len(value) != 1 or value not in ALL_LATITUDE_KEYS:
            raise ValueError(f"latitude key must be one of {ALL_LATITUDE_KEYS}, got {value!r}")
        return value

    @model_validator(mode="after")
    def _check_payload(self) -> "Tile":
        if (self.biome is None) == (self.immigrant is None):
            raise ValueError("tile must carry exactly one of biome or immigrant data")
        return self

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Tile":
        """Validate a loader record, raising InvalidTileError on bad data."""
        try:
            return cls.model_validate(record)
        except ValidationError as exc:
            key = record.get("key", "<unknown>")
            raise InvalidTileError(f"tile {key}: {exc}") from exc

    @property
    def is_biome_tile(self) -> bool:
        return self.biome is not None

    @property
    def is_immigrant_tile(self) -> bool:
        return self.immigrant is not None

    @property
    def is_orogeny(self) -> bool:
        """Orogeny biomes are land biomes filed under the O latitude."""
        return self.is_biome_tile and self.is_land and self.latitude_key == OROGENY_LATITUDE_KEY

    @property
    def climax_number(self) -> Optional[int]:
        return self.biome.climax_number if self.biome is not None else None
