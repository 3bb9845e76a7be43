"""Ecological resolution rules for the Megafauna board game.

Genomes and niches, herbivore and carnivore contests, and the board graph
used to place biome tiles.
"""

from megafauna.animals import Animal, Immigrant, Species
from megafauna.biome import Biome
from megafauna.board import Board, Direction, Habitat, Latitude, build_board, find_lowest_climax, place_tile
from megafauna.contests import (
    CarnivoreContest,
    HerbivoreContest,
    resolve_herbivore_contest,
    resolve_predation,
)
from megafauna.exceptions import (
    AnimalError,
    ContestError,
    InvalidDNALetterError,
    InvalidLatitudeKeyError,
    InvalidNicheSpecError,
    InvalidTileError,
    MegafaunaError,
)
from megafauna.genetics import Genome, make_genome
from megafauna.niche import Niche, NicheKind, make_niche
from megafauna.result import Err, Ok, Result
from megafauna.tiles import BiomeTileData, ImmigrantTileData, Tile

__all__ = [
    # Genome model
    "Genome",
    "make_genome",
    # Niche
    "Niche",
    "NicheKind",
    "make_niche",
    # Entities
    "Animal",
    "Species",
    "Immigrant",
    "Biome",
    "Tile",
    "BiomeTileData",
    "ImmigrantTileData",
    # Contests
    "HerbivoreContest",
    "CarnivoreContest",
    "resolve_herbivore_contest",
    "resolve_predation",
    # Board
    "Board",
    "Direction",
    "Habitat",
    "Latitude",
    "build_board",
    "find_lowest_climax",
    "place_tile",
    # Results and errors
    "Result",
    "Ok",
    "Err",
    "MegafaunaError",
    "InvalidDNALetterError",
    "InvalidNicheSpecError",
    "InvalidLatitudeKeyError",
    "InvalidTileError",
    "AnimalError",
    "ContestError",
]
