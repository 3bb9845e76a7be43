"""Board topology: habitats, latitudes and tile placement."""

from megafauna.board.board import Board, find_lowest_climax, place_tile
from megafauna.board.builder import build_board
from megafauna.board.habitat import Direction, Habitat, Latitude

__all__ = [
    "Board",
    "Direction",
    "Habitat",
    "Latitude",
    "build_board",
    "find_lowest_climax",
    "place_tile",
]
