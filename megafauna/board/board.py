"""The board: habitat arena, lookup indices, climax queries and placement.

The Board owns every Habitat. Habitats refer to their neighbours by key and
latitudes are read-only views, so the board is the only place habitats
live. Topology is fixed once built; only the biome occupying a habitat
changes, through ``place_tile``.

Placement mutates shared state and is not safe to call concurrently;
callers serialize it (one placement at a time per game).
"""

import logging
from typing import Dict, Iterator, List, Optional

from megafauna.biome import Biome
from megafauna.board.habitat import Direction, Habitat, Latitude
from megafauna.config.board import MAX_CLIMAX_NUMBER
from megafauna.exceptions import BoardError, InvalidLatitudeKeyError, UnknownHabitatError
from megafauna.result import Result, try_result
from megafauna.tiles import Tile

logger = logging.getLogger(__name__)


class Board:
    """Habitats on the board plus the structures to look them up.

    Attributes:
        rows: Habitats per latitude row, north to south
        latitude_map: Latitude key -> Latitude (including "O" for orogeny)
        habitat_map: Habitat key -> Habitat
    """

    def __init__(self, rows: List[List[Habitat]], latitudes: Dict[str, Latitude]):
        self.rows = rows
        self.latitude_map = latitudes
        self.habitat_map: Dict[str, Habitat] = {h.key: h for row in rows for h in row}

    def __len__(self) -> int:
        return len(self.habitat_map)

    def __iter__(self) -> Iterator[Habitat]:
        for row in self.rows:
            yield from row

    def __contains__(self, key: object) -> bool:
        return key in self.habitat_map

    def habitat(self, key: str) -> Habitat:
        try:
            return self.habitat_map[key]
        except KeyError:
            raise UnknownHabitatError(key) from None

    def latitude(self, key: str) -> Latitude:
        try:
            return self.latitude_map[key]
        except KeyError:
            raise InvalidLatitudeKeyError(key) from None

    def neighbor(self, key: str, direction: Direction) -> Optional[Habitat]:
        """The habitat ``direction`` of ``key``, or None at the edge."""
        neighbor_key = self.habitat(key).neighbor_key(direction)
        return self.habitat_map[neighbor_key] if neighbor_key is not None else None

    def neighbors(self, key: str) -> Dict[Direction, Habitat]:
        """All existing neighbours of a habitat, by direction."""
        habitat = self.habitat(key)
        result = {}
        for direction in Direction:
            neighbor_key = habitat.neighbor_key(direction)
            if neighbor_key is not None:
                result[direction] = self.habitat_map[neighbor_key]
        return result

    def find_lowest_climax(self, latitude_key: str) -> Habitat:
        """The habitat with the lowest effective climax number in a latitude.

        A resident biome's climax number replaces the printed one. Ties go
        to the first habitat in the latitude's order.

        Raises:
            InvalidLatitudeKeyError: If the latitude key is unknown
        """
        latitude = self.latitude(latitude_key)
        result = None
        lowest = MAX_CLIMAX_NUMBER
        for habitat in latitude.habitats:
            climax_number = habitat.effective_climax_number
            if climax_number < lowest:
                lowest = climax_number
                result = habitat
        if result is None:
            raise BoardError(f"latitude {latitude_key!r} has no habitat below {MAX_CLIMAX_NUMBER}")
        return result

    def place_tile(self, tile: Tile) -> Optional[Tile]:
        """Place a tile, returning the biome tile it displaced, if any.

        Land biomes go to the lowest-climax habitat of the tile's latitude
        and push out whatever biome lives there. Sea biomes and immigrants
        do not occupy habitats and leave the board untouched.

        Raises:
            InvalidLatitudeKeyError: If the tile's latitude key is unknown
        """
        if not tile.is_biome_tile or not tile.is_land:
            logger.debug("Tile %s does not occupy a habitat", tile.key)
            return None

        habitat = self.find_lowest_climax(tile.latitude_key)
        displaced = habitat.biome.tile if habitat.biome is not None else None
        habitat.biome = Biome(tile=tile, habitat_key=habitat.key)
        if displaced is not None:
            logger.info("Placed %s in %s, displacing %s", tile.key, habitat.key, displaced.key)
        else:
            logger.info("Placed %s in %s", tile.key, habitat.key)
        return displaced


def find_lowest_climax(board: Board, latitude_key: str) -> Result[Habitat, BoardError]:
    """Result-returning form of Board.find_lowest_climax."""
    return try_result(lambda: board.find_lowest_climax(latitude_key), BoardError)


def place_tile(board: Board, tile: Tile) -> Result[Optional[Tile], BoardError]:
    """Result-returning form of Board.place_tile."""
    return try_result(lambda: board.place_tile(tile), BoardError)
