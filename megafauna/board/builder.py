"""Board construction.

The board is built in passes, each operating on the rows produced by the
first one:

1. populate habitats from the climax number strings,
2. flag orogeny habitats,
3. wire adjacency (rectangle first, then the extra habitats of the last row),
4. build the latitude index, including the synthetic orogeny latitude.
"""

import logging
from typing import Dict, List, Optional

from megafauna.board.board import Board
from megafauna.board.habitat import Direction, Habitat, Latitude
from megafauna.config.board import OROGENY_LATITUDE_KEY
from megafauna.config.board_config import BoardConfig

logger = logging.getLogger(__name__)

Rows = List[List[Habitat]]


def build_board(config: Optional[BoardConfig] = None) -> Board:
    """Build a fresh board; the standard game board if no config is given.

    Raises:
        ConfigurationError: If the config cannot form a board
    """
    config = config or BoardConfig()
    config.validate()

    rows = _populate_habitats(config)
    _set_orogeny_habitats(rows, config)
    _set_adjacent_habitats(rows, config)
    latitudes = _build_latitudes(rows, config)

    board = Board(rows, latitudes)
    logger.debug(
        "Built board: %d habitats in %d latitudes (%d orogeny)",
        len(board),
        len(rows),
        len(latitudes[OROGENY_LATITUDE_KEY]),
    )
    return board


def _populate_habitats(config: BoardConfig) -> Rows:
    rows: Rows = []
    for row, latitude_key in enumerate(config.latitude_keys):
        digits = config.climax_numbers[latitude_key]
        rows.append(
            [
                Habitat(
                    key=f"{latitude_key}{col}",
                    latitude_key=latitude_key,
                    row=row,
                    col=col,
                    climax_number=int(digit),
                )
                for col, digit in enumerate(digits)
            ]
        )
    return rows


def _set_orogeny_habitats(rows: Rows, config: BoardConfig) -> None:
    for row, col in config.orogeny_cells:
        rows[row][col].is_orogeny = True


def _link(a: Habitat, direction: Direction, b: Habitat) -> None:
    """Make ``b`` lie ``direction`` of ``a``, and ``a`` the opposite of ``b``."""
    a.neighbors[direction] = b.key
    b.neighbors[direction.opposite] = a.key


def _set_adjacent_habitats(rows: Rows, config: BoardConfig) -> None:
    width = config.rectangle_columns

    # the rectangular part: every row's first `width` habitats
    for row in range(len(rows)):
        for col in range(width):
            habitat = rows[row][col]
            if row + 1 < len(rows):
                _link(habitat, Direction.S, rows[row + 1][col])
            if col + 1 < width:
                _link(habitat, Direction.E, rows[row][col + 1])

    # the extra habitats sit in their own row below the last latitude,
    # each under its anchor column and next to each other
    last = rows[-1]
    extras = last[width:]
    for anchor, extra in zip(config.extra_anchors, extras):
        _link(last[anchor], Direction.S, extra)
    for left, right in zip(extras, extras[1:]):
        _link(left, Direction.E, right)


def _build_latitudes(rows: Rows, config: BoardConfig) -> Dict[str, Latitude]:
    latitudes: Dict[str, Latitude] = {}
    for latitude_key, habitats in zip(config.latitude_keys, rows):
        latitudes[latitude_key] = Latitude(
            key=latitude_key,
            name=config.latitude_names.get(latitude_key, latitude_key),
            habitats=tuple(habitats),
        )
    latitudes[OROGENY_LATITUDE_KEY] = Latitude(
        key=OROGENY_LATITUDE_KEY,
        name=config.latitude_names.get(OROGENY_LATITUDE_KEY, "Orogeny"),
        habitats=tuple(h for habitats in rows for h in habitats if h.is_orogeny),
    )
    return latitudes
