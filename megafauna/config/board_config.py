"""Lightweight board configuration helpers."""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from megafauna.config.board import (
    CLIMAX_NUMBERS,
    EXTRA_HABITAT_ANCHORS,
    LATITUDE_KEYS,
    LATITUDE_NAMES,
    OROGENY_CELLS,
    RECTANGLE_COLUMNS,
)
from megafauna.exceptions import ConfigurationError


@dataclass(frozen=True)
class BoardConfig:
    """Geometry of the board.

    Attributes:
        latitude_keys: Row keys, north to south.
        climax_numbers: Latitude key -> one digit per habitat in that row.
        rectangle_columns: Width of the rectangular region.
        extra_anchors: Columns of the last row the extra habitats hang below.
        orogeny_cells: (row, col) pairs flagged as orogeny.
        latitude_names: Display names per latitude key.
    """

    latitude_keys: str = LATITUDE_KEYS
    climax_numbers: Dict[str, str] = field(default_factory=lambda: dict(CLIMAX_NUMBERS))
    rectangle_columns: int = RECTANGLE_COLUMNS
    extra_anchors: Tuple[int, ...] = EXTRA_HABITAT_ANCHORS
    orogeny_cells: Tuple[Tuple[int, int], ...] = OROGENY_CELLS
    latitude_names: Dict[str, str] = field(default_factory=lambda: dict(LATITUDE_NAMES))

    def validate(self) -> None:
        """Raise ConfigurationError if the geometry cannot form a board."""
        if not self.latitude_keys:
            raise ConfigurationError("board needs at least one latitude row")
        last = self.latitude_keys[-1]
        for key in self.latitude_keys:
            digits = self.climax_numbers.get(key)
            if digits is None:
                raise ConfigurationError(f"no climax numbers for latitude {key!r}")
            if not digits.isdigit():
                raise ConfigurationError(f"climax numbers for {key!r} must be digits: {digits!r}")
            expected = self.rectangle_columns
            if key == last:
                expected += len(self.extra_anchors)
            if len(digits) != expected:
                raise ConfigurationError(
                    f"latitude {key!r} has {len(digits)} habitats, expected {expected}"
                )
        for anchor in self.extra_anchors:
            if not 0 <= anchor < self.rectangle_columns:
                raise ConfigurationError(f"extra habitat anchor {anchor} is off the board")
        for row, col in self.orogeny_cells:
            if not 0 <= row < len(self.latitude_keys):
                raise ConfigurationError(f"orogeny row {row} is off the board")
            if not 0 <= col < len(self.climax_numbers[self.latitude_keys[row]]):
                raise ConfigurationError(f"orogeny cell ({row}, {col}) is off the board")
