"""Habitats and latitudes: the cells of the board and their groupings."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from megafauna.biome import Biome


class Direction(IntEnum):
    """Map directions; values index Habitat.neighbors."""

    N = 0
    E = 1
    S = 2
    W = 3

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)


@dataclass(eq=False)
class Habitat:
    """A space on the board holding a biome slot.

    Neighbours are stored as habitat keys, resolved through the owning
    Board, so habitats never hold references to each other.

    Attributes:
        key: Latitude key plus zero-based column, e.g. "T0"
        latitude_key: Row the habitat belongs to
        row / col: Position in the board's rows
        climax_number: The printed climax number
        is_orogeny: True for orogeny habitats
        neighbors: Habitat key per Direction, None at board edges
        biome: The resident biome, if any
    """

    key: str
    latitude_key: str
    row: int
    col: int
    climax_number: int
    is_orogeny: bool = False
    neighbors: List[Optional[str]] = field(default_factory=lambda: [None] * len(Direction))
    biome: Optional["Biome"] = None

    @property
    def effective_climax_number(self) -> int:
        """The occupant's climax number if occupied, else the printed one."""
        if self.biome is not None:
            return self.biome.climax_number
        return self.climax_number

    def neighbor_key(self, direction: Direction) -> Optional[str]:
        return self.neighbors[direction]

    def __repr__(self) -> str:
        return f"Habitat({self.key}, climax={self.climax_number}, orogeny={self.is_orogeny})"


@dataclass(frozen=True)
class Latitude:
    """A named, ordered group of habitats.

    The synthetic "O" latitude collects every orogeny habitat across the
    real rows, so orogeny biomes can be placed with the same query.
    """

    key: str
    name: str
    habitats: Tuple[Habitat, ...]

    def __len__(self) -> int:
        return len(self.habitats)

    def __iter__(self):
        return iter(self.habitats)

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(h.key for h in self.habitats)
