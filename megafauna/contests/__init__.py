"""Contest resolvers: herbivore niche contests and carnivore predation."""

from megafauna.contests.carnivore import (
    CarnivoreContest,
    PredationOutcome,
    can_hunt,
    resolve_predation,
)
from megafauna.contests.herbivore import (
    HerbivoreContest,
    HerbivoreScore,
    resolve_herbivore_contest,
)

__all__ = [
    "CarnivoreContest",
    "HerbivoreContest",
    "HerbivoreScore",
    "PredationOutcome",
    "can_hunt",
    "resolve_herbivore_contest",
    "resolve_predation",
]
