"""Herbivore contests: who keeps a biome's herbivore slot.

Each candidate is scored on three tiers, compared lexicographically:

1. Suitability - can it feed on the biome's requirements at all?
2. Niche bonus - size, player color, or a DNA letter, depending on niche.
3. Dentition - fine-grained final tiebreak.

Ties after all three go to whoever was listed first. Only a suitable animal
can win; if nobody is suitable the biome supports no herbivore.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from megafauna.animals import Animal
from megafauna.config.contests import LEGACY_SUITABILITY_POINTS, NICHE_BONUS
from megafauna.genetics.genome import Genome
from megafauna.niche import Niche, NicheKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HerbivoreScore:
    """Score record for one candidate.

    Attributes:
        animal: The candidate
        index: Position in the candidate list (stable tiebreak)
        suitable: Whether the animal meets the dietary requirements
        niche_bonus: 0, NICHE_BONUS, or NICHE_BONUS * size
        dentition: The animal's dentition
    """

    animal: Animal
    index: int
    suitable: bool
    niche_bonus: int
    dentition: int

    @property
    def key(self) -> Tuple[bool, int, int]:
        return (self.suitable, self.niche_bonus, self.dentition)

    @property
    def legacy_points(self) -> int:
        """The old hundreds/tens/ones integer, for display only.

        Collides with the suitability tier once a size niche bonus reaches
        100; never rank by it.
        """
        tier = LEGACY_SUITABILITY_POINTS if self.suitable else 0
        return tier + self.niche_bonus + self.dentition


def niche_bonus(animal: Animal, niche: Niche) -> int:
    """Bonus an animal earns from the biome's niche."""
    if niche.kind is NicheKind.SIZE:
        return NICHE_BONUS * animal.size
    if niche.kind is NicheKind.DENTITION:
        return NICHE_BONUS if animal.dentition == niche.dentition else 0
    return NICHE_BONUS if animal.genome.count_of(niche.letter) >= 1 else 0


class HerbivoreContest:
    """Resolves one biome's herbivore contest.

    Holds live references to the candidates; scoring is recomputed on every
    call so it reflects the animals' current state.
    """

    def __init__(self, animals: Sequence[Animal], requirements: Genome, niche: Niche):
        self.animals = list(animals)
        self.requirements = requirements
        self.niche = niche

    def score(self, animal: Animal, index: int = 0) -> HerbivoreScore:
        return HerbivoreScore(
            animal=animal,
            index=index,
            suitable=animal.genome.can_feed_on(self.requirements),
            niche_bonus=niche_bonus(animal, self.niche),
            dentition=animal.dentition,
        )

    def scores(self) -> List[HerbivoreScore]:
        """All candidates, best first.

        ``sorted`` is stable under ``reverse=True``, so equal keys keep the
        original list order.
        """
        scored = [self.score(animal, index) for index, animal in enumerate(self.animals)]
        return sorted(scored, key=lambda s: s.key, reverse=True)

    def find_winner(self) -> Optional[Animal]:
        """The surviving herbivore, or None if nobody can feed here."""
        ranked = self.scores()
        if not ranked:
            return None
        best = ranked[0]
        if not best.suitable:
            logger.debug(
                "Herbivore contest (%s, niche %s): no suitable animal among %d",
                self.requirements,
                self.niche,
                len(ranked),
            )
            return None
        logger.debug(
            "Herbivore contest (%s, niche %s): %r wins with %s",
            self.requirements,
            self.niche,
            best.animal,
            best.key,
        )
        return best.animal


def resolve_herbivore_contest(
    animals: Sequence[Animal], requirements: Genome, niche: Niche
) -> Optional[Animal]:
    """Convenience wrapper around HerbivoreContest.find_winner."""
    return HerbivoreContest(animals, requirements, niche).find_winner()
