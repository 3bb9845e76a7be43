"""Carnivore predation: which predator, if any, eats each prey animal.

Each prey is resolved on its own. A carnivore may hunt a prey only if it is
not its own kind, it is within one size point of the prey, and it can feed
on the prey's dietary DNA. Among eligible carnivores the one with the most
predator (P) DNA wins, then the one with the fewest teeth, then the first
listed.

Nothing stops one carnivore from winning both prey of a biome in the same
call; callers that allow a predator a single meal must arbitrate.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from megafauna.animals import Animal
from megafauna.config.contests import MAX_PREY_PER_CONTEST, PREY_SIZE_WINDOW
from megafauna.config.genetics import PLAYER_DENTITIONS, PREDATOR_LETTER
from megafauna.exceptions import ContestError

logger = logging.getLogger(__name__)


def is_cannibal(carnivore: Animal, prey: Animal) -> bool:
    """Same player's species with the same silhouette."""
    return (
        carnivore.dentition in PLAYER_DENTITIONS
        and carnivore.dentition == prey.dentition
        and carnivore.silhouette == prey.silhouette
    )


def in_size_window(carnivore: Animal, prey: Animal) -> bool:
    return prey.size - PREY_SIZE_WINDOW <= carnivore.size <= prey.size + PREY_SIZE_WINDOW


def can_hunt(carnivore: Animal, prey: Animal) -> bool:
    """Eligibility of ``carnivore`` to target ``prey``.

    The cannibalism rule is checked first and overrides any genome match.
    """
    if is_cannibal(carnivore, prey):
        return False
    if not in_size_window(carnivore, prey):
        return False
    return carnivore.genome.can_feed_on(prey.genome)


def pick_predator(eligible: Sequence[Animal]) -> Optional[Animal]:
    """Most P DNA wins; ties go to fewer teeth, then to list order."""
    winner = None
    best_predator_dna = -1
    best_dentition = 0
    for carnivore in eligible:
        predator_dna = carnivore.genome.count_of(PREDATOR_LETTER)
        if predator_dna > best_predator_dna or (
            predator_dna == best_predator_dna and carnivore.dentition < best_dentition
        ):
            winner = carnivore
            best_predator_dna = predator_dna
            best_dentition = carnivore.dentition
    return winner


@dataclass(frozen=True)
class PredationOutcome:
    """Resolution for a single prey animal."""

    prey: Animal
    winner: Optional[Animal]
    eligible: Tuple[Animal, ...]

    @property
    def is_eaten(self) -> bool:
        return self.winner is not None


class CarnivoreContest:
    """Resolves predation in one biome.

    Raises:
        ContestError: If more prey are given than a biome can hold
    """

    def __init__(self, carnivores: Sequence[Animal], prey: Sequence[Animal]):
        if len(prey) > MAX_PREY_PER_CONTEST:
            raise ContestError(
                f"a biome holds at most {MAX_PREY_PER_CONTEST} prey, got {len(prey)}"
            )
        self.carnivores = list(carnivores)
        self.prey = list(prey)

    def eligible_for(self, prey: Animal) -> List[Animal]:
        return [carnivore for carnivore in self.carnivores if can_hunt(carnivore, prey)]

    def resolve(self) -> List[PredationOutcome]:
        """One outcome per prey, in prey order."""
        outcomes = []
        for prey in self.prey:
            eligible = self.eligible_for(prey)
            winner = pick_predator(eligible)
            logger.debug(
                "Predation on %r: %d eligible, winner %r", prey, len(eligible), winner
            )
            outcomes.append(PredationOutcome(prey=prey, winner=winner, eligible=tuple(eligible)))
        return outcomes

    def winners(self) -> List[Animal]:
        """Distinct winning carnivores across all prey, in prey order."""
        result: List[Animal] = []
        for outcome in self.resolve():
            if outcome.winner is not None and not any(w is outcome.winner for w in result):
                result.append(outcome.winner)
        return result


def resolve_predation(carnivores: Sequence[Animal], prey: Sequence[Animal]) -> List[Animal]:
    """Convenience wrapper around CarnivoreContest.winners."""
    return CarnivoreContest(carnivores, prey).winners()
