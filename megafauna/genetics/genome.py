"""Genome (DNA spec) for animals and biome requirements.

A genome is a multiset of DNA letters. The same structure describes an
animal's DNA and a biome's dietary requirements, and the two coverage
predicates answer the only questions the rules ever ask of it:

- ``can_prey_on``: does this predator match the prey's roadrunner DNA?
- ``can_feed_on``: does this eater match the food's dietary DNA?
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple

from megafauna.exceptions import InvalidDNALetterError
from megafauna.genetics.dna import DNA, is_dietary, is_dna_letter, is_roadrunner
from megafauna.result import Result, try_result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Genome:
    """Immutable tally of DNA letters.

    Attributes:
        counts: (letter, count) pairs sorted by letter; counts are >= 1
        spec: The letter sequence the genome was built from, for display
    """

    counts: Tuple[Tuple[str, int], ...] = ()
    spec: str = field(default="", compare=False)

    @classmethod
    def from_spec(cls, spec: str) -> "Genome":
        """Tally a letter sequence, e.g. "BBG" -> B:2, G:1.

        Raises:
            InvalidDNALetterError: If any character is not a DNA letter
        """
        for letter in spec:
            if not is_dna_letter(letter):
                raise InvalidDNALetterError(letter, spec)
        tally = Counter(spec)
        return cls(counts=tuple(sorted(tally.items())), spec=spec)

    @property
    def breakdown(self) -> Dict[str, DNA]:
        """Letter -> DNA unit, for callers that want the per-letter view."""
        return {letter: DNA(letter, value) for letter, value in self.counts}

    def count_of(self, letter: str) -> int:
        """Number of ``letter`` in the genome; 0 if absent."""
        for candidate, value in self.counts:
            if candidate == letter:
                return value
        return 0

    def __iter__(self) -> Iterator[DNA]:
        return (DNA(letter, value) for letter, value in self.counts)

    def __len__(self) -> int:
        return sum(value for _, value in self.counts)

    def __bool__(self) -> bool:
        return bool(self.counts)

    def _covers(self, other: "Genome", letter_filter) -> bool:
        for letter, needed in other.counts:
            if letter_filter(letter) and self.count_of(letter) < needed:
                return False
        return True

    def can_prey_on(self, other: "Genome") -> bool:
        """Whether a predator with this genome can catch ``other``.

        False if the prey has any roadrunner DNA this genome lacks or holds
        fewer of. Dietary letters are ignored.
        """
        return self._covers(other, is_roadrunner)

    def can_feed_on(self, other: "Genome") -> bool:
        """Whether this genome can feed on ``other``.

        Used both for herbivores against a biome's requirements and for
        carnivores against a prey's dietary profile. False if ``other`` has
        any dietary DNA this genome lacks or holds fewer of. Roadrunner
        letters are ignored.
        """
        return self._covers(other, is_dietary)

    def __str__(self) -> str:
        return self.spec or "".join(letter * value for letter, value in self.counts)


EMPTY_GENOME = Genome()


def make_genome(spec: str) -> Result[Genome, InvalidDNALetterError]:
    """Build a genome, returning Err(InvalidDNALetterError) for bad letters."""
    result = try_result(lambda: Genome.from_spec(spec), InvalidDNALetterError)
    if result.is_err():
        logger.debug("Rejected genome spec %r: %s", spec, result.error)
    return result
