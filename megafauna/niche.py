"""Niche: the first tiebreaker in herbivore contests.

A niche is exactly *one* of: Size, a player color (Dentition), or a DNA
letter. It carries no scoring logic itself; the herbivore contest decides
what each kind is worth.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from megafauna.config.genetics import DNA_LETTERS, PLAYER_DENTITIONS
from megafauna.exceptions import InvalidNicheSpecError
from megafauna.result import Result, try_result

logger = logging.getLogger(__name__)

SIZE_SPEC = "SIZE"


class NicheKind(Enum):
    """The three mutually exclusive niche variants."""

    SIZE = "size"
    DENTITION = "dentition"
    DNA_LETTER = "dna_letter"


@dataclass(frozen=True)
class Niche:
    """A biome's niche.

    Attributes:
        kind: Which variant is active
        dentition: Player dentition, only for DENTITION niches
        letter: DNA letter, only for DNA_LETTER niches
    """

    kind: NicheKind
    dentition: Optional[int] = None
    letter: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is NicheKind.DENTITION:
            if self.dentition not in PLAYER_DENTITIONS or self.letter is not None:
                raise InvalidNicheSpecError(str(self.dentition))
        elif self.kind is NicheKind.DNA_LETTER:
            if self.letter not in DNA_LETTERS or self.dentition is not None:
                raise InvalidNicheSpecError(str(self.letter))
        elif self.dentition is not None or self.letter is not None:
            raise InvalidNicheSpecError(SIZE_SPEC)

    @classmethod
    def size(cls) -> "Niche":
        return cls(NicheKind.SIZE)

    @classmethod
    def for_dentition(cls, dentition: int) -> "Niche":
        return cls(NicheKind.DENTITION, dentition=dentition)

    @classmethod
    def for_letter(cls, letter: str) -> "Niche":
        return cls(NicheKind.DNA_LETTER, letter=letter)

    @classmethod
    def from_spec(cls, spec: str) -> "Niche":
        """Parse "Size", "2" through "5", or a single DNA letter.

        Surrounding whitespace is ignored. "Size" matches in any case; DNA
        letters must be uppercase and dentitions plain ASCII digits.

        Raises:
            InvalidNicheSpecError: For anything else
        """
        cleaned = spec.strip()
        if cleaned.upper() == SIZE_SPEC:
            return cls.size()
        if cleaned.isascii() and cleaned.isdigit():
            dentition = int(cleaned)
            if dentition not in PLAYER_DENTITIONS:
                raise InvalidNicheSpecError(spec)
            return cls.for_dentition(dentition)
        if len(cleaned) == 1 and cleaned in DNA_LETTERS:
            return cls.for_letter(cleaned)
        raise InvalidNicheSpecError(spec)

    @property
    def is_size(self) -> bool:
        return self.kind is NicheKind.SIZE

    def __str__(self) -> str:
        if self.kind is NicheKind.DENTITION:
            return str(self.dentition)
        if self.kind is NicheKind.DNA_LETTER:
            return str(self.letter)
        return "Size"


def make_niche(spec: str) -> Result[Niche, InvalidNicheSpecError]:
    """Build a niche, returning Err(InvalidNicheSpecError) for bad specs."""
    result = try_result(lambda: Niche.from_spec(spec), InvalidNicheSpecError)
    if result.is_err():
        logger.debug("Rejected niche spec %r", spec)
    return result
