"""DNA letters and the single-letter DNA unit."""

from dataclasses import dataclass

from megafauna.config.genetics import DIETARY_LETTERS, DNA_LETTERS, ROADRUNNER_LETTERS


def is_dna_letter(letter: str) -> bool:
    """True for any recognized DNA letter, roadrunner or dietary."""
    return letter in DNA_LETTERS


def is_roadrunner(letter: str) -> bool:
    return letter in ROADRUNNER_LETTERS


def is_dietary(letter: str) -> bool:
    return letter in DIETARY_LETTERS


@dataclass(frozen=True)
class DNA:
    """A single DNA value, e.g. BB or AAA.

    Attributes:
        letter: The DNA letter
        value: How many times the letter occurs (always >= 1)
    """

    letter: str
    value: int

    def is_roadrunner(self) -> bool:
        return is_roadrunner(self.letter)

    def is_dietary(self) -> bool:
        return is_dietary(self.letter)

    def __str__(self) -> str:
        return self.letter * self.value
