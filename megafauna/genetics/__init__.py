"""Genome model: DNA letters and the multiset genome built from them."""

from megafauna.genetics.dna import DNA, is_dietary, is_dna_letter, is_roadrunner
from megafauna.genetics.genome import EMPTY_GENOME, Genome, make_genome

__all__ = [
    "DNA",
    "EMPTY_GENOME",
    "Genome",
    "is_dietary",
    "is_dna_letter",
    "is_roadrunner",
    "make_genome",
]
