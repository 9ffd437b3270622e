"""Sampling — seeded random genomes for populating a simulation.

All randomness flows through a NumPy ``Generator`` so that a run is
reproducible from its seed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from humangenes.genetics.genes import set_gene
from humangenes.human.appearance import Gender, set_gender
from humangenes.human.layout import GENDER, GENE_LAYOUT

if TYPE_CHECKING:
    from numpy.random import Generator
    from numpy.typing import NDArray

logger = logging.getLogger(__name__)

_GENDERS = (Gender.MALE, Gender.FEMALE)


def random_genome(rng: Generator) -> int:
    """Draw one genome.

    Gender is male or female with equal odds; every other gene is
    uniform over its range.  Reserved bits are left at zero.

    Args:
        rng: Seeded random generator.

    Returns:
        A 64-bit genome word.
    """
    genome = set_gender(0, _GENDERS[int(rng.integers(0, len(_GENDERS)))])
    for gene in GENE_LAYOUT.values():
        if gene is GENDER:
            continue
        genome = set_gene(genome, gene, int(rng.integers(0, gene.max_value + 1)))
    return genome


def random_population(rng: Generator, size: int) -> list[int]:
    """Draw ``size`` independent genomes.

    Args:
        rng: Seeded random generator.
        size: Number of individuals.

    Returns:
        List of genome words.
    """
    genomes = [random_genome(rng) for _ in range(size)]
    logger.debug("Sampled %d genomes", len(genomes))
    return genomes


def as_array(genomes: list[int]) -> NDArray[np.uint64]:
    """Pack genome words into a ``uint64`` array for vectorised reads."""
    return np.array(genomes, dtype=np.uint64)
