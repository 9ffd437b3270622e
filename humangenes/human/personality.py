"""Personality — the five-factor reading stored in the genome.

Each dimension is a 4-bit score (0-15).  The vector is never stored on
its own; it is read from the genome whenever traits are derived.
"""

from __future__ import annotations

from dataclasses import dataclass

from humangenes.genetics.genes import get_gene, set_gene
from humangenes.human.layout import (
    AGREEABLENESS,
    CONSCIENTIOUSNESS,
    EXTRAVERSION,
    NEUROTICISM,
    OPENNESS,
)


@dataclass(frozen=True)
class FiveFactor:
    """Simplified five-factor personality.

    Attributes:
        openness: Openness to experience.
        conscientiousness: Diligence and self-discipline.
        extraversion: Sociability and assertiveness.
        agreeableness: Warmth and cooperativeness.
        neuroticism: Tendency toward negative emotion.
    """

    openness: int = 0
    conscientiousness: int = 0
    extraversion: int = 0
    agreeableness: int = 0
    neuroticism: int = 0

    def __str__(self) -> str:
        return (
            f"O: {self.openness}, C: {self.conscientiousness}, "
            f"E: {self.extraversion}, A: {self.agreeableness}, "
            f"N: {self.neuroticism}"
        )


def get_five_factor(genome: int) -> FiveFactor:
    """Read the personality vector from ``genome``."""
    return FiveFactor(
        openness=get_gene(genome, OPENNESS),
        conscientiousness=get_gene(genome, CONSCIENTIOUSNESS),
        extraversion=get_gene(genome, EXTRAVERSION),
        agreeableness=get_gene(genome, AGREEABLENESS),
        neuroticism=get_gene(genome, NEUROTICISM),
    )


def set_five_factor(genome: int, ff: FiveFactor) -> int:
    """Return ``genome`` with all five personality genes replaced.

    Scores outside 0-15 are truncated to their low four bits.
    """
    genome = set_gene(genome, OPENNESS, ff.openness)
    genome = set_gene(genome, CONSCIENTIOUSNESS, ff.conscientiousness)
    genome = set_gene(genome, EXTRAVERSION, ff.extraversion)
    genome = set_gene(genome, AGREEABLENESS, ff.agreeableness)
    return set_gene(genome, NEUROTICISM, ff.neuroticism)
