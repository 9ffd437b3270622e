"""Appearance — typed accessors for the physical part of the genome.

Enum-valued genes (gender, eye color, hair color) are converted to and
from their raw integers only here.  Raw values that match no member
decode to an explicit ``UNKNOWN`` rather than an arbitrary color or sex.
Numeric genes are grouped into :class:`Attrs` and :class:`Stats`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from humangenes.genetics.genes import get_gene, set_gene
from humangenes.human.layout import (
    COMPLEXION,
    DEXTERITY,
    EYE_COLOR,
    GENDER,
    GROWTH,
    HAIR_COLOR,
    HEIGHT,
    INTELLIGENCE,
    MASS,
    RESILIENCE,
    STRENGTH,
)

CURL_MASK = 0b100
_HAIR_BASE_MASK = CURL_MASK - 1


class Gender(IntEnum):
    """Genetic sex.  Raw ``0b00`` and ``0b10`` have no meaning."""

    UNKNOWN = 0b00
    MALE = 0b01
    FEMALE = 0b11

    @classmethod
    def _missing_(cls, value: object) -> Gender:
        return cls.UNKNOWN


class EyeColor(IntEnum):
    """Eye color, one per raw 2-bit value."""

    RED = 0
    BLUE = 1
    GREEN = 2
    BROWN = 3


class HairColor(IntEnum):
    """Base hair color stored in the low two bits of the hair gene."""

    BLONDE = 0
    RED = 1
    BROWN = 2
    BLACK = 3


def get_gender(genome: int) -> Gender:
    """Return the gender encoded in ``genome``."""
    return Gender(get_gene(genome, GENDER))


def set_gender(genome: int, gender: Gender) -> int:
    """Return ``genome`` with its gender replaced."""
    return set_gene(genome, GENDER, int(gender))


def get_eye_color(genome: int) -> EyeColor:
    """Return the eye color encoded in ``genome``."""
    return EyeColor(get_gene(genome, EYE_COLOR))


def set_eye_color(genome: int, color: EyeColor) -> int:
    """Return ``genome`` with its eye color replaced."""
    return set_gene(genome, EYE_COLOR, int(color))


def get_hair_color(genome: int) -> tuple[HairColor, bool]:
    """Split the hair gene into its base color and curl flag.

    Args:
        genome: The genome word.

    Returns:
        ``(base_color, curly)``.
    """
    raw = get_gene(genome, HAIR_COLOR)
    return HairColor(raw & _HAIR_BASE_MASK), raw & CURL_MASK != 0


def set_hair_color(genome: int, color: HairColor, *, curls: bool = False) -> int:
    """Return ``genome`` with its hair gene replaced.

    With ``curls`` set, the base color is ANDed with :data:`CURL_MASK`
    before storing.  For every base color this yields ``0`` (blonde,
    straight); the behaviour is kept as-is until the intended encoding
    of curly hair is confirmed.

    Args:
        genome: The genome word.
        color: Base hair color.
        curls: Whether the hair is curly.

    Returns:
        The updated genome word.
    """
    raw = int(color)
    if curls:
        raw &= CURL_MASK
    return set_gene(genome, HAIR_COLOR, raw)


@dataclass(frozen=True)
class Attrs:
    """Physical build.

    Attributes:
        complexion: Skin tone, 0-15.
        height: 0-7.
        mass: 0-7.
        growth: Growth rate, 0-7.
    """

    complexion: int
    height: int
    mass: int
    growth: int

    def __str__(self) -> str:
        return (
            f"CMPLX: {self.complexion}, HEIGH: {self.height}, "
            f"MASS: {self.mass}, GROW: {self.growth}"
        )


@dataclass(frozen=True)
class Stats:
    """Capability scores, each 0-15."""

    strength: int
    intelligence: int
    dexterity: int
    resilience: int

    def __str__(self) -> str:
        return (
            f"Str: {self.strength}, Int: {self.intelligence}, "
            f"Dex: {self.dexterity}, Res: {self.resilience}"
        )


def get_attrs(genome: int) -> Attrs:
    """Read complexion, height, mass and growth from ``genome``."""
    return Attrs(
        complexion=get_gene(genome, COMPLEXION),
        height=get_gene(genome, HEIGHT),
        mass=get_gene(genome, MASS),
        growth=get_gene(genome, GROWTH),
    )


def set_attrs(genome: int, attrs: Attrs) -> int:
    """Return ``genome`` with all four physical attributes replaced."""
    genome = set_gene(genome, COMPLEXION, attrs.complexion)
    genome = set_gene(genome, HEIGHT, attrs.height)
    genome = set_gene(genome, MASS, attrs.mass)
    return set_gene(genome, GROWTH, attrs.growth)


def get_stats(genome: int) -> Stats:
    """Read strength, intelligence, dexterity and resilience."""
    return Stats(
        strength=get_gene(genome, STRENGTH),
        intelligence=get_gene(genome, INTELLIGENCE),
        dexterity=get_gene(genome, DEXTERITY),
        resilience=get_gene(genome, RESILIENCE),
    )


def set_stats(genome: int, stats: Stats) -> int:
    """Return ``genome`` with all four stats replaced."""
    genome = set_gene(genome, STRENGTH, stats.strength)
    genome = set_gene(genome, INTELLIGENCE, stats.intelligence)
    genome = set_gene(genome, DEXTERITY, stats.dexterity)
    return set_gene(genome, RESILIENCE, stats.resilience)
