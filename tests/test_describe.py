"""Tests for humangenes.human.describe — readable genome summaries."""

from humangenes.genetics.genes import set_gene
from humangenes.human.appearance import (
    EyeColor,
    Gender,
    HairColor,
    set_eye_color,
    set_gender,
    set_hair_color,
)
from humangenes.human.describe import describe, describe_hair, describe_traits
from humangenes.human.layout import HAIR_COLOR
from humangenes.human.personality import FiveFactor, set_five_factor
from humangenes.human.traits import Trait


class TestDescribe:
    """Tests for one-line summaries."""

    def test_hair(self) -> None:
        assert describe_hair(set_hair_color(0, HairColor.BLACK)) == "black"
        assert describe_hair(set_gene(0, HAIR_COLOR, 0b101)) == "curly red"

    def test_traits(self) -> None:
        assert describe_traits(Trait.BRAVE | Trait.KIND) == "brave, kind"
        assert describe_traits(0) == "none"

    def test_full_line(self) -> None:
        genome = set_gender(0, Gender.FEMALE)
        genome = set_eye_color(genome, EyeColor.GREEN)
        genome = set_five_factor(genome, FiveFactor(7, 12, 12, 7, 7))
        line = describe(genome)
        assert line.startswith("gender: female, eyes: green, hair: blonde")
        assert "five factor: O: 7, C: 12, E: 12, A: 7, N: 7" in line
        assert line.endswith("traits: ambitious")

    def test_unknown_gender(self) -> None:
        assert describe(0).startswith("gender: unknown")
