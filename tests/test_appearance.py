"""Tests for humangenes.human.appearance — typed physical accessors."""

import pytest

from humangenes.genetics.genes import get_gene, set_gene
from humangenes.human.appearance import (
    Attrs,
    EyeColor,
    Gender,
    HairColor,
    Stats,
    get_attrs,
    get_eye_color,
    get_gender,
    get_hair_color,
    get_stats,
    set_attrs,
    set_eye_color,
    set_gender,
    set_hair_color,
    set_stats,
)
from humangenes.human.layout import GENDER, GENE_LAYOUT, HAIR_COLOR, HEIGHT


class TestGender:
    """Tests for the gender gene."""

    @pytest.mark.parametrize("gender", [Gender.MALE, Gender.FEMALE])
    def test_round_trip(self, gender: Gender) -> None:
        assert get_gender(set_gender(0, gender)) is gender

    def test_raw_encoding(self) -> None:
        assert get_gene(set_gender(0, Gender.MALE), GENDER) == 0b01
        assert get_gene(set_gender(0, Gender.FEMALE), GENDER) == 0b11

    @pytest.mark.parametrize("raw", [0b00, 0b10])
    def test_unassigned_raw_decodes_unknown(self, raw: int) -> None:
        assert get_gender(set_gene(0, GENDER, raw)) is Gender.UNKNOWN


class TestEyeColor:
    """Tests for the eye color gene."""

    @pytest.mark.parametrize("color", list(EyeColor))
    def test_round_trip(self, color: EyeColor) -> None:
        assert get_eye_color(set_eye_color(0, color)) is color


class TestHairColor:
    """Tests for the hair color gene and its curl bit."""

    @pytest.mark.parametrize("color", list(HairColor))
    def test_straight_round_trip(self, color: HairColor) -> None:
        assert get_hair_color(set_hair_color(0, color)) == (color, False)

    def test_getter_splits_curl_bit(self) -> None:
        genome = set_gene(0, HAIR_COLOR, 0b110)
        assert get_hair_color(genome) == (HairColor.BROWN, True)

    @pytest.mark.parametrize("color", list(HairColor))
    def test_curly_setter_ands_with_curl_mask(self, color: HairColor) -> None:
        """Curly writes AND the base color with the curl bit, storing zero."""
        genome = set_hair_color(0, color, curls=True)
        assert get_gene(genome, HAIR_COLOR) == 0
        assert get_hair_color(genome) == (HairColor.BLONDE, False)

    def test_curly_setter_clears_previous_value(self) -> None:
        genome = set_gene(0, HAIR_COLOR, 0b111)
        genome = set_hair_color(genome, HairColor.BLACK, curls=True)
        assert get_gene(genome, HAIR_COLOR) == 0


class TestAttrsAndStats:
    """Tests for grouped numeric genes."""

    def test_attrs_round_trip(self) -> None:
        attrs = Attrs(complexion=11, height=6, mass=2, growth=7)
        assert get_attrs(set_attrs(0, attrs)) == attrs

    def test_stats_round_trip(self) -> None:
        stats = Stats(strength=15, intelligence=0, dexterity=8, resilience=3)
        assert get_stats(set_stats(0, stats)) == stats

    def test_attrs_truncate(self) -> None:
        genome = set_attrs(0, Attrs(complexion=17, height=9, mass=8, growth=15))
        assert get_attrs(genome) == Attrs(complexion=1, height=1, mass=0, growth=7)

    def test_str(self) -> None:
        attrs = Attrs(complexion=1, height=2, mass=3, growth=4)
        assert str(attrs) == "CMPLX: 1, HEIGH: 2, MASS: 3, GROW: 4"
        stats = Stats(strength=1, intelligence=2, dexterity=3, resilience=4)
        assert str(stats) == "Str: 1, Int: 2, Dex: 3, Res: 4"


class TestPackedScenario:
    """Several typed writes into one word without cross-talk."""

    def test_female_brown_eyes_height_five(self) -> None:
        genome = set_gender(0, Gender.FEMALE)
        genome = set_eye_color(genome, EyeColor.BROWN)
        genome = set_gene(genome, HEIGHT, 5)

        assert get_gender(genome) is Gender.FEMALE
        assert get_eye_color(genome) is EyeColor.BROWN
        assert get_gene(genome, HEIGHT) == 5
        untouched = {"gender", "eye_color", "height"}
        for name, gene in GENE_LAYOUT.items():
            if name not in untouched:
                assert get_gene(genome, gene) == 0, name
