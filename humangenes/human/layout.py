"""Layout — where each human attribute lives in the genome word.

Fields are packed from the most-significant bit downward::

    63..62 gender        61..60 eye color     59..57 hair color
    56..53 complexion    52..50 height        49..47 mass
    46..44 growth        43..40 strength      39..36 intelligence
    35..32 dexterity     31..28 resilience    27..24 openness
    23..20 conscientiousness                  19..16 extraversion
    15..12 agreeableness 11..8  neuroticism   7..0   reserved

The layout is data: accessors look fields up here instead of carrying
their own offsets, and :func:`check_layout` verifies it on import.
"""

from __future__ import annotations

from humangenes.genetics.genes import GENOME_BITS, GeneField

GENDER = GeneField("gender", width=2, offset=62)
EYE_COLOR = GeneField("eye_color", width=2, offset=60)
HAIR_COLOR = GeneField("hair_color", width=3, offset=57)
COMPLEXION = GeneField("complexion", width=4, offset=53)
HEIGHT = GeneField("height", width=3, offset=50)
MASS = GeneField("mass", width=3, offset=47)
GROWTH = GeneField("growth", width=3, offset=44)
STRENGTH = GeneField("strength", width=4, offset=40)
INTELLIGENCE = GeneField("intelligence", width=4, offset=36)
DEXTERITY = GeneField("dexterity", width=4, offset=32)
RESILIENCE = GeneField("resilience", width=4, offset=28)
OPENNESS = GeneField("openness", width=4, offset=24)
CONSCIENTIOUSNESS = GeneField("conscientiousness", width=4, offset=20)
EXTRAVERSION = GeneField("extraversion", width=4, offset=16)
AGREEABLENESS = GeneField("agreeableness", width=4, offset=12)
NEUROTICISM = GeneField("neuroticism", width=4, offset=8)

RESERVED_BITS = 8

GENE_LAYOUT: dict[str, GeneField] = {
    gene.name: gene
    for gene in (
        GENDER,
        EYE_COLOR,
        HAIR_COLOR,
        COMPLEXION,
        HEIGHT,
        MASS,
        GROWTH,
        STRENGTH,
        INTELLIGENCE,
        DEXTERITY,
        RESILIENCE,
        OPENNESS,
        CONSCIENTIOUSNESS,
        EXTRAVERSION,
        AGREEABLENESS,
        NEUROTICISM,
    )
}


def check_layout(layout: dict[str, GeneField]) -> None:
    """Verify that fields fit the word and do not overlap.

    Args:
        layout: Mapping from field name to descriptor.

    Raises:
        ValueError: If a field falls outside the word or two fields
            share a bit.
    """
    owner: dict[int, str] = {}
    for name, gene in layout.items():
        if gene.width < 1 or gene.offset < 0 or gene.offset + gene.width > GENOME_BITS:
            msg = f"gene {name!r} ({gene.width} bits at {gene.offset}) outside genome"
            raise ValueError(msg)
        for bit in gene.bits:
            if bit in owner:
                msg = f"gene {name!r} overlaps {owner[bit]!r} at bit {bit}"
                raise ValueError(msg)
            owner[bit] = name


check_layout(GENE_LAYOUT)
