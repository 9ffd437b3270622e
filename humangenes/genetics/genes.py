"""Genes — fixed-width fields packed into a single 64-bit genome word.

A genome is a plain ``int`` treated as an immutable value.  Reading a
field shifts and masks; writing a field returns a *new* word with only
that field's bits replaced.  Values wider than a field are truncated to
their low-order bits rather than rejected, matching raw bit-field
semantics.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

GENOME_BITS = 64
GENOME_MASK = (1 << GENOME_BITS) - 1


@dataclass(frozen=True)
class GeneField:
    """Location of one logical attribute inside the genome word.

    Attributes:
        name: Attribute name, used for lookups and error messages.
        width: Number of bits the attribute occupies.
        offset: Position of the field's least-significant bit.
    """

    name: str
    width: int
    offset: int

    @property
    def mask(self) -> int:
        """Bit mask for values of this field, before shifting."""
        return (1 << self.width) - 1

    @property
    def max_value(self) -> int:
        """Largest value the field can hold."""
        return self.mask

    @property
    def bits(self) -> range:
        """Bit positions covered by this field."""
        return range(self.offset, self.offset + self.width)


def get_gene(genome: int, gene: GeneField) -> int:
    """Extract a field's raw value from a genome.

    Args:
        genome: The 64-bit genome word.
        gene: Which field to read.

    Returns:
        An integer in ``[0, 2**width - 1]``.
    """
    return (genome >> gene.offset) & gene.mask


def set_gene(genome: int, gene: GeneField, value: int) -> int:
    """Return a copy of ``genome`` with one field replaced.

    Only the low ``gene.width`` bits of ``value`` are stored; all other
    fields are left untouched.

    Args:
        genome: The 64-bit genome word.
        gene: Which field to write.
        value: New raw value (truncated to the field width).

    Returns:
        The updated genome word.
    """
    cleared = genome & ~(gene.mask << gene.offset)
    return (cleared | ((value & gene.mask) << gene.offset)) & GENOME_MASK


def gene_values(genomes: NDArray[np.uint64], gene: GeneField) -> NDArray[np.uint64]:
    """Vectorised :func:`get_gene` over an array of genomes.

    Args:
        genomes: Array of genome words.
        gene: Which field to read.

    Returns:
        Array of raw field values with the same shape as ``genomes``.
    """
    words = np.asarray(genomes, dtype=np.uint64)
    return (words >> np.uint64(gene.offset)) & np.uint64(gene.mask)
