"""Affinity — pairwise trait compatibility across a population."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from humangenes.human.traits import compare


def affinity_matrix(masks: Sequence[int]) -> NDArray[np.float64]:
    """Compare every pair of trait masks.

    ``compare`` is symmetric, so only the upper triangle is computed and
    mirrored.

    Args:
        masks: One trait mask per individual.

    Returns:
        ``n x n`` array where ``[i, j]`` is ``compare(masks[i], masks[j])``.
    """
    n = len(masks)
    matrix = np.zeros((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(i, n):
            score = compare(masks[i], masks[j])
            matrix[i, j] = score
            matrix[j, i] = score
    return matrix


def best_match(matrix: NDArray[np.float64], index: int) -> int | None:
    """Return the individual most compatible with ``index``.

    Ties go to the lowest index.

    Args:
        matrix: Output of :func:`affinity_matrix`.
        index: Row to search.

    Returns:
        Index of the best partner, or ``None`` when there is nobody else.
    """
    if matrix.shape[0] < 2:
        return None
    row = matrix[index].copy()
    row[index] = -np.inf
    return int(np.argmax(row))
