"""Describe — one-line human-readable summaries of a genome."""

from __future__ import annotations

from humangenes.human.appearance import (
    get_attrs,
    get_eye_color,
    get_gender,
    get_hair_color,
    get_stats,
)
from humangenes.human.personality import get_five_factor
from humangenes.human.traits import derive_traits, trait_names


def describe_hair(genome: int) -> str:
    """Return e.g. ``"curly black"`` or ``"blonde"``."""
    color, curly = get_hair_color(genome)
    name = color.name.lower()
    return f"curly {name}" if curly else name


def describe_traits(mask: int) -> str:
    """Comma-separated trait names, or ``"none"`` for an empty mask."""
    return ", ".join(trait_names(mask)) or "none"


def describe(genome: int) -> str:
    """Summarise every gene in ``genome`` plus its derived traits.

    Args:
        genome: The genome word.

    Returns:
        A single line suitable for logs and console output.
    """
    ff = get_five_factor(genome)
    parts = [
        f"gender: {get_gender(genome).name.lower()}",
        f"eyes: {get_eye_color(genome).name.lower()}",
        f"hair: {describe_hair(genome)}",
        f"attrs: {get_attrs(genome)}",
        f"stats: {get_stats(genome)}",
        f"five factor: {ff}",
        f"traits: {describe_traits(derive_traits(ff))}",
    ]
    return ", ".join(parts)
