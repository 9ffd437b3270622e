"""Traits — discrete behaviour tags derived from the five-factor scores.

Derivation is table-driven: each :class:`TraitRule` pairs a trait with
its opposite and holds one predicate for each.  The positive predicate
is tried first; the opposite predicate is only consulted when it fails,
so a rule sets at most one of its two flags, and sometimes neither.

Two trait masks are compared by counting shared traits against traits
whose opposite the other side has (see :func:`compare`).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntFlag

from humangenes.human.personality import FiveFactor

# Thresholds are fractions of the 4-bit score range.
TRAIT_CEILING = 15
TRAIT_HIGH = TRAIT_CEILING * 2 // 3
TRAIT_MID = TRAIT_CEILING // 2
TRAIT_LOW = TRAIT_CEILING // 3


class Trait(IntFlag):
    """A single behaviour tag; masks combine them with ``|``."""

    DECEPTIVE = 1 << 0
    HONEST = 1 << 1
    AGGRESSIVE = 1 << 2
    CALM = 1 << 3
    COWARDLY = 1 << 4
    BRAVE = 1 << 5
    AMBITIOUS = 1 << 6
    CONTENT = 1 << 7
    CARELESS = 1 << 8
    CAREFUL = 1 << 9
    PARANOID = 1 << 10
    TRUSTING = 1 << 11
    CRUEL = 1 << 12
    KIND = 1 << 13


# Exclusive upper bound on trait bits; not a trait itself.
TRAIT_LIMIT = 1 << 14

OPPOSITES: dict[Trait, Trait] = {
    Trait.DECEPTIVE: Trait.HONEST,
    Trait.HONEST: Trait.DECEPTIVE,
    Trait.AGGRESSIVE: Trait.CALM,
    Trait.CALM: Trait.AGGRESSIVE,
    Trait.COWARDLY: Trait.BRAVE,
    Trait.BRAVE: Trait.COWARDLY,
    Trait.AMBITIOUS: Trait.CONTENT,
    Trait.CONTENT: Trait.AMBITIOUS,
    Trait.CARELESS: Trait.CAREFUL,
    Trait.CAREFUL: Trait.CARELESS,
    Trait.PARANOID: Trait.TRUSTING,
    Trait.TRUSTING: Trait.PARANOID,
    Trait.CRUEL: Trait.KIND,
    Trait.KIND: Trait.CRUEL,
}


def check_opposites(opposites: dict[Trait, Trait]) -> None:
    """Verify that ``opposites`` pairs every trait with a different one.

    Args:
        opposites: Mapping from each trait to its antonym.

    Raises:
        ValueError: If a trait is missing, is its own opposite, or its
            opposite does not map back to it.
    """
    for trait in Trait:
        if trait not in opposites:
            msg = f"trait {trait.name} has no opposite"
            raise ValueError(msg)
        other = opposites[trait]
        if other == trait:
            msg = f"trait {trait.name} is its own opposite"
            raise ValueError(msg)
        if opposites.get(other) != trait:
            msg = f"opposite of {other.name} is not {trait.name}"
            raise ValueError(msg)


check_opposites(OPPOSITES)


@dataclass(frozen=True)
class TraitRule:
    """One trait pair and the conditions under which each side shows.

    Attributes:
        positive: Trait set when ``positive_when`` holds.
        opposite: Trait set when ``positive_when`` fails and
            ``opposite_when`` holds.
        positive_when: Predicate over the personality vector.
        opposite_when: Predicate over the personality vector.
    """

    positive: Trait
    opposite: Trait
    positive_when: Callable[[FiveFactor], bool]
    opposite_when: Callable[[FiveFactor], bool]

    def apply(self, ff: FiveFactor) -> Trait:
        """Return the flag this rule contributes for ``ff`` (maybe none)."""
        if self.positive_when(ff):
            return self.positive
        if self.opposite_when(ff):
            return self.opposite
        return Trait(0)


TRAIT_RULES: tuple[TraitRule, ...] = (
    # Low agreeableness and low conscientiousness lean toward deception.
    TraitRule(
        Trait.DECEPTIVE,
        Trait.HONEST,
        lambda ff: ff.agreeableness < TRAIT_LOW and ff.conscientiousness < TRAIT_LOW,
        lambda ff: ff.agreeableness > TRAIT_HIGH
        and ff.conscientiousness > TRAIT_HIGH,
    ),
    # Hostile and volatile, with an outlet, versus warm and stable.
    TraitRule(
        Trait.AGGRESSIVE,
        Trait.CALM,
        lambda ff: ff.agreeableness < TRAIT_LOW
        and ff.neuroticism > TRAIT_HIGH
        and (ff.extraversion > TRAIT_HIGH or ff.openness > TRAIT_HIGH),
        lambda ff: ff.agreeableness > TRAIT_MID and ff.neuroticism < TRAIT_LOW,
    ),
    # Outgoing and warm versus withdrawn and cold.
    TraitRule(
        Trait.BRAVE,
        Trait.COWARDLY,
        lambda ff: ff.extraversion > TRAIT_HIGH and ff.agreeableness > TRAIT_HIGH,
        lambda ff: (ff.extraversion < TRAIT_LOW or ff.openness < TRAIT_LOW)
        and ff.agreeableness < TRAIT_LOW,
    ),
    # Driven and assertive versus neither.
    TraitRule(
        Trait.AMBITIOUS,
        Trait.CONTENT,
        lambda ff: ff.conscientiousness > TRAIT_HIGH
        and ff.extraversion > TRAIT_HIGH,
        lambda ff: ff.conscientiousness < TRAIT_LOW and ff.extraversion < TRAIT_LOW,
    ),
    # Diligent and anxious versus lax and unworried.
    TraitRule(
        Trait.CAREFUL,
        Trait.CARELESS,
        lambda ff: ff.conscientiousness > TRAIT_HIGH and ff.neuroticism > TRAIT_HIGH,
        lambda ff: ff.conscientiousness < TRAIT_LOW and ff.neuroticism < TRAIT_LOW,
    ),
    TraitRule(
        Trait.PARANOID,
        Trait.TRUSTING,
        lambda ff: ff.neuroticism > TRAIT_HIGH
        and ff.agreeableness < TRAIT_LOW
        and (ff.openness > TRAIT_HIGH or ff.conscientiousness > TRAIT_HIGH),
        lambda ff: ff.neuroticism < TRAIT_LOW
        and ff.agreeableness > TRAIT_HIGH
        and (ff.openness > TRAIT_HIGH or ff.conscientiousness < TRAIT_LOW),
    ),
    # Cold and either volatile or undisciplined, versus warm and engaged.
    TraitRule(
        Trait.CRUEL,
        Trait.KIND,
        lambda ff: ff.agreeableness < TRAIT_LOW
        and (ff.neuroticism > TRAIT_HIGH or ff.conscientiousness < TRAIT_LOW),
        lambda ff: ff.agreeableness > TRAIT_HIGH
        and (ff.conscientiousness > TRAIT_HIGH or ff.extraversion > TRAIT_HIGH),
    ),
)


def derive_traits(ff: FiveFactor) -> Trait:
    """Map a personality vector to its trait mask.

    Rules are independent of one another, so the result does not depend
    on their order.

    Args:
        ff: The five-factor scores, each 0-15.

    Returns:
        Union of the flags contributed by every rule (possibly empty).
    """
    traits = Trait(0)
    for rule in TRAIT_RULES:
        traits |= rule.apply(ff)
    return traits


def has_trait(mask: int, trait: Trait) -> bool:
    """Return True if ``trait`` is set in ``mask``."""
    return mask & trait != 0


def count_common(a: int, b: int) -> int:
    """Number of traits set in both masks."""
    return sum(1 for trait in Trait if has_trait(a, trait) and has_trait(b, trait))


def count_opposites(a: int, b: int) -> int:
    """Number of traits in ``a`` whose opposite is set in ``b``."""
    return sum(
        1
        for trait in Trait
        if has_trait(a, trait) and has_trait(b, OPPOSITES[trait])
    )


def compare(a: int, b: int) -> float:
    """Affinity between two trait masks, from -1.0 to 1.0.

    Shared traits pull the score up, traits facing their opposite pull
    it down, normalised by whichever count is larger.  With neither
    shared nor opposing traits there is no evidence either way and the
    result is ``0.0``.

    Args:
        a: First trait mask.
        b: Second trait mask.

    Returns:
        ``(common - opposites) / max(common, opposites)``.
    """
    common = count_common(a, b)
    opposites = count_opposites(a, b)
    evidence = max(common, opposites)
    if evidence == 0:
        return 0.0
    return (common - opposites) / evidence


def trait_names(mask: int) -> list[str]:
    """Lower-case names of the traits set in ``mask``, in bit order."""
    return [trait.name.lower() for trait in Trait if has_trait(mask, trait)]
