"""Shared fixtures for the humangenes test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from humangenes.human.personality import FiveFactor
from humangenes.human.traits import TRAIT_MID
from humangenes.simulation.config import GenerationConfig


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def default_config() -> GenerationConfig:
    """Default generation config (no YAML file needed)."""
    return GenerationConfig()


@pytest.fixture
def neutral_personality() -> FiveFactor:
    """Every dimension at the mid threshold; no rule fires."""
    return FiveFactor(
        openness=TRAIT_MID,
        conscientiousness=TRAIT_MID,
        extraversion=TRAIT_MID,
        agreeableness=TRAIT_MID,
        neuroticism=TRAIT_MID,
    )
