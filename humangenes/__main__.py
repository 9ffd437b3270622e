"""Entry point for ``python -m humangenes``.

Loads the default YAML config, samples a population of genomes, and
prints each individual with their derived traits and best match.
"""

from __future__ import annotations

import argparse
import logging
import pathlib
from dataclasses import replace

import numpy as np

from humangenes.genetics.genes import gene_values
from humangenes.human.appearance import Gender
from humangenes.human.describe import describe
from humangenes.human.layout import GENDER
from humangenes.human.personality import get_five_factor
from humangenes.human.traits import derive_traits
from humangenes.population.affinity import affinity_matrix, best_match
from humangenes.population.sampling import as_array, random_population
from humangenes.simulation.config import GenerationConfig

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def _load_config(args: argparse.Namespace) -> GenerationConfig:
    if args.config == _DEFAULT_CONFIG and not _DEFAULT_CONFIG.exists():
        logger.debug("No default config at %s, using built-in defaults", args.config)
        config = GenerationConfig()
    else:
        config = GenerationConfig.from_yaml(args.config)
    if args.seed is not None:
        config = replace(config, seed=args.seed)
    if args.population is not None:
        config = replace(config, population=args.population)
    return config


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, generate a population, print it."""
    parser = argparse.ArgumentParser(
        prog="humangenes",
        description="humangenes - packed human genomes and personality traits",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "-n",
        "--population",
        type=int,
        default=None,
        help="Number of individuals (overrides config)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="RNG seed (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = _load_config(args)
    logger.info(
        "Generating %d individuals with seed %d",
        config.population,
        config.seed,
    )

    rng = np.random.default_rng(config.seed)
    genomes = random_population(rng, config.population)
    masks = [derive_traits(get_five_factor(g)) for g in genomes]

    for i, genome in enumerate(genomes):
        print(f"[{i}] {genome:#018x} {describe(genome)}")

    genders = gene_values(as_array(genomes), GENDER)
    logger.info(
        "Gender split: %d male, %d female",
        int(np.count_nonzero(genders == int(Gender.MALE))),
        int(np.count_nonzero(genders == int(Gender.FEMALE))),
    )

    if config.show_affinity:
        matrix = affinity_matrix(masks)
        for i in range(len(genomes)):
            match = best_match(matrix, i)
            if match is None:
                continue
            print(f"[{i}] best match: [{match}] affinity {matrix[i, match]:+.2f}")


if __name__ == "__main__":
    main()
