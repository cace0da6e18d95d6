"""Helpers for using vectors as discrete probability distributions."""

from typing import Iterable

import logging
import random
import warnings

from vectorspace.vector import Vector

logger = logging.getLogger("vectorspace.probability")


def uniform[T](items: Iterable[T], warn_duplicates: bool = True) -> Vector[T]:
    """Create a probability vector in which each of the N items has probability 1/N.

    Items that are equal to each other share a single basis element, and only the last
    assignment is kept: two equal items end up with 1/N together, not 2/N.
    A warning is given when this happens, unless warn_duplicates is False.

    Args:
        items: A finite number of basis elements.
        warn_duplicates: Whether to warn if equal items caused probability mass to be lost.
    """
    items = list(items)
    if len(items) == 0:
        raise ValueError("Cannot create a uniform distribution over zero items")

    probability = 1.0 / len(items)
    result: Vector[T] = Vector()
    for item in items:
        result[item] = probability

    if len(result) < len(items):
        logger.debug(
            "uniform() got %d items but only %d distinct ones", len(items), len(result)
        )
        if warn_duplicates:
            warnings.warn(
                f"uniform() got {len(items) - len(result)} duplicate item(s); "
                "their probability mass is overwritten, not accumulated."
            )
    return result


def without[T](source: Iterable[T], *excluded: T) -> list[T]:
    """Returns the items of source that do not occur in excluded, in their original order."""
    return [item for item in source if item not in excluded]


def probability_of[T](distribution: Vector[T], outcome: T = True) -> float:
    """Returns the probability of a single outcome. Defaults to the probability of True."""
    return distribution[outcome]


def is_stochastic(distribution: Vector, precision: float = 1e-6) -> bool:
    """Returns whether this vector is a probability distribution,
    i.e., it has no negative weights and its weights sum to 1."""
    if any(component.scalar < 0 for component in distribution):
        return False
    return abs(distribution.norm(1) - 1) < precision


def sample[T](distribution: Vector[T], seed: int | None = None) -> T:
    """Draw a single basis element, with a chance proportional to its weight.
    Negative and zero weights are never drawn.

    Args:
        distribution: The vector to sample from.
        seed: The seed for the random number generator. Random seed if not provided.
    """
    candidates: list[T] = []
    weights: list[float] = []
    for scalar, element in distribution:
        if scalar > 0:
            candidates.append(element)
            weights.append(scalar)
    if len(candidates) == 0:
        raise ValueError("Cannot sample from a vector without positive weights")

    if seed is not None:
        rng = random.Random(seed)
        return rng.choices(candidates, k=1, weights=weights)[0]
    else:
        return random.choices(candidates, k=1, weights=weights)[0]
