"""Random sampling helpers shared by the generation stages.

All randomness flows through an explicit ``numpy.random.Generator`` so that a
seeded generator reproduces a world exactly.
"""

from typing import Sequence, TypeVar

import numpy as np
import structlog

logger = structlog.get_logger()

T = TypeVar("T")

# Keeps the draw strictly below the total when float rounding lands on it
_OVERRUN_EPSILON = 1e-4


def weighted_choice(rng: np.random.Generator, options: Sequence[tuple[T, float]]) -> T:
    """Draw one option with probability proportional to its weight.

    Draws r uniformly in [0, total) and subtracts each weight in order until
    the remainder is <= 0.

    Args:
        rng: Random number generator.
        options: (option, weight) pairs. Weights must be non-negative.

    Returns:
        The chosen option.

    Raises:
        ValueError: If options is empty.
    """
    if not options:
        raise ValueError("weighted_choice needs at least one option")

    total = sum(weight for _, weight in options)
    r = rng.random() * total
    if r >= total:
        r = total - _OVERRUN_EPSILON

    for option, weight in options:
        r -= weight
        if r <= 0:
            return option

    logger.warning("weighted_choice_fell_through", option_count=len(options))
    return options[0][0]


def pick(rng: np.random.Generator, options: Sequence[T]) -> T:
    """Uniformly pick one element of a non-empty sequence."""
    return options[int(rng.integers(len(options)))]


def shuffled(rng: np.random.Generator, items: Sequence[T]) -> list[T]:
    """Return a shuffled copy of items."""
    return [items[i] for i in rng.permutation(len(items))]
