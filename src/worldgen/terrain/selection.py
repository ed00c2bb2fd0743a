"""Weighted terrain selection for new regions."""

from typing import Sequence

import numpy as np
import structlog

from ..sampling import weighted_choice
from ..terrain_types import Terrain
from .config import BiomeTable

logger = structlog.get_logger()

__all__ = ["select_terrain", "weighted_choice"]


def select_terrain(
    candidates: Sequence[Terrain],
    biomes: BiomeTable,
    rng: np.random.Generator,
    fallback: Terrain = Terrain.FOREST,
) -> Terrain:
    """Draw a terrain weighted by each biome's spread weight.

    Args:
        candidates: Terrains allowed at the position.
        biomes: Biome table supplying spread weights.
        rng: Random number generator.
        fallback: Returned when no candidate is usable.

    Returns:
        The selected terrain.
    """
    options = [(t, biomes[t].spread_weight) for t in candidates if t in biomes]
    if not options or sum(weight for _, weight in options) <= 0:
        logger.warning(
            "terrain_candidates_empty",
            candidates=[t.value for t in candidates],
            fallback=fallback.value,
        )
        return fallback
    return weighted_choice(rng, options)
