"""Per-chunk environmental attributes from biome ranges, season and profile."""

import numpy as np
from pydantic import BaseModel

from ..config import WorldProfile
from ..sampling import pick
from ..state import ChunkAttributes
from ..terrain_types import SoilType, Terrain
from ..types import ValueRange
from .config import BiomeDefinition, SeasonModifiers

# Bounds of derived attributes
ATTRIBUTE_MIN = 0.0
ATTRIBUTE_MAX = 100.0
LIGHT_MIN = -100.0
LIGHT_MAX = 100.0

WIND_BASE_RANGE = ValueRange(min=20, max=80)
UNDERGROUND_LIGHT_RANGE = ValueRange(min=-80, max=-50)
LIGHT_JITTER_RANGE = ValueRange(min=-10, max=10)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class BaseAttributes(BaseModel, frozen=True):
    """Attributes drawn straight from a biome's ranges."""

    vegetation_density: int
    moisture: int
    elevation: int
    danger_level: int
    magic_affinity: int
    human_presence: int
    predator_presence: int
    temperature: int


def roll_base_attributes(biome: BiomeDefinition, rng: np.random.Generator) -> BaseAttributes:
    """Draw every base attribute uniformly from the biome's inclusive ranges."""
    ranges = biome.value_ranges
    return BaseAttributes(
        vegetation_density=ranges.vegetation_density.roll(rng),
        moisture=ranges.moisture.roll(rng),
        elevation=ranges.elevation.roll(rng),
        danger_level=ranges.danger_level.roll(rng),
        magic_affinity=ranges.magic_affinity.roll(rng),
        human_presence=ranges.human_presence.roll(rng),
        predator_presence=ranges.predator_presence.roll(rng),
        temperature=ranges.temperature.roll(rng),
    )


def derive_dependent_attributes(
    terrain: Terrain,
    base: BaseAttributes,
    biome: BiomeDefinition,
    season: SeasonModifiers,
    profile: WorldProfile,
    rng: np.random.Generator,
    scale: float = 10.0,
) -> ChunkAttributes:
    """Combine base attributes with season and profile modifiers.

    Args:
        terrain: Terrain of the chunk.
        base: Attributes rolled from the biome ranges.
        biome: Biome definition (soil list, travel cost).
        season: Modifiers of the current season.
        profile: World profile (biases, sun intensity).
        rng: Random number generator.
        scale: Factor applied to season modifiers and sun intensity.

    Returns:
        Complete, clamped chunk attributes.
    """
    temperature = clamp(
        base.temperature + season.temperature_mod * scale + profile.temp_bias,
        ATTRIBUTE_MIN,
        ATTRIBUTE_MAX,
    )
    moisture = clamp(
        base.moisture + season.moisture_mod * scale + profile.moisture_bias,
        ATTRIBUTE_MIN,
        ATTRIBUTE_MAX,
    )
    wind_level = clamp(
        WIND_BASE_RANGE.roll(rng) + season.wind_mod * scale,
        ATTRIBUTE_MIN,
        ATTRIBUTE_MAX,
    )

    if terrain.is_underground:
        light_level = float(UNDERGROUND_LIGHT_RANGE.roll(rng))
    else:
        light_level = (
            profile.sun_intensity * scale
            + season.sun_exposure_mod * scale
            - base.vegetation_density
            + LIGHT_JITTER_RANGE.roll(rng)
        )
    light_level = clamp(light_level, LIGHT_MIN, LIGHT_MAX)

    explorability = clamp(
        100 - base.vegetation_density / 2 - base.danger_level / 2,
        ATTRIBUTE_MIN,
        ATTRIBUTE_MAX,
    )
    soil_type: SoilType = pick(rng, biome.soil_types)

    return ChunkAttributes(
        terrain=terrain,
        vegetation_density=base.vegetation_density,
        moisture=moisture,
        elevation=base.elevation,
        danger_level=base.danger_level,
        magic_affinity=base.magic_affinity,
        human_presence=base.human_presence,
        predator_presence=base.predator_presence,
        temperature=temperature,
        explorability=explorability,
        soil_type=soil_type,
        travel_cost=biome.travel_cost,
        light_level=light_level,
        wind_level=wind_level,
    )


def derive_chunk_attributes(
    terrain: Terrain,
    biome: BiomeDefinition,
    season: SeasonModifiers,
    profile: WorldProfile,
    rng: np.random.Generator,
    scale: float = 10.0,
) -> ChunkAttributes:
    """Roll base attributes for terrain and derive the rest."""
    base = roll_base_attributes(biome, rng)
    return derive_dependent_attributes(terrain, base, biome, season, profile, rng, scale)
