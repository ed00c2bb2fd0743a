"""Shared test fixtures for world generation tests."""

from typing import Callable

import numpy as np
import pytest

from worldgen.catalog import ItemRegistry, load_biomes, load_items
from worldgen.config import GenerationSettings, WorldProfile
from worldgen.context import GenerationContext
from worldgen.state import ChunkAttributes
from worldgen.terrain.config import AttributeRanges, BiomeDefinition, BiomeTable
from worldgen.terrain_types import SoilType, Terrain
from worldgen.types import ValueRange


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def biomes() -> BiomeTable:
    """Packaged biome table."""
    return load_biomes()


@pytest.fixture
def items() -> ItemRegistry:
    """Packaged item registry."""
    return load_items()


@pytest.fixture
def profile() -> WorldProfile:
    """Neutral world profile."""
    return WorldProfile()


@pytest.fixture
def settings() -> GenerationSettings:
    """Default balance settings."""
    return GenerationSettings()


@pytest.fixture
def ctx() -> GenerationContext:
    """Context over the packaged tables with a fixed seed."""
    return GenerationContext.default(seed=42)


@pytest.fixture
def make_attributes() -> Callable[..., ChunkAttributes]:
    """Factory for chunk attributes; neutral mid-range values unless overridden."""

    def _make(**overrides) -> ChunkAttributes:
        values = dict(
            terrain=Terrain.FOREST,
            vegetation_density=50,
            moisture=50,
            elevation=20,
            danger_level=50,
            magic_affinity=50,
            human_presence=50,
            predator_presence=50,
            temperature=50,
            explorability=50,
            soil_type=SoilType.LOAMY,
            travel_cost=4,
            light_level=20,
            wind_level=50,
        )
        values.update(overrides)
        return ChunkAttributes(**values)

    return _make


@pytest.fixture
def make_biome() -> Callable[..., BiomeDefinition]:
    """Factory for biome definitions with a single fixed value per attribute."""

    def _make(
        allowed_neighbors: list[Terrain] | None = None,
        spread_weight: float = 1.0,
        min_size: int = 5,
        max_size: int = 5,
        value: int = 50,
        soil_types: list[SoilType] | None = None,
        travel_cost: int = 2,
    ) -> BiomeDefinition:
        fixed = ValueRange(min=value, max=value)
        return BiomeDefinition(
            min_size=min_size,
            max_size=max_size,
            travel_cost=travel_cost,
            spread_weight=spread_weight,
            allowed_neighbors=allowed_neighbors or [],
            value_ranges=AttributeRanges(
                vegetation_density=fixed,
                moisture=fixed,
                elevation=fixed,
                danger_level=fixed,
                magic_affinity=fixed,
                human_presence=fixed,
                predator_presence=fixed,
                temperature=fixed,
            ),
            soil_types=soil_types or [SoilType.LOAMY],
        )

    return _make
