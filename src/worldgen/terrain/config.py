"""Biome and season table models."""

from pydantic import BaseModel, Field

from ..exceptions import UnknownBiomeError
from ..terrain_types import SoilType, Terrain
from ..types import Season, ValueRange


class AttributeRanges(BaseModel):
    """Typical shape of a biome: ranges the base chunk attributes are drawn from."""

    vegetation_density: ValueRange
    moisture: ValueRange
    elevation: ValueRange
    danger_level: ValueRange
    magic_affinity: ValueRange
    human_presence: ValueRange
    predator_presence: ValueRange
    temperature: ValueRange


class BiomeDefinition(BaseModel):
    """Generation parameters for one terrain."""

    min_size: int = Field(default=10, ge=1, description="Minimum region size in chunks")
    max_size: int = Field(default=20, ge=1, description="Maximum region size in chunks")
    travel_cost: int = Field(default=1, description="Stamina cost to cross a chunk")
    spread_weight: float = Field(
        default=0.5, ge=0, description="Selection weight when a new region starts"
    )
    allowed_neighbors: list[Terrain] = Field(
        default_factory=list, description="Terrains that may border this one"
    )
    value_ranges: AttributeRanges
    soil_types: list[SoilType] = Field(
        default_factory=lambda: [SoilType.LOAMY], min_length=1
    )

    @property
    def size_range(self) -> ValueRange:
        return ValueRange(min=self.min_size, max=max(self.min_size, self.max_size))


class SeasonModifiers(BaseModel):
    """Seasonal deltas, in tenths of an attribute point (scaled by 10 when applied)."""

    temperature_mod: float = 0.0
    moisture_mod: float = 0.0
    sun_exposure_mod: float = 0.0
    wind_mod: float = 0.0
    event_chance: float = 0.0


BiomeTable = dict[Terrain, BiomeDefinition]
SeasonTable = dict[Season, SeasonModifiers]


def get_biome(biomes: BiomeTable, terrain: Terrain) -> BiomeDefinition:
    """Look up a biome definition.

    Raises:
        UnknownBiomeError: If the table has no entry for the terrain.
    """
    try:
        return biomes[terrain]
    except KeyError:
        raise UnknownBiomeError(f"No biome definition for terrain {terrain.value}") from None
