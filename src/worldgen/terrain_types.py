"""Terrain and soil types and their properties."""

from enum import Enum


class Terrain(str, Enum):
    """Biome of a region; every chunk of a region shares it."""

    FOREST = "forest"
    GRASSLAND = "grassland"
    DESERT = "desert"
    SWAMP = "swamp"
    MOUNTAIN = "mountain"
    CAVE = "cave"
    JUNGLE = "jungle"
    VOLCANIC = "volcanic"
    FLOPTROPICA = "floptropica"
    TUNDRA = "tundra"
    BEACH = "beach"
    MESA = "mesa"
    MUSHROOM_FOREST = "mushroom_forest"
    OCEAN = "ocean"
    CITY = "city"
    SPACE_STATION = "space_station"
    UNDERWATER = "underwater"
    WALL = "wall"

    @property
    def is_wall(self) -> bool:
        """Whether this is the impassable sentinel terrain."""
        return self is Terrain.WALL

    @property
    def is_underground(self) -> bool:
        """Whether sunlight never reaches this terrain."""
        return self in _UNDERGROUND_TYPES


class SoilType(str, Enum):
    """Soil found in a chunk."""

    LOAMY = "loamy"
    SANDY = "sandy"
    CLAY = "clay"
    ROCKY = "rocky"
    METAL = "metal"


_UNDERGROUND_TYPES = frozenset({
    Terrain.CAVE,
})
