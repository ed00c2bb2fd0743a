"""Terrain layout: adjacency rules, terrain choice, region growth and chunk attributes."""

from .adjacency import neighbor_terrains, valid_adjacent_terrains
from .attributes import (
    BaseAttributes,
    derive_chunk_attributes,
    derive_dependent_attributes,
    roll_base_attributes,
)
from .config import (
    AttributeRanges,
    BiomeDefinition,
    BiomeTable,
    SeasonModifiers,
    SeasonTable,
    get_biome,
)
from .regions import grow_region, roll_region_size
from .selection import select_terrain, weighted_choice

__all__ = [
    "AttributeRanges",
    "BaseAttributes",
    "BiomeDefinition",
    "BiomeTable",
    "SeasonModifiers",
    "SeasonTable",
    "derive_chunk_attributes",
    "derive_dependent_attributes",
    "get_biome",
    "grow_region",
    "neighbor_terrains",
    "roll_base_attributes",
    "roll_region_size",
    "select_terrain",
    "valid_adjacent_terrains",
    "weighted_choice",
]
