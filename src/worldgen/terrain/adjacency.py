"""Which terrains may occupy a new position, given its generated neighbors."""

from typing import Sequence

import structlog

from ..state import World
from ..terrain_types import Terrain
from ..types import Position
from .config import BiomeTable

logger = structlog.get_logger()


def neighbor_terrains(world: World, position: Position) -> list[Terrain]:
    """Distinct terrains of the already generated 4-neighbors, in neighbor order."""
    terrains: list[Terrain] = []
    for neighbor in position.neighbors():
        chunk = world.chunk_at(neighbor)
        if chunk is not None and chunk.terrain not in terrains:
            terrains.append(chunk.terrain)
    return terrains


def valid_adjacent_terrains(
    world: World,
    position: Position,
    biomes: BiomeTable,
    fallback: Sequence[Terrain] = (Terrain.GRASSLAND, Terrain.FOREST),
) -> list[Terrain]:
    """Terrains allowed at position by every generated neighbor.

    With no neighbors every non-wall terrain of the biome table qualifies.
    Otherwise a terrain qualifies when it appears in the allowed-neighbor
    list of each neighboring terrain. The wall is never a candidate.

    Args:
        world: World to inspect.
        position: The ungenerated position.
        biomes: Biome table.
        fallback: Terrains returned when no terrain satisfies all neighbors.

    Returns:
        Candidate terrains, never containing the wall.
    """
    adjacent = neighbor_terrains(world, position)
    if not adjacent:
        return [t for t in biomes if not t.is_wall]

    allowed_by_each = [
        set(biomes[t].allowed_neighbors) for t in adjacent if t in biomes
    ]
    union: list[Terrain] = []
    for terrain in adjacent:
        biome = biomes.get(terrain)
        if biome is None:
            continue
        for candidate in biome.allowed_neighbors:
            if candidate not in union:
                union.append(candidate)

    valid = [
        t
        for t in union
        if not t.is_wall
        and t in biomes
        and all(t in allowed for allowed in allowed_by_each)
    ]
    if not valid:
        logger.debug(
            "adjacency_fallback",
            position=str(position),
            neighbors=[t.value for t in adjacent],
        )
        return [t for t in fallback if not t.is_wall]
    return valid
