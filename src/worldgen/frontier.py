"""Lazy outward growth of the world, one whole region at a time."""

import structlog

from .content import generate_chunk_content
from .context import GenerationContext
from .state import (
    WALL_REGION_ID,
    Chunk,
    ChunkAttributes,
    ChunkContent,
    Region,
    World,
)
from .terrain.adjacency import valid_adjacent_terrains
from .terrain.attributes import derive_chunk_attributes
from .terrain.config import BiomeTable, get_biome
from .terrain.regions import grow_region, roll_region_size
from .terrain.selection import select_terrain
from .terrain_types import SoilType, Terrain
from .types import Position

logger = structlog.get_logger()

WALL_DESCRIPTION = "An impassable rock wall blocks the way."
WALL_TRAVEL_COST = 999


def create_wall_chunk(position: Position, biomes: BiomeTable | None = None) -> Chunk:
    """Impassable sentinel chunk with fixed minimal attributes."""
    wall_biome = (biomes or {}).get(Terrain.WALL)
    travel_cost = wall_biome.travel_cost if wall_biome is not None else WALL_TRAVEL_COST
    attributes = ChunkAttributes(
        terrain=Terrain.WALL,
        vegetation_density=0,
        moisture=0,
        elevation=50,
        danger_level=0,
        magic_affinity=0,
        human_presence=0,
        predator_presence=0,
        temperature=50,
        explorability=0,
        soil_type=SoilType.ROCKY,
        travel_cost=travel_cost,
        light_level=0,
        wind_level=0,
    )
    return Chunk(
        x=position.x,
        y=position.y,
        region_id=WALL_REGION_ID,
        attributes=attributes,
        content=ChunkContent(description=WALL_DESCRIPTION),
        explored=True,
    )


def _enclose_region(world: World, region: Region, ctx: GenerationContext) -> int:
    """Wall off every free cell bordering region. Returns walls placed."""
    placed = 0
    for cell in region.cells:
        for neighbor in cell.neighbors():
            if world.has_chunk(neighbor):
                continue
            world.add_chunk(create_wall_chunk(neighbor, ctx.biomes))
            placed += 1
    return placed


def _materialize_region(world: World, start: Position, ctx: GenerationContext) -> Region:
    """Grow a new region from start into world, which is modified in place."""
    rng = ctx.rng
    settings = ctx.settings

    candidates = valid_adjacent_terrains(
        world, start, ctx.biomes, settings.fallback_terrains
    )
    terrain = select_terrain(candidates, ctx.biomes, rng, settings.fallback_terrain)
    biome = get_biome(ctx.biomes, terrain)

    target_size = roll_region_size(biome, rng)
    cells = grow_region(start, target_size, lambda p: not world.has_chunk(p), rng)

    region = Region(id=world.allocate_region_id(), terrain=terrain, cells=tuple(cells))
    world.add_region(region)

    season = ctx.season_modifiers
    for cell in cells:
        attributes = derive_chunk_attributes(
            terrain, biome, season, ctx.profile, rng, settings.attribute_scale
        )
        world.add_chunk(
            Chunk(
                x=cell.x,
                y=cell.y,
                region_id=region.id,
                attributes=attributes,
                content=generate_chunk_content(attributes, ctx),
            )
        )

    walls = 0
    if terrain in settings.enclosed_terrains and rng.random() < settings.wall_chance:
        walls = _enclose_region(world, region, ctx)

    logger.debug(
        "region_generated",
        region_id=region.id,
        terrain=terrain.value,
        start=str(start),
        target_size=target_size,
        size=region.size,
        walls=walls,
    )
    return region


def ensure_chunk_exists(world: World, position: Position, ctx: GenerationContext) -> World:
    """Make sure a chunk exists at position.

    Args:
        world: Current world; never modified.
        position: Position that must exist afterwards.
        ctx: Generation context.

    Returns:
        The input world if position already exists, otherwise a copy with a
        whole new region grown from position.
    """
    if world.has_chunk(position):
        return world
    new_world = world.copy()
    _materialize_region(new_world, position, ctx)
    return new_world


def generate_chunks_in_radius(
    world: World, center: Position, radius: int, ctx: GenerationContext
) -> World:
    """Fill the square of the given radius around center.

    Positions are visited x-major, each missing one growing a new region
    into a single working copy of the world.

    Returns:
        A world containing every position of the square; the input world is
        returned unchanged when nothing was missing.
    """
    new_world: World | None = None
    regions_created = 0

    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            position = Position(x=center.x + dx, y=center.y + dy)
            current = new_world if new_world is not None else world
            if current.has_chunk(position):
                continue
            if new_world is None:
                new_world = world.copy()
            _materialize_region(new_world, position, ctx)
            regions_created += 1

    logger.info(
        "radius_generated",
        center=str(center),
        radius=radius,
        regions_created=regions_created,
    )
    return new_world if new_world is not None else world
