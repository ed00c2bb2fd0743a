"""Command-line interface for world generation."""

import argparse
import sys
import time
from collections import Counter
from typing import TYPE_CHECKING

import structlog

from .terrain_types import Terrain
from .types import Position, Season

if TYPE_CHECKING:
    from .state import World

# One glyph per terrain for the ASCII map
TERRAIN_GLYPHS: dict[Terrain, str] = {
    Terrain.FOREST: "F",
    Terrain.GRASSLAND: ".",
    Terrain.DESERT: "d",
    Terrain.SWAMP: "s",
    Terrain.MOUNTAIN: "M",
    Terrain.CAVE: "C",
    Terrain.JUNGLE: "J",
    Terrain.VOLCANIC: "V",
    Terrain.FLOPTROPICA: "*",
    Terrain.TUNDRA: "t",
    Terrain.BEACH: "b",
    Terrain.MESA: "m",
    Terrain.MUSHROOM_FOREST: "%",
    Terrain.OCEAN: "~",
    Terrain.CITY: "#",
    Terrain.SPACE_STATION: "@",
    Terrain.UNDERWATER: "w",
    Terrain.WALL: "X",
}


def render_map(world: "World", center: Position, radius: int) -> str:
    """ASCII map of the square around center; unknown cells are blank."""
    rows = []
    for y in range(center.y - radius, center.y + radius + 1):
        row = []
        for x in range(center.x - radius, center.x + radius + 1):
            chunk = world.chunk_at(Position(x=x, y=y))
            row.append(TERRAIN_GLYPHS.get(chunk.terrain, "?") if chunk else " ")
        rows.append("".join(row))
    return "\n".join(rows)


def main() -> None:
    """CLI entry point for world generation."""
    parser = argparse.ArgumentParser(
        description="Generate a procedural frontier world and print its map"
    )
    parser.add_argument(
        "--config", type=str, default=None, help="Path or name of a TOML config"
    )
    parser.add_argument(
        "--list-configs", action="store_true", help="List available configs and exit"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--season",
        type=str,
        choices=[s.value for s in Season],
        default=None,
        help="Season (overrides config)",
    )
    parser.add_argument(
        "--radius", type=int, default=None, help="Radius to generate (overrides config)"
    )
    parser.add_argument("--x", type=int, default=0, help="Center x (default: 0)")
    parser.add_argument("--y", type=int, default=0, help="Center y (default: 0)")
    parser.add_argument(
        "--validate", action="store_true", help="Validate the generated world"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args()

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(10 if args.verbose else 20),
    )
    logger = structlog.get_logger()

    # Import here to avoid slow startup for --help
    from .config import Config, find_config, list_configs, load_config
    from .context import GenerationContext
    from .frontier import generate_chunks_in_radius
    from .state import World
    from .validation import validate_world
    from .weather import create_weather_zones

    if args.list_configs:
        for name in list_configs():
            print(name)
        return

    if args.config:
        try:
            config_path = find_config(args.config)
        except FileNotFoundError as e:
            logger.error("config_not_found", path=args.config, error=str(e))
            sys.exit(1)
        config = load_config(config_path)
        logger.info("config_loaded", path=str(config_path))
    else:
        config = Config()
        logger.info("using_default_config")

    # Apply CLI overrides
    if args.seed is not None:
        config.world.seed = args.seed
    if args.season is not None:
        config.world.season = Season(args.season)
    if args.radius is not None:
        config.world.radius = args.radius

    ctx = GenerationContext.from_config(config)
    center = Position(x=args.x, y=args.y)
    radius = config.world.radius

    logger.info(
        "generation_starting",
        seed=config.world.seed,
        season=config.world.season.value,
        center=str(center),
        radius=radius,
    )

    start_time = time.time()
    world = generate_chunks_in_radius(World(), center, radius, ctx)
    elapsed = time.time() - start_time

    zones = create_weather_zones(world, {}, config.world.season, 0, ctx)

    print(render_map(world, center, radius))
    print()

    terrain_counts = Counter(c.terrain for c in world.all_chunks().values())
    walls = terrain_counts.pop(Terrain.WALL, 0)
    print(f"Chunks: {world.chunk_count} ({walls} walls)")
    print(f"Regions: {world.region_count}")
    for terrain, count in terrain_counts.most_common():
        print(f"  {TERRAIN_GLYPHS[terrain]} {terrain.value}: {count}")

    weather_counts = Counter(z.current_weather.name for z in zones.values())
    print("Weather:")
    for name, count in weather_counts.most_common():
        print(f"  {name}: {count}")
    print(f"Generated in {elapsed:.2f}s")

    if args.validate:
        result = validate_world(world)
        if not result.passed:
            for error in result.errors:
                print(f"  ERROR: {error}")
            sys.exit(1)
        print("Validation passed")


if __name__ == "__main__":
    main()
