"""Procedural frontier world generation."""

from .catalog import (
    ItemDefinition,
    ItemRegistry,
    TerrainTemplate,
    load_biomes,
    load_items,
    load_seasons,
    load_templates,
    load_weather_presets,
)
from .config import Config, GenerationSettings, WorldProfile, WorldSettings, load_config
from .content import build_actions, build_description, generate_chunk_content, resolve_structure_loot
from .context import GenerationContext
from .exceptions import (
    ChunkAlreadyExistsError,
    ChunkNotFoundError,
    RegionAlreadyExistsError,
    RegionNotFoundError,
    UnknownBiomeError,
    WorldGenError,
)
from .frontier import create_wall_chunk, ensure_chunk_exists, generate_chunks_in_radius
from .spawning import CandidateKind, SpawnCandidate, check_conditions, select_entities, softcap
from .state import (
    WALL_REGION_ID,
    Action,
    Chunk,
    ChunkAttributes,
    ChunkContent,
    ChunkItem,
    Enemy,
    Npc,
    Region,
    Structure,
    World,
)
from .terrain_types import SoilType, Terrain
from .types import CARDINAL_DELTAS, Position, Season, ValueRange
from .validation import ValidationResult, validate_world
from .weather import (
    WeatherState,
    WeatherZone,
    advance_weather_zones,
    create_weather_zones,
    generate_weather_for_zone,
)

__all__ = [
    # Types
    "Position",
    "Season",
    "ValueRange",
    "CARDINAL_DELTAS",
    "Terrain",
    "SoilType",
    # State
    "World",
    "Region",
    "Chunk",
    "ChunkAttributes",
    "ChunkContent",
    "ChunkItem",
    "Npc",
    "Enemy",
    "Structure",
    "Action",
    "WALL_REGION_ID",
    # Config
    "Config",
    "WorldSettings",
    "WorldProfile",
    "GenerationSettings",
    "GenerationContext",
    "load_config",
    # Catalog
    "ItemDefinition",
    "ItemRegistry",
    "TerrainTemplate",
    "load_biomes",
    "load_items",
    "load_seasons",
    "load_templates",
    "load_weather_presets",
    # Spawning
    "CandidateKind",
    "SpawnCandidate",
    "check_conditions",
    "select_entities",
    "softcap",
    # Content
    "generate_chunk_content",
    "build_description",
    "build_actions",
    "resolve_structure_loot",
    # Frontier
    "ensure_chunk_exists",
    "generate_chunks_in_radius",
    "create_wall_chunk",
    # Weather
    "WeatherState",
    "WeatherZone",
    "generate_weather_for_zone",
    "create_weather_zones",
    "advance_weather_zones",
    # Validation
    "ValidationResult",
    "validate_world",
    # Exceptions
    "WorldGenError",
    "ChunkNotFoundError",
    "ChunkAlreadyExistsError",
    "RegionAlreadyExistsError",
    "RegionNotFoundError",
    "UnknownBiomeError",
]
