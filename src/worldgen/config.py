"""World generation configuration from TOML files."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

from .terrain_types import Terrain
from .types import Season


class WorldProfile(BaseModel, frozen=True):
    """Global tunables shared by every chunk of a world."""

    spawn_multiplier: float = Field(
        default=1.0, ge=0, description="Global spawn scale, softcapped above 1"
    )
    resource_density: float = Field(
        default=50.0, ge=0, le=100, description="Resource richness, 50 is neutral"
    )
    temp_bias: float = 0.0
    moisture_bias: float = 0.0
    sun_intensity: float = Field(default=5.0, ge=0, le=10)


class GenerationSettings(BaseModel, frozen=True):
    """Balance constants of the generation pipeline."""

    softcap_k: float = Field(default=0.4, gt=0)
    max_spawn_chance: float = Field(default=0.95, ge=0, le=1)
    tier_decay: float = Field(default=0.9, gt=0)
    base_max_items: int = 10
    npc_cap: int = 3
    enemy_cap: int = 3
    structure_cap: int = 2
    wall_chance: float = Field(default=0.3, ge=0, le=1)
    enclosed_terrains: list[Terrain] = Field(
        default_factory=lambda: [Terrain.CAVE, Terrain.MOUNTAIN, Terrain.VOLCANIC]
    )
    fallback_terrains: list[Terrain] = Field(
        default_factory=lambda: [Terrain.GRASSLAND, Terrain.FOREST]
    )
    fallback_terrain: Terrain = Terrain.FOREST
    default_custom_chance: float = Field(default=0.5, ge=0, le=1)
    extreme_weather_tags: list[str] = Field(
        default_factory=lambda: ["storm", "heat", "cold"]
    )
    weather_duration_scale: int = 10
    attribute_scale: float = 10.0


class WorldSettings(BaseModel):
    """Settings for a generation run."""

    seed: int | None = None
    season: Season = Season.SPRING
    language: str = "en"
    radius: int = Field(default=5, ge=0)


class Config(BaseModel):
    """Complete world generation configuration."""

    world: WorldSettings = Field(default_factory=WorldSettings)
    profile: WorldProfile = Field(default_factory=WorldProfile)
    generation: GenerationSettings = Field(default_factory=GenerationSettings)


def load_config(config_path: Path) -> Config:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed Config object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If values are out of range.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return Config.model_validate(data)


def _configs_dir() -> Path:
    return Path(__file__).parent.parent.parent / "configs"


def find_config(name: str) -> Path:
    """Find a config file by name.

    Searches in the following order:
    1. Exact path if name contains path separator or ends in .toml
    2. configs/{name}.toml
    3. configs/{name}

    Raises:
        FileNotFoundError: If config file is not found.
    """
    if "/" in name or name.endswith(".toml"):
        path = Path(name)
        if path.exists():
            return path
        raise FileNotFoundError(f"Config file not found: {name}")

    configs_dir = _configs_dir()

    config_path = configs_dir / f"{name}.toml"
    if config_path.exists():
        return config_path

    config_path = configs_dir / name
    if config_path.exists():
        return config_path

    raise FileNotFoundError(
        f"Config '{name}' not found in {configs_dir}. "
        f"Available configs: {list_configs()}"
    )


def list_configs() -> list[str]:
    """List available config names."""
    configs_dir = _configs_dir()
    if not configs_dir.exists():
        return []
    return sorted(p.stem for p in configs_dir.glob("*.toml"))
