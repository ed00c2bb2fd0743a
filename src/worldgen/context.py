"""Everything a generation call chain reads, bundled in one place."""

from dataclasses import dataclass, field

import numpy as np

from .catalog import (
    ItemRegistry,
    TemplateTable,
    load_biomes,
    load_items,
    load_seasons,
    load_templates,
    load_weather_presets,
)
from .config import Config, GenerationSettings, WorldProfile
from .terrain.config import BiomeTable, SeasonModifiers, SeasonTable
from .types import Season
from .weather import WeatherState


@dataclass
class GenerationContext:
    """
    Read-only tables and tunables plus the random stream of one generation run.

    The tables are never mutated; only ``rng`` advances. Sharing a context
    between concurrent callers would interleave their random streams.
    """

    biomes: BiomeTable
    seasons: SeasonTable
    items: ItemRegistry
    templates: TemplateTable
    weather_presets: list[WeatherState]
    rng: np.random.Generator
    profile: WorldProfile = field(default_factory=WorldProfile)
    settings: GenerationSettings = field(default_factory=GenerationSettings)
    season: Season = Season.SPRING
    language: str = "en"

    @property
    def season_modifiers(self) -> SeasonModifiers:
        return self.seasons.get(self.season, SeasonModifiers())

    @classmethod
    def default(
        cls,
        seed: int | None = None,
        season: Season = Season.SPRING,
        profile: WorldProfile | None = None,
        settings: GenerationSettings | None = None,
        language: str = "en",
    ) -> "GenerationContext":
        """Context over the packaged data tables."""
        return cls(
            biomes=load_biomes(),
            seasons=load_seasons(),
            items=load_items(),
            templates=load_templates(),
            weather_presets=load_weather_presets(),
            rng=np.random.default_rng(seed),
            profile=profile or WorldProfile(),
            settings=settings or GenerationSettings(),
            season=season,
            language=language,
        )

    @classmethod
    def from_config(cls, config: Config) -> "GenerationContext":
        """Context for a loaded run configuration."""
        return cls.default(
            seed=config.world.seed,
            season=config.world.season,
            profile=config.profile,
            settings=config.generation,
            language=config.world.language,
        )
