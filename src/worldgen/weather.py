"""Weather presets and per-region weather zones."""

from typing import TYPE_CHECKING, Mapping, Sequence

import numpy as np
import structlog
from pydantic import BaseModel, Field

from .terrain_types import Terrain
from .types import Season, ValueRange

if TYPE_CHECKING:
    from .context import GenerationContext
    from .state import World

logger = structlog.get_logger()

CLEAR_WEATHER_ID = "clear"
DEFAULT_EXTREME_TAGS = ("storm", "heat", "cold")


class WeatherState(BaseModel, frozen=True):
    """A weather preset with its biome and season affinity."""

    id: str
    name: str
    description: str = ""
    biome_affinity: list[Terrain] = Field(default_factory=list)
    season_affinity: list[Season] = Field(default_factory=list)
    temperature_delta: float = 0.0
    moisture_delta: float = 0.0
    wind_delta: float = 0.0
    light_delta: float = 0.0
    spawn_weight: float = Field(default=1.0, ge=0)
    exclusive_tags: list[str] = Field(default_factory=list)
    duration_range: ValueRange = ValueRange(min=20, max=40)

    def suits(self, terrain: Terrain, season: Season) -> bool:
        return terrain in self.biome_affinity and season in self.season_affinity

    def has_any_tag(self, tags: Sequence[str]) -> bool:
        return any(tag in tags for tag in self.exclusive_tags)


CLEAR_WEATHER = WeatherState(
    id=CLEAR_WEATHER_ID,
    name="Clear Skies",
    description="The sky is clear and calm.",
    biome_affinity=[t for t in Terrain if not t.is_wall],
    season_affinity=list(Season),
    spawn_weight=10,
)


class WeatherZone(BaseModel, frozen=True):
    """Current weather of one region."""

    id: int
    terrain: Terrain
    current_weather: WeatherState
    next_change_time: int


def _clear_preset(presets: Sequence[WeatherState]) -> WeatherState:
    for preset in presets:
        if preset.id == CLEAR_WEATHER_ID:
            return preset
    return CLEAR_WEATHER


def generate_weather_for_zone(
    terrain: Terrain,
    season: Season,
    presets: Sequence[WeatherState],
    rng: np.random.Generator,
    previous: WeatherState | None = None,
    extreme_tags: Sequence[str] = DEFAULT_EXTREME_TAGS,
) -> WeatherState:
    """Pick the next weather for a region.

    Presets are filtered by biome and season affinity. When the previous
    weather was extreme, every extreme candidate is dropped so harsh weather
    never follows harsh weather. The rest are drawn by spawn weight.

    Args:
        terrain: Terrain of the region.
        season: Current season.
        presets: Available presets.
        rng: Random number generator.
        previous: Weather being replaced, if any.
        extreme_tags: Tags that mark a preset as extreme.

    Returns:
        The chosen preset, or the clear preset when nothing fits.
    """
    candidates = [p for p in presets if p.suits(terrain, season)]

    if previous is not None and previous.has_any_tag(extreme_tags):
        candidates = [p for p in candidates if not p.has_any_tag(extreme_tags)]

    total = sum(p.spawn_weight for p in candidates)
    if not candidates or total <= 0:
        logger.debug("weather_pool_empty", terrain=terrain.value, season=season.value)
        return _clear_preset(presets)

    r = rng.random() * total
    cumulative = 0.0
    for preset in candidates:
        cumulative += preset.spawn_weight
        if r < cumulative:
            return preset
    return candidates[-1]


def _next_change_time(
    weather: WeatherState, game_time: int, rng: np.random.Generator, scale: int
) -> int:
    return game_time + weather.duration_range.roll(rng) * scale


def create_weather_zones(
    world: "World",
    zones: Mapping[int, WeatherZone],
    season: Season,
    game_time: int,
    ctx: "GenerationContext",
) -> dict[int, WeatherZone]:
    """Give every region without a zone its initial weather.

    Returns:
        A new zone mapping; existing zones are kept as they are.
    """
    result = dict(zones)
    scale = ctx.settings.weather_duration_scale
    for region_id, region in world.all_regions().items():
        if region_id in result:
            continue
        weather = generate_weather_for_zone(
            region.terrain,
            season,
            ctx.weather_presets,
            ctx.rng,
            extreme_tags=ctx.settings.extreme_weather_tags,
        )
        result[region_id] = WeatherZone(
            id=region_id,
            terrain=region.terrain,
            current_weather=weather,
            next_change_time=_next_change_time(weather, game_time, ctx.rng, scale),
        )
        logger.debug("weather_zone_created", region_id=region_id, weather=weather.id)
    return result


def advance_weather_zones(
    zones: Mapping[int, WeatherZone],
    season: Season,
    game_time: int,
    ctx: "GenerationContext",
) -> dict[int, WeatherZone]:
    """Re-roll the weather of every zone whose change time has come.

    Returns:
        A new zone mapping.
    """
    result: dict[int, WeatherZone] = {}
    scale = ctx.settings.weather_duration_scale
    for zone_id, zone in zones.items():
        if game_time < zone.next_change_time:
            result[zone_id] = zone
            continue
        weather = generate_weather_for_zone(
            zone.terrain,
            season,
            ctx.weather_presets,
            ctx.rng,
            previous=zone.current_weather,
            extreme_tags=ctx.settings.extreme_weather_tags,
        )
        result[zone_id] = zone.model_copy(
            update={
                "current_weather": weather,
                "next_change_time": _next_change_time(weather, game_time, ctx.rng, scale),
            }
        )
        logger.debug(
            "weather_changed",
            zone_id=zone_id,
            previous=zone.current_weather.id,
            weather=weather.id,
        )
    return result
