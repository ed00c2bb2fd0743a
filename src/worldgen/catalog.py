"""Static data tables: item registry, terrain templates and packaged defaults."""

import tomllib
from pathlib import Path
from typing import Any, Iterator, Mapping

import structlog
from pydantic import BaseModel, Field, model_validator

from .spawning.candidates import CandidateKind, SpawnCandidate
from .terrain.config import BiomeDefinition, BiomeTable, SeasonModifiers, SeasonTable
from .terrain_types import Terrain
from .types import Season, ValueRange
from .weather import WeatherState

logger = structlog.get_logger()

DATA_DIR = Path(__file__).parent / "data"

LocalizedText = str | dict[str, str]


def localize(text: LocalizedText, language: str = "en") -> str:
    """Pick the text for a language, falling back to English, then any."""
    if isinstance(text, str):
        return text
    if language in text:
        return text[language]
    if "en" in text:
        return text["en"]
    return next(iter(text.values()), "")


class NaturalSpawn(BaseModel, frozen=True):
    """Per-biome spawn entry of a registry item."""

    biome: Terrain
    chance: float | None = None
    conditions: dict[str, Any] = Field(default_factory=dict)


class ItemDefinition(BaseModel, frozen=True):
    """Registry entry for an item."""

    id: str
    name: LocalizedText
    description: LocalizedText = ""
    tier: int = Field(default=1, ge=1)
    emoji: str = ""
    base_quantity: ValueRange = ValueRange(min=1, max=1)
    spawn_enabled: bool = True
    spawn_biomes: list[Terrain] = Field(default_factory=list)
    natural_spawn: list[NaturalSpawn] = Field(default_factory=list)

    def display_name(self, language: str = "en") -> str:
        return localize(self.name, language)

    def matches_name(self, text: str) -> bool:
        """Whether any translation of the name equals text."""
        if isinstance(self.name, str):
            return self.name == text
        return text in self.name.values()

    def natural_spawn_for(self, terrain: Terrain) -> NaturalSpawn | None:
        for entry in self.natural_spawn:
            if entry.biome == terrain:
                return entry
        return None

    def spawns_in(self, terrain: Terrain) -> bool:
        return self.spawn_enabled and terrain in self.spawn_biomes


class ItemRegistry:
    """Item definitions keyed by canonical id."""

    def __init__(self, definitions: Mapping[str, ItemDefinition] | None = None) -> None:
        self._definitions: dict[str, ItemDefinition] = dict(definitions or {})

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[ItemDefinition]:
        return iter(self._definitions.values())

    def get(self, item_id: str) -> ItemDefinition | None:
        return self._definitions.get(item_id)

    def resolve(self, reference: str) -> ItemDefinition | None:
        """Resolve an item reference to its definition.

        References are canonical ids. Data that still names items by a
        display name resolves through a translation scan, which is logged
        since two items may share a translated name.

        Returns:
            The definition, or None when nothing matches.
        """
        definition = self._definitions.get(reference)
        if definition is not None:
            return definition
        for definition in self._definitions.values():
            if definition.matches_name(reference):
                logger.debug(
                    "item_resolved_by_display_name",
                    reference=reference,
                    item_id=definition.id,
                )
                return definition
        return None

    def spawnable_in(self, terrain: Terrain) -> list[ItemDefinition]:
        """Spawn-enabled items that list terrain among their biomes."""
        return [d for d in self._definitions.values() if d.spawns_in(terrain)]


class TerrainTemplate(BaseModel, frozen=True):
    """Description fragments and spawn candidates for one terrain."""

    descriptions: list[str] = Field(default_factory=lambda: ["A generic area."])
    adjectives: list[str] = Field(default_factory=lambda: ["normal"])
    features: list[str] = Field(default_factory=lambda: ["nothing special"])
    items: list[SpawnCandidate | None] = Field(default_factory=list)
    npcs: list[SpawnCandidate | None] = Field(default_factory=list)
    enemies: list[SpawnCandidate | None] = Field(default_factory=list)
    structures: list[SpawnCandidate | None] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _tag_candidates(cls, data: Any) -> Any:
        # Candidate lists are untagged in data files; the list decides the kind
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for field, kind in _CANDIDATE_LISTS.items():
            rows = data.get(field)
            if rows is None:
                continue
            data[field] = [
                {"kind": kind.value, **row} if isinstance(row, dict) else row
                for row in rows
            ]
        return data


_CANDIDATE_LISTS = {
    "items": CandidateKind.ITEM,
    "npcs": CandidateKind.NPC,
    "enemies": CandidateKind.ENEMY,
    "structures": CandidateKind.STRUCTURE,
}

TemplateTable = dict[Terrain, TerrainTemplate]


def _load_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def load_biomes(path: Path | None = None) -> BiomeTable:
    """Load the biome table.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If an entry is invalid.
    """
    data = _load_toml(path or DATA_DIR / "biomes.toml")
    return {
        Terrain(key): BiomeDefinition.model_validate(value)
        for key, value in data.items()
    }


def load_seasons(path: Path | None = None) -> SeasonTable:
    """Load the season modifier table."""
    data = _load_toml(path or DATA_DIR / "seasons.toml")
    return {
        Season(key): SeasonModifiers.model_validate(value)
        for key, value in data.items()
    }


def load_weather_presets(path: Path | None = None) -> list[WeatherState]:
    """Load weather presets, keyed by id in the file."""
    data = _load_toml(path or DATA_DIR / "weather.toml")
    return [
        WeatherState.model_validate({"id": key, **value})
        for key, value in data.items()
    ]


def load_items(path: Path | None = None) -> ItemRegistry:
    """Load the item registry, keyed by id in the file."""
    data = _load_toml(path or DATA_DIR / "items.toml")
    return ItemRegistry(
        {
            key: ItemDefinition.model_validate({"id": key, **value})
            for key, value in data.items()
        }
    )


def load_templates(path: Path | None = None) -> TemplateTable:
    """Load terrain templates."""
    data = _load_toml(path or DATA_DIR / "templates.toml")
    return {
        Terrain(key): TerrainTemplate.model_validate(value)
        for key, value in data.items()
    }
