"""World state: chunks, regions and the sparse world map."""

from typing import Any, Mapping

from pydantic import BaseModel, Field, PrivateAttr

from .exceptions import (
    ChunkAlreadyExistsError,
    ChunkNotFoundError,
    RegionAlreadyExistsError,
    RegionNotFoundError,
)
from .terrain_types import SoilType, Terrain
from .types import Position, ValueRange

# Region id carried by the impassable wall sentinel chunks
WALL_REGION_ID = -1


class ChunkAttributes(BaseModel, frozen=True):
    """Environmental attributes of one chunk."""

    terrain: Terrain
    vegetation_density: float
    moisture: float
    elevation: float
    danger_level: float
    magic_affinity: float
    human_presence: float
    predator_presence: float
    temperature: float
    explorability: float
    soil_type: SoilType
    travel_cost: int
    light_level: float
    wind_level: float

    def condition_values(self) -> dict[str, Any]:
        """Values that spawn conditions may constrain, keyed by field name."""
        values = self.model_dump(exclude={"terrain"})
        values["soil_type"] = self.soil_type.value
        return values


class LootEntry(BaseModel, frozen=True):
    """One independently rolled row of a loot table."""

    item: str
    # Entries without a chance never drop
    chance: float = Field(default=0.0, ge=0, le=1)
    quantity: ValueRange = ValueRange(min=1, max=1)


class ChunkItem(BaseModel, frozen=True):
    """A stack of a registry item lying in a chunk."""

    id: str
    name: str
    description: str = ""
    tier: int = 1
    emoji: str = ""
    quantity: int = 1

    def with_quantity(self, quantity: int) -> "ChunkItem":
        """Return copy with a different stack size."""
        return self.model_copy(update={"quantity": quantity})


class Npc(BaseModel, frozen=True):
    """A non-hostile character."""

    name: str
    description: str = ""
    emoji: str = "🧑"
    dialogue_seed: str = ""


class SenseEffect(BaseModel, frozen=True):
    """How far an enemy notices the player."""

    range: int = 3
    type: str = "detection"


class Enemy(BaseModel, frozen=True):
    """The hostile occupant of a chunk; omitted fields take these defaults."""

    type: str
    emoji: str = "👾"
    hp: int = 100
    damage: int = 10
    behavior: str = "aggressive"
    size: str = "medium"
    diet: list[str] = Field(default_factory=lambda: ["meat"])
    satiation: int = 0
    max_satiation: int = 100
    sense_effect: SenseEffect | None = None
    loot: list[LootEntry] = Field(default_factory=list)


class Structure(BaseModel, frozen=True):
    """A building or landmark."""

    name: str
    description: str = ""
    emoji: str = "🏚️"


class Action(BaseModel, frozen=True):
    """Something the player can do in a chunk."""

    id: int
    kind: str
    label: str
    target: str | None = None


class ChunkContent(BaseModel, frozen=True):
    """Generated content of a chunk."""

    description: str
    items: list[ChunkItem] = Field(default_factory=list)
    npcs: list[Npc] = Field(default_factory=list)
    structures: list[Structure] = Field(default_factory=list)
    enemy: Enemy | None = None
    actions: list[Action] = Field(default_factory=list)


class Chunk(BaseModel, frozen=True):
    """Immutable world cell: identity, attributes and content."""

    x: int
    y: int
    region_id: int
    attributes: ChunkAttributes
    content: ChunkContent
    explored: bool = False
    last_visited: int = 0

    @property
    def position(self) -> Position:
        return Position(x=self.x, y=self.y)

    @property
    def terrain(self) -> Terrain:
        return self.attributes.terrain

    @property
    def is_wall(self) -> bool:
        return self.region_id == WALL_REGION_ID


class Region(BaseModel, frozen=True):
    """Contiguous single-terrain group of chunks generated together."""

    id: int
    terrain: Terrain
    cells: tuple[Position, ...]

    @property
    def size(self) -> int:
        return len(self.cells)


class World(BaseModel):
    """
    Sparse, monotonically growing world map.

    Chunks and regions are only ever added. Generation works on a copy()
    so a caller's world is never mutated.
    """

    _chunks: dict[Position, Chunk] = PrivateAttr(default_factory=dict)
    _regions: dict[int, Region] = PrivateAttr(default_factory=dict)
    _next_region_id: int = PrivateAttr(default=0)

    # --- Chunk operations ---

    def get_chunk(self, position: Position) -> Chunk:
        """Get chunk at position.

        Raises:
            ChunkNotFoundError: If no chunk exists there.
        """
        chunk = self._chunks.get(position)
        if chunk is None:
            raise ChunkNotFoundError(f"No chunk at {position}")
        return chunk

    def chunk_at(self, position: Position) -> Chunk | None:
        """Get chunk at position, or None."""
        return self._chunks.get(position)

    def has_chunk(self, position: Position) -> bool:
        return position in self._chunks

    def add_chunk(self, chunk: Chunk) -> None:
        """Add a chunk to the world.

        Raises:
            ChunkAlreadyExistsError: If the position is already occupied.
        """
        position = chunk.position
        if position in self._chunks:
            raise ChunkAlreadyExistsError(f"Chunk at {position} already exists")
        self._chunks[position] = chunk

    def all_chunks(self) -> Mapping[Position, Chunk]:
        """Get all chunks (read-only view)."""
        return self._chunks

    @property
    def chunk_count(self) -> int:
        return len(self._chunks)

    # --- Region operations ---

    def allocate_region_id(self) -> int:
        """Reserve the next unused region id."""
        region_id = self._next_region_id
        self._next_region_id += 1
        return region_id

    def add_region(self, region: Region) -> None:
        """Register a region.

        Raises:
            RegionAlreadyExistsError: If the id is already registered.
        """
        if region.id in self._regions:
            raise RegionAlreadyExistsError(f"Region {region.id} already exists")
        self._regions[region.id] = region
        self._next_region_id = max(self._next_region_id, region.id + 1)

    def get_region(self, region_id: int) -> Region:
        """Get region by id.

        Raises:
            RegionNotFoundError: If the id is not registered.
        """
        region = self._regions.get(region_id)
        if region is None:
            raise RegionNotFoundError(f"Region {region_id} not found")
        return region

    def all_regions(self) -> Mapping[int, Region]:
        """Get all regions (read-only view)."""
        return self._regions

    @property
    def region_count(self) -> int:
        return len(self._regions)

    def copy(self) -> "World":
        """Return a copy sharing the immutable chunks and regions."""
        world = World()
        world._chunks = dict(self._chunks)
        world._regions = dict(self._regions)
        world._next_region_id = self._next_region_id
        return world
