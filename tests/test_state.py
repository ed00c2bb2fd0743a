"""Tests for world state management."""

import pytest

from worldgen.exceptions import (
    ChunkAlreadyExistsError,
    ChunkNotFoundError,
    RegionAlreadyExistsError,
    RegionNotFoundError,
)
from worldgen.state import Chunk, ChunkContent, Enemy, LootEntry, Region, World
from worldgen.terrain_types import Terrain
from worldgen.types import Position


@pytest.fixture
def make_chunk(make_attributes):
    """Factory for plain chunks."""

    def _make(x: int, y: int, region_id: int = 0) -> Chunk:
        return Chunk(
            x=x,
            y=y,
            region_id=region_id,
            attributes=make_attributes(),
            content=ChunkContent(description="test"),
        )

    return _make


class TestWorldChunks:
    """Tests for chunk storage."""

    def test_add_and_get(self, make_chunk) -> None:
        """Added chunk can be fetched by position."""
        world = World()
        chunk = make_chunk(1, 2)
        world.add_chunk(chunk)
        assert world.get_chunk(Position(x=1, y=2)) == chunk
        assert world.has_chunk(Position(x=1, y=2))
        assert world.chunk_count == 1

    def test_add_occupied_raises(self, make_chunk) -> None:
        """A position can hold only one chunk."""
        world = World()
        world.add_chunk(make_chunk(0, 0))
        with pytest.raises(ChunkAlreadyExistsError):
            world.add_chunk(make_chunk(0, 0, region_id=5))

    def test_get_missing_raises(self) -> None:
        """get_chunk raises for an empty position."""
        with pytest.raises(ChunkNotFoundError):
            World().get_chunk(Position(x=0, y=0))

    def test_chunk_at_missing_is_none(self) -> None:
        """chunk_at returns None for an empty position."""
        assert World().chunk_at(Position(x=3, y=3)) is None

    def test_chunk_is_immutable(self, make_chunk) -> None:
        """Chunks are frozen."""
        chunk = make_chunk(0, 0)
        with pytest.raises(Exception):
            chunk.region_id = 3  # type: ignore


class TestWorldRegions:
    """Tests for region storage."""

    def test_allocate_ids_sequential(self) -> None:
        """Region ids count up from zero."""
        world = World()
        assert [world.allocate_region_id() for _ in range(3)] == [0, 1, 2]

    def test_add_region_advances_next_id(self) -> None:
        """Registering a region id skips allocation past it."""
        world = World()
        world.add_region(Region(id=4, terrain=Terrain.FOREST, cells=(Position(x=0, y=0),)))
        assert world.allocate_region_id() == 5

    def test_duplicate_region_raises(self) -> None:
        """A region id can be registered once."""
        world = World()
        region = Region(id=0, terrain=Terrain.DESERT, cells=(Position(x=0, y=0),))
        world.add_region(region)
        with pytest.raises(RegionAlreadyExistsError):
            world.add_region(region)

    def test_get_missing_region_raises(self) -> None:
        """get_region raises for an unknown id."""
        with pytest.raises(RegionNotFoundError):
            World().get_region(9)


class TestWorldCopy:
    """Tests for copy-on-write snapshots."""

    def test_copy_is_independent(self, make_chunk) -> None:
        """Adding to a copy leaves the original untouched."""
        world = World()
        world.add_chunk(make_chunk(0, 0))
        snapshot = world.copy()
        snapshot.add_chunk(make_chunk(1, 0))
        snapshot.allocate_region_id()

        assert world.chunk_count == 1
        assert snapshot.chunk_count == 2
        assert world.allocate_region_id() == 0


class TestEnemyDefaults:
    """Tests for enemy default values."""

    def test_defaults(self) -> None:
        """Omitted enemy fields take the standard defaults."""
        enemy = Enemy(type="Goblin")
        assert enemy.hp == 100
        assert enemy.damage == 10
        assert enemy.behavior == "aggressive"
        assert enemy.size == "medium"
        assert enemy.emoji == "👾"
        assert enemy.satiation == 0
        assert enemy.max_satiation == 100
        assert enemy.diet == ["meat"]
        assert enemy.sense_effect is None


class TestLootEntryDefaults:
    """Tests for loot entry default values."""

    def test_missing_chance_is_zero(self) -> None:
        """An entry without a chance never drops."""
        entry = LootEntry(item="stone")
        assert entry.chance == 0.0
        assert entry.quantity.min == entry.quantity.max == 1
