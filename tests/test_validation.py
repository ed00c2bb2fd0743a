"""Tests for world validation."""

from worldgen.frontier import create_wall_chunk
from worldgen.state import Action, Chunk, ChunkContent, Region, World
from worldgen.terrain_types import Terrain
from worldgen.types import Position
from worldgen.validation import validate_world


def _chunk(make_attributes, x: int, y: int, region_id: int, **overrides) -> Chunk:
    return Chunk(
        x=x,
        y=y,
        region_id=region_id,
        attributes=make_attributes(**overrides),
        content=ChunkContent(description=""),
    )


class TestValidateWorld:
    """Tests for validate_world."""

    def test_empty_world_passes(self) -> None:
        """An empty world has nothing to violate."""
        assert validate_world(World()).passed

    def test_consistent_region_passes(self, make_attributes) -> None:
        """A connected region owning its chunks passes."""
        world = World()
        cells = (Position(x=0, y=0), Position(x=1, y=0))
        world.add_region(Region(id=0, terrain=Terrain.FOREST, cells=cells))
        for cell in cells:
            world.add_chunk(_chunk(make_attributes, cell.x, cell.y, 0))
        world.add_chunk(create_wall_chunk(Position(x=2, y=0)))
        result = validate_world(world)
        assert result.passed
        assert result.errors == []

    def test_disconnected_region(self, make_attributes) -> None:
        """Region cells must touch earlier cells."""
        world = World()
        cells = (Position(x=0, y=0), Position(x=2, y=0))
        world.add_region(Region(id=0, terrain=Terrain.FOREST, cells=cells))
        for cell in cells:
            world.add_chunk(_chunk(make_attributes, cell.x, cell.y, 0))
        result = validate_world(world)
        assert not result.passed
        assert any("not adjacent" in e for e in result.errors)

    def test_region_cell_without_chunk(self) -> None:
        """Every region cell needs a chunk."""
        world = World()
        world.add_region(Region(id=0, terrain=Terrain.FOREST, cells=(Position(x=0, y=0),)))
        assert not validate_world(world).passed

    def test_terrain_mismatch(self, make_attributes) -> None:
        """Chunks must share their region's terrain."""
        world = World()
        world.add_region(Region(id=0, terrain=Terrain.DESERT, cells=(Position(x=0, y=0),)))
        world.add_chunk(_chunk(make_attributes, 0, 0, 0, terrain=Terrain.FOREST))
        result = validate_world(world)
        assert any("terrain" in e for e in result.errors)

    def test_unknown_region(self, make_attributes) -> None:
        """Non-wall chunks must reference a registered region."""
        world = World()
        world.add_chunk(_chunk(make_attributes, 0, 0, 7))
        result = validate_world(world)
        assert any("unknown region" in e for e in result.errors)

    def test_out_of_range_attribute(self, make_attributes) -> None:
        """Attributes outside their clamp range are errors."""
        world = World()
        world.add_region(Region(id=0, terrain=Terrain.FOREST, cells=(Position(x=0, y=0),)))
        world.add_chunk(_chunk(make_attributes, 0, 0, 0, temperature=140))
        result = validate_world(world)
        assert any("temperature" in e for e in result.errors)

    def test_observe_without_enemy_warns(self, make_attributes) -> None:
        """An observe action with no enemy is a warning, not an error."""
        world = World()
        world.add_region(Region(id=0, terrain=Terrain.FOREST, cells=(Position(x=0, y=0),)))
        chunk = _chunk(make_attributes, 0, 0, 0).model_copy(
            update={
                "content": ChunkContent(
                    description="",
                    actions=[Action(id=1, kind="observe", label="Observe the Wolf")],
                )
            }
        )
        world.add_chunk(chunk)
        result = validate_world(world)
        assert result.passed
        assert len(result.warnings) == 1
