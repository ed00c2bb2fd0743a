"""Tests for the command-line map rendering."""

from worldgen.cli import TERRAIN_GLYPHS, render_map
from worldgen.frontier import create_wall_chunk
from worldgen.state import World
from worldgen.terrain_types import Terrain
from worldgen.types import Position


class TestRenderMap:
    """Tests for render_map."""

    def test_every_terrain_has_glyph(self) -> None:
        """Each terrain renders as a distinct character."""
        assert set(TERRAIN_GLYPHS) == set(Terrain)
        assert len(set(TERRAIN_GLYPHS.values())) == len(Terrain)

    def test_unknown_cells_blank(self) -> None:
        """Ungenerated cells render as spaces."""
        world = World()
        world.add_chunk(create_wall_chunk(Position(x=0, y=0)))
        assert render_map(world, Position(x=0, y=0), 1) == "   \n X \n   "

    def test_world_annotation(self) -> None:
        """The world parameter is annotated with the World model."""
        assert render_map.__annotations__["world"] == "World"
