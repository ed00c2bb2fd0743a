"""Tests for region growth."""

import numpy as np

from worldgen.terrain.regions import grow_region, roll_region_size
from worldgen.types import Position


def _is_connected_in_order(cells: list[Position]) -> bool:
    seen = {cells[0]}
    for cell in cells[1:]:
        if not any(n in seen for n in cell.neighbors()):
            return False
        seen.add(cell)
    return True


class TestGrowRegion:
    """Tests for grow_region."""

    def test_reaches_target_size_in_open_space(self) -> None:
        """Unobstructed growth reaches exactly the target size."""
        rng = np.random.default_rng(0)
        cells = grow_region(Position(x=0, y=0), 25, lambda p: True, rng)
        assert len(cells) == 25

    def test_cells_distinct_and_connected(self) -> None:
        """Cells are unique and each touches an earlier cell."""
        for seed in range(20):
            rng = np.random.default_rng(seed)
            cells = grow_region(Position(x=3, y=-2), 30, lambda p: True, rng)
            assert len(set(cells)) == len(cells)
            assert cells[0] == Position(x=3, y=-2)
            assert _is_connected_in_order(cells)

    def test_never_claims_occupied_cells(self) -> None:
        """Occupied cells are never part of the region."""
        occupied = {Position(x=x, y=1) for x in range(-10, 11)}
        rng = np.random.default_rng(5)
        cells = grow_region(
            Position(x=0, y=0), 40, lambda p: p not in occupied, rng
        )
        assert not occupied & set(cells)

    def test_boxed_in_start_yields_single_cell(self) -> None:
        """A start with no free neighbors stays at size one."""
        start = Position(x=0, y=0)
        rng = np.random.default_rng(1)
        cells = grow_region(start, 10, lambda p: p == start, rng)
        assert cells == [start]

    def test_exhausted_frontier_accepts_smaller_region(self) -> None:
        """A pocket of free cells caps the region below target."""
        pocket = {Position(x=x, y=0) for x in range(4)}
        rng = np.random.default_rng(2)
        cells = grow_region(Position(x=0, y=0), 20, lambda p: p in pocket, rng)
        assert set(cells) == pocket

    def test_nonpositive_target_still_includes_start(self) -> None:
        """A target below one still yields the start cell."""
        rng = np.random.default_rng(2)
        assert grow_region(Position(x=0, y=0), 0, lambda p: True, rng) == [
            Position(x=0, y=0)
        ]

    def test_same_seed_same_region(self) -> None:
        """Equal seeds grow identical regions."""
        a = grow_region(Position(x=0, y=0), 15, lambda p: True, np.random.default_rng(9))
        b = grow_region(Position(x=0, y=0), 15, lambda p: True, np.random.default_rng(9))
        assert a == b


class TestRollRegionSize:
    """Tests for roll_region_size."""

    def test_within_biome_range(self, make_biome) -> None:
        """Sizes stay inside [min_size, max_size]."""
        biome = make_biome(min_size=3, max_size=6)
        rng = np.random.default_rng(0)
        sizes = {roll_region_size(biome, rng) for _ in range(300)}
        assert sizes == {3, 4, 5, 6}
