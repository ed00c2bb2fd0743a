"""Tests for weighted terrain selection."""

import numpy as np
import pytest

from worldgen.terrain.selection import select_terrain, weighted_choice
from worldgen.terrain_types import Terrain


class TestWeightedChoice:
    """Tests for weighted_choice."""

    def test_converges_to_weights(self) -> None:
        """Weights 1:3 give about 25%/75% over many draws."""
        rng = np.random.default_rng(7)
        trials = 20000
        picks = [weighted_choice(rng, [("A", 1.0), ("B", 3.0)]) for _ in range(trials)]
        share_a = picks.count("A") / trials
        assert share_a == pytest.approx(0.25, abs=0.02)

    def test_zero_weight_never_chosen(self) -> None:
        """An option with zero weight is never drawn when others have weight."""
        rng = np.random.default_rng(1)
        picks = {weighted_choice(rng, [("A", 1.0), ("B", 0.0)]) for _ in range(500)}
        assert picks == {"A"}

    def test_single_option(self) -> None:
        """A single option is always returned."""
        rng = np.random.default_rng(1)
        assert weighted_choice(rng, [("only", 0.5)]) == "only"

    def test_empty_raises(self) -> None:
        """An empty option list is a programming error."""
        with pytest.raises(ValueError):
            weighted_choice(np.random.default_rng(1), [])


class TestSelectTerrain:
    """Tests for select_terrain."""

    def test_picks_from_candidates(self, biomes, rng) -> None:
        """The result is always one of the candidates."""
        candidates = [Terrain.GRASSLAND, Terrain.DESERT]
        for _ in range(100):
            assert select_terrain(candidates, biomes, rng) in candidates

    def test_uses_spread_weight(self, biomes) -> None:
        """Selection follows the biomes' spread weights."""
        rng = np.random.default_rng(3)
        trials = 10000
        # grassland 0.8 vs cave 0.05
        picks = [
            select_terrain([Terrain.GRASSLAND, Terrain.CAVE], biomes, rng)
            for _ in range(trials)
        ]
        share_cave = picks.count(Terrain.CAVE) / trials
        assert share_cave == pytest.approx(0.05 / 0.85, abs=0.015)

    def test_empty_candidates_fall_back(self, biomes, rng) -> None:
        """No candidates selects the fallback terrain."""
        assert select_terrain([], biomes, rng) is Terrain.FOREST
        assert select_terrain([], biomes, rng, fallback=Terrain.BEACH) is Terrain.BEACH

    def test_zero_total_weight_falls_back(self, biomes, rng) -> None:
        """Only zero-weight candidates selects the fallback terrain."""
        assert select_terrain([Terrain.WALL], biomes, rng) is Terrain.FOREST
