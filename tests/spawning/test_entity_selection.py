"""Tests for probabilistic candidate selection."""

import numpy as np

from worldgen.config import WorldProfile
from worldgen.spawning import CandidateKind, SpawnCandidate, select_entities


def _item(name: str, **conditions) -> SpawnCandidate:
    return SpawnCandidate(kind=CandidateKind.ITEM, name=name, conditions=conditions)


class TestSelectEntities:
    """Tests for select_entities."""

    def test_respects_max_count(self, make_attributes, items) -> None:
        """Never more than max_count candidates are accepted."""
        candidates = [_item(f"item_{i}", chance=1.0) for i in range(20)]
        profile = WorldProfile(spawn_multiplier=5, resource_density=100)
        for seed in range(10):
            rng = np.random.default_rng(seed)
            selected = select_entities(
                candidates, 3, make_attributes(), items, profile, rng
            )
            assert len(selected) <= 3

    def test_zero_max_count(self, make_attributes, items, profile, rng) -> None:
        """A cap of zero selects nothing."""
        candidates = [_item("stone", chance=1.0)]
        assert select_entities(candidates, 0, make_attributes(), items, profile, rng) == []

    def test_failing_conditions_never_selected(self, make_attributes, items) -> None:
        """Candidates whose conditions fail are never chosen."""
        hot = _item("ember", chance=1.0, temperature={"min": 90})
        mild = _item("stone", chance=1.0)
        attributes = make_attributes(temperature=50)
        profile = WorldProfile(spawn_multiplier=5, resource_density=100)
        for seed in range(30):
            rng = np.random.default_rng(seed)
            selected = select_entities([hot, mild], 5, attributes, items, profile, rng)
            assert hot not in selected

    def test_malformed_candidates_skipped(self, make_attributes, items) -> None:
        """None entries and candidates without conditions never spawn."""
        bare = SpawnCandidate(kind=CandidateKind.ITEM, name="stone")
        nameless = SpawnCandidate(kind=CandidateKind.ITEM, conditions={"chance": 1.0})
        good = _item("wild_herbs", chance=1.0)
        profile = WorldProfile(spawn_multiplier=5, resource_density=100)
        for seed in range(20):
            rng = np.random.default_rng(seed)
            selected = select_entities(
                [None, bare, nameless, good], 5, make_attributes(), items, profile, rng
            )
            assert all(c is good for c in selected)

    def test_high_chance_usually_selected(self, make_attributes, items) -> None:
        """A near-certain candidate is picked in most chunks."""
        candidate = _item("stone", chance=1.0)
        profile = WorldProfile(spawn_multiplier=5, resource_density=100)
        rng = np.random.default_rng(0)
        hits = sum(
            bool(select_entities([candidate], 1, make_attributes(), items, profile, rng))
            for _ in range(200)
        )
        assert hits > 170

    def test_zero_chance_never_selected(self, make_attributes, items, rng) -> None:
        """A zero spawn multiplier keeps every candidate out."""
        candidates = [_item("stone", chance=1.0), _item("wild_herbs", chance=1.0)]
        profile = WorldProfile(spawn_multiplier=0)
        for _ in range(50):
            assert select_entities(candidates, 5, make_attributes(), items, profile, rng) == []

    def test_malformed_soil_data_does_not_abort(self, make_attributes, items) -> None:
        """A candidate with a malformed soil condition is still considered."""
        candidate = _item("stone", chance=1.0, soil_type=5)
        profile = WorldProfile(spawn_multiplier=5, resource_density=100)
        rng = np.random.default_rng(0)
        picked = [
            select_entities([candidate], 1, make_attributes(), items, profile, rng)
            for _ in range(20)
        ]
        assert any(picked)

    def test_payload_candidates(self, make_attributes, items) -> None:
        """Enemies are identified by their payload type."""
        wolf = SpawnCandidate.model_validate(
            {"kind": "enemy", "payload": {"type": "Wolf"}, "conditions": {"chance": 1.0}}
        )
        profile = WorldProfile(spawn_multiplier=5, resource_density=100)
        rng = np.random.default_rng(3)
        picked = [
            select_entities([wolf], 1, make_attributes(), items, profile, rng)
            for _ in range(20)
        ]
        assert any(picked)
        assert all(p == [] or p[0].identity == "Wolf" for p in picked)
