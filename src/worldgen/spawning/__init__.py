"""Entity spawning: candidates, condition checks and the spawn probability model."""

from .candidates import CandidateKind, SpawnCandidate
from .conditions import check_conditions
from .scoring import (
    chunk_multiplier,
    chunk_resource_score,
    density_bonus,
    max_item_types,
    softcap,
    spawn_chance,
    tier_multiplier,
)
from .selection import select_entities

__all__ = [
    "CandidateKind",
    "SpawnCandidate",
    "check_conditions",
    "chunk_multiplier",
    "chunk_resource_score",
    "density_bonus",
    "max_item_types",
    "select_entities",
    "softcap",
    "spawn_chance",
    "tier_multiplier",
]
